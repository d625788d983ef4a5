# src/transcript_kit/parsers/config.py

from dataclasses import dataclass

from .models import DocumentKind


@dataclass(frozen=True)
class ParsingConfig:
    """Configuration for file-level parsing.

    Immutable. Explicit. No magic defaults from environment.
    """

    default_kind: DocumentKind = DocumentKind.TRANSCRIPT  # For unknown extensions
    placeholder_for_unsupported: bool = True
