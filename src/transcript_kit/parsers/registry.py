# parsers/registry.py

"""Table-driven parser selection.

Keys are ``(kind, extension)``. ``"*"`` as the extension is the fallback for
a kind. A missing entry is a capability gap: callers substitute a placeholder
document instead of parsing.
"""

import logging

from .base import DocumentParser
from .json_parser import JsonTranscriptParser
from .models import DocumentKind, normalize_extension
from .pdf_parser import PdfParser
from .srt_parser import SrtParser
from .text_parser import PlainTextParser
from .vtt_parser import WebVttParser

logger = logging.getLogger(__name__)

ANY_EXTENSION = "*"

RegistryKey = tuple[DocumentKind, str]


class ParserRegistry:
    def __init__(self) -> None:
        self._parsers: dict[RegistryKey, DocumentParser] = {}

    def register(
        self, kind: DocumentKind, extension: str, parser: DocumentParser
    ) -> None:
        key = (kind, self._normalize(extension))
        if key in self._parsers:
            raise ValueError(f"Parser for {kind.value}/{key[1]} already registered")

        self._parsers[key] = parser
        logger.debug("Registered parser %s for %s/%s", type(parser).__name__, kind.value, key[1])

    def resolve(self, kind: DocumentKind, extension: str) -> DocumentParser | None:
        """Return the parser for this kind and extension, or None for a gap."""
        extension = self._normalize(extension)
        parser = self._parsers.get((kind, extension))
        if parser is None:
            parser = self._parsers.get((kind, ANY_EXTENSION))
        if parser is None:
            logger.debug("No parser for %s/%s", kind.value, extension)
        return parser

    def remove(self, kind: DocumentKind, extension: str) -> None:
        key = (kind, self._normalize(extension))
        try:
            del self._parsers[key]
            logger.debug("Removed parser for %s/%s", kind.value, key[1])
        except KeyError:
            logger.error("Cannot remove parser, not found: %s/%s", kind.value, key[1])
            raise KeyError(f"Parser for {kind.value}/{key[1]} not found")

    def list(self) -> dict[RegistryKey, DocumentParser]:
        # return a shallow copy to avoid mutation
        return dict(self._parsers)

    @staticmethod
    def _normalize(extension: str) -> str:
        if extension == ANY_EXTENSION:
            return extension
        return normalize_extension(extension)


def build_default_registry() -> ParserRegistry:
    """Return the default table.

    transcript: vtt, srt, json, anything else as plain text.
    presentation: pdf only. audio: nothing yet.
    """
    registry = ParserRegistry()
    registry.register(DocumentKind.TRANSCRIPT, "vtt", WebVttParser())
    registry.register(DocumentKind.TRANSCRIPT, "srt", SrtParser())
    registry.register(DocumentKind.TRANSCRIPT, "json", JsonTranscriptParser())
    registry.register(DocumentKind.TRANSCRIPT, ANY_EXTENSION, PlainTextParser())
    registry.register(DocumentKind.PRESENTATION, "pdf", PdfParser())
    return registry
