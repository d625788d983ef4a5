# src/transcript_kit/parsers/__init__.py

"""Document parsing layer for transcript-kit.

Turns meeting artifacts (plain text, WebVTT, SRT, JSON transcription
exports, PDF decks) into one normalized ParsedDocument.

Design principles:
- Pure: same bytes, extension and kind give the same text and segments
- One failure per call: a ParseError or a complete document, never partial
- Lenient where real exports are sloppy (bad timestamp fields, broken SRT
  blocks, empty cues), strict on grammar (missing header, unknown JSON shape)
- Table-driven: formats are added through ParserRegistry, not by editing
  individual parsers

Example:
    >>> from transcript_kit.parsers import DocumentKind, parse
    >>>
    >>> with open("standup.vtt", "rb") as f:
    ...     document = parse(f, extension="vtt", kind=DocumentKind.TRANSCRIPT)
    >>> document.speakers
    ['Sarah Chen', 'Mike Rodriguez']
"""

from .base import DocumentParser
from .config import ParsingConfig
from .dispatcher import ParseOutcome, parse, parse_file, parse_files, placeholder_document
from .errors import (
    InvalidFormatError,
    NoExtractableContentError,
    ParseError,
    UnableToLoadError,
    UnreadableFileError,
    UnsupportedFormatError,
)
from .json_parser import JsonTranscriptParser
from .models import DocumentKind, ParsedDocument, TextSegment, kind_for_extension
from .pdf_parser import PdfParser
from .registry import ParserRegistry, build_default_registry
from .speakers import VoiceTag, extract_voice_tag
from .srt_parser import SrtParser
from .text_parser import PlainTextParser
from .timestamps import parse_timestamp
from .vtt_parser import WebVttParser

__all__ = [
    # Operations
    "parse",
    "parse_file",
    "parse_files",
    "placeholder_document",
    # Dispatch
    "ParserRegistry",
    "build_default_registry",
    # Config
    "ParsingConfig",
    # Parsers
    "DocumentParser",
    "JsonTranscriptParser",
    "PdfParser",
    "PlainTextParser",
    "SrtParser",
    "WebVttParser",
    # Helpers
    "VoiceTag",
    "extract_voice_tag",
    "kind_for_extension",
    "parse_timestamp",
    # Types
    "DocumentKind",
    "ParsedDocument",
    "ParseOutcome",
    "TextSegment",
    # Errors
    "ParseError",
    "InvalidFormatError",
    "NoExtractableContentError",
    "UnableToLoadError",
    "UnreadableFileError",
    "UnsupportedFormatError",
]
