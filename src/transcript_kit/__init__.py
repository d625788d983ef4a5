# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentKind,
    DocumentParser,
    InvalidFormatError,
    NoExtractableContentError,
    ParsedDocument,
    ParseError,
    ParseOutcome,
    ParserRegistry,
    ParsingConfig,
    TextSegment,
    UnableToLoadError,
    UnreadableFileError,
    UnsupportedFormatError,
    build_default_registry,
    kind_for_extension,
    parse,
    parse_file,
    parse_files,
    placeholder_document,
)

__all__ = [
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentKind",
    "DocumentParser",
    "ParsedDocument",
    "ParseOutcome",
    "ParserRegistry",
    "ParsingConfig",
    "TextSegment",
    "build_default_registry",
    "kind_for_extension",
    "parse",
    "parse_file",
    "parse_files",
    "placeholder_document",
    # Errors
    "ParseError",
    "InvalidFormatError",
    "NoExtractableContentError",
    "UnableToLoadError",
    "UnreadableFileError",
    "UnsupportedFormatError",
]
