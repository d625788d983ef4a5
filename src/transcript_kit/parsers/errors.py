# parsers/errors.py

"""Parse failures shared by every format parser.

Each parse call either returns a complete ``ParsedDocument`` or raises
exactly one of these. Nothing is retried and no partial document is kept.
"""


class ParseError(Exception):
    """Base class for all parsing failures."""

    def __init__(self, message: str, source_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source_name = source_name

    def __str__(self) -> str:
        if self.source_name:
            return f"{self.source_name}: {self.message}"
        return self.message


class UnreadableFileError(ParseError):
    """Bytes could not be obtained or decoded as UTF-8."""


class InvalidFormatError(ParseError):
    """Content was readable but does not match the expected grammar."""


class UnableToLoadError(ParseError):
    """The PDF could not be opened at all."""


class NoExtractableContentError(ParseError):
    """The PDF opened but no page yielded any text."""


class UnsupportedFormatError(ParseError):
    """The format is acknowledged but not implemented (PPTX, Keynote, audio)."""
