# parsers/base.py

import logging
from abc import ABC, abstractmethod
from typing import BinaryIO

from .errors import UnreadableFileError
from .models import DocumentKind, ParsedDocument

logger = logging.getLogger(__name__)

Source = bytes | BinaryIO


class DocumentParser(ABC):
    format_name: str = "unknown"

    @abstractmethod
    def parse(
        self,
        source: Source,
        *,
        source_name: str = "",
        kind: DocumentKind = DocumentKind.TRANSCRIPT,
    ) -> ParsedDocument:
        """
        Parse raw content and return a normalized document.

        Requirements:
        - Deterministic output for same input (only id and parsed_at vary)
        - kind is recorded as given, never re-derived
        - No resource handle retained after returning
        """
        raise NotImplementedError


def read_source(source: Source, source_name: str = "") -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    try:
        return source.read()
    except OSError as exc:
        logger.error("Failed to read %s: %s", source_name or "<stream>", exc)
        raise UnreadableFileError(f"Unable to read file: {exc}", source_name) from exc


def decode_utf8(source: Source, source_name: str = "") -> str:
    raw = read_source(source, source_name)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error("%s is not valid UTF-8: %s", source_name or "<stream>", exc)
        raise UnreadableFileError("File is not valid UTF-8 text", source_name) from exc
