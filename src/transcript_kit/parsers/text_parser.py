# parsers/text_parser.py

import logging

from .base import DocumentParser, Source, decode_utf8
from .models import DocumentKind, ParsedDocument, TextSegment

logger = logging.getLogger(__name__)


class PlainTextParser(DocumentParser):
    """Whole file becomes one segment, verbatim."""

    format_name = "txt"

    def parse(
        self,
        source: Source,
        *,
        source_name: str = "",
        kind: DocumentKind = DocumentKind.TRANSCRIPT,
    ) -> ParsedDocument:
        content = decode_utf8(source, source_name)
        logger.debug("Read %d characters of plain text from %s", len(content), source_name)

        return ParsedDocument(
            source_file_name=source_name,
            document_kind=kind,
            full_text=content,
            segments=(TextSegment(content=content),),
        )
