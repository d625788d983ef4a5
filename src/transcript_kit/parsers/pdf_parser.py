# parsers/pdf_parser.py

import io
import logging
from typing import Any, cast

import pdfplumber
from pdfminer.psparser import PSException
from pdfplumber.utils.exceptions import PdfminerException

from .base import DocumentParser, Source
from .errors import NoExtractableContentError, UnableToLoadError
from .models import DocumentKind, ParsedDocument, TextSegment

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n---\n\n"


class PdfParser(DocumentParser):
    """
    Deterministic PDF parser.
    - Uses page order
    - One segment per page with text
    - Blank pages are dropped
    """

    format_name = "pdf"

    def parse(
        self,
        source: Source,
        *,
        source_name: str = "",
        kind: DocumentKind = DocumentKind.PRESENTATION,
    ) -> ParsedDocument:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))

        pages = self._extract_pages(source, source_name)

        if not pages:
            logger.error("No extractable text in %s", source_name)
            raise NoExtractableContentError("PDF contains no extractable text", source_name)

        return ParsedDocument(
            source_file_name=source_name,
            document_kind=kind,
            full_text=PAGE_SEPARATOR.join(pages),
            segments=tuple(TextSegment(content=page) for page in pages),
        )

    def _extract_pages(self, source: Any, source_name: str) -> list[str]:
        pages: list[str] = []
        try:
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                for page_number, page in enumerate(pdf.pages, start=1):
                    text = (page.extract_text() or "").strip()
                    if not text:
                        logger.debug("Page %d of %s has no text", page_number, source_name)
                        continue
                    pages.append(text)
        except (PdfminerException, PSException, OSError, ValueError) as exc:
            logger.error("Unable to load PDF %s: %s", source_name, exc)
            raise UnableToLoadError(f"Unable to load PDF file: {exc}", source_name) from exc
        return pages
