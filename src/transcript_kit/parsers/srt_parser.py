# parsers/srt_parser.py

import logging

from .base import DocumentParser, Source, decode_utf8
from .models import DocumentKind, ParsedDocument, TextSegment
from .timestamps import CUE_RANGE_DELIMITER, parse_cue_range

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"


class SrtParser(DocumentParser):
    """
    SRT subtitle parser.
    - Blocks are separated by a double newline; whitespace-only lines inside a block are dropped
    - Line 0 is the index (not validated), line 1 the time range
    - Remaining lines are joined with single spaces
    - Malformed blocks are skipped, never fatal
    """

    format_name = "srt"

    def parse(
        self,
        source: Source,
        *,
        source_name: str = "",
        kind: DocumentKind = DocumentKind.TRANSCRIPT,
    ) -> ParsedDocument:
        raw = decode_utf8(source, source_name)
        text = raw.replace("\r\n", "\n").replace("\r", "\n")

        segments: list[TextSegment] = []
        skipped = 0

        for block in text.split(BLOCK_SEPARATOR):
            lines = [line.strip() for line in block.split("\n") if line.strip()]

            if len(lines) < 3 or CUE_RANGE_DELIMITER not in lines[1]:
                if lines:
                    skipped += 1
                continue

            start_time, end_time = parse_cue_range(lines[1])
            segments.append(
                TextSegment(
                    content=" ".join(lines[2:]),
                    start_time=start_time,
                    end_time=end_time,
                )
            )

        if skipped:
            logger.debug("Skipped %d malformed blocks in %s", skipped, source_name)

        return ParsedDocument(
            source_file_name=source_name,
            document_kind=kind,
            full_text=BLOCK_SEPARATOR.join(s.content for s in segments),
            segments=tuple(segments),
        )
