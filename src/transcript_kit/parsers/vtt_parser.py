# parsers/vtt_parser.py

import logging

from .base import DocumentParser, Source, decode_utf8
from .errors import InvalidFormatError
from .models import DocumentKind, ParsedDocument, TextSegment
from .speakers import extract_voice_tag
from .timestamps import CUE_RANGE_DELIMITER, parse_cue_range

logger = logging.getLogger(__name__)

WEBVTT_HEADER = "WEBVTT"
CUE_SEPARATOR = "\n\n"


class WebVttParser(DocumentParser):
    """
    WebVTT cue parser.
    - Requires the WEBVTT header
    - One segment per non-empty cue, in file order
    - Speaker taken from <v Name> tags; a later tag in the same cue wins
    - Cue lines are concatenated as-is, without a separator
    """

    format_name = "vtt"

    def parse(
        self,
        source: Source,
        *,
        source_name: str = "",
        kind: DocumentKind = DocumentKind.TRANSCRIPT,
    ) -> ParsedDocument:
        content = decode_utf8(source, source_name).lstrip("\ufeff")

        if not content.startswith(WEBVTT_HEADER):
            logger.error("Missing %s header in %s", WEBVTT_HEADER, source_name)
            raise InvalidFormatError(f"Missing {WEBVTT_HEADER} header", source_name)

        segments: list[TextSegment] = []
        full_text_parts: list[str] = []

        lines = content.splitlines()
        i = 0

        while i < len(lines):
            line = lines[i].strip()

            if CUE_RANGE_DELIMITER in line:
                start_time, end_time = parse_cue_range(line)
                i += 1

                cue_text = ""
                speaker: str | None = None

                while i < len(lines) and lines[i].strip():
                    tag = extract_voice_tag(lines[i])
                    if tag is not None:
                        speaker = tag.speaker
                        cue_text += tag.text
                    else:
                        cue_text += lines[i]
                    i += 1

                clean = cue_text.strip()
                if clean:
                    segments.append(
                        TextSegment(
                            content=clean,
                            start_time=start_time,
                            end_time=end_time,
                            speaker=speaker,
                        )
                    )
                    full_text_parts.append(f"{speaker}: {clean}" if speaker else clean)
                else:
                    logger.debug("Skipping empty cue at line %d in %s", i, source_name)

            i += 1

        logger.debug("Parsed %d cues from %s", len(segments), source_name)

        return ParsedDocument(
            source_file_name=source_name,
            document_kind=kind,
            full_text=CUE_SEPARATOR.join(full_text_parts),
            segments=tuple(segments),
        )
