# parsers/json_parser.py

"""JSON transcript exports.

Three shapes are accepted, tried strictly in this order:

1. ``{"text": "...", "segments": [...]}``
2. ``{"transcript": "...", "segments": [...]}``
3. ``[{"text": "...", "start": 0.0, "end": 1.5, "speaker": "..."}, ...]``

For (1) and (2) the top-level string is the full text even when segments are
present; without usable segments the whole string becomes one segment.
"""

import json
import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .base import DocumentParser, Source, read_source
from .errors import InvalidFormatError
from .models import DocumentKind, ParsedDocument, TextSegment

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = "\n\n"


class SegmentPayload(BaseModel):
    """One exported segment. Wrongly typed fields fall back to empty/absent."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    start: float | None = None
    end: float | None = None
    speaker: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("speaker", mode="before")
    @classmethod
    def _speaker_or_none(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("start", "end", mode="before")
    @classmethod
    def _seconds_or_none(cls, value: Any) -> float | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        try:
            return float(value)
        except OverflowError:
            return None

    def to_segment(self) -> TextSegment:
        return TextSegment(
            content=self.text,
            start_time=self.start,
            end_time=self.end,
            speaker=self.speaker,
        )


class _TopLevelTranscript(BaseModel):
    segments: list[SegmentPayload] | None = None

    @field_validator("segments", mode="before")
    @classmethod
    def _object_segments_or_none(cls, value: Any) -> Any:
        # Only an array made entirely of objects counts as a segments list
        if isinstance(value, list) and all(isinstance(item, dict) for item in value):
            return value
        return None


class TextFieldTranscript(_TopLevelTranscript):
    text: StrictStr


class TranscriptFieldTranscript(_TopLevelTranscript):
    transcript: StrictStr


_SEGMENT_ARRAY = TypeAdapter(list[SegmentPayload])


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


class JsonTranscriptParser(DocumentParser):
    format_name = "json"

    def parse(
        self,
        source: Source,
        *,
        source_name: str = "",
        kind: DocumentKind = DocumentKind.TRANSCRIPT,
    ) -> ParsedDocument:
        raw = read_source(source, source_name)

        try:
            payload = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
            # pathologically deep nesting exhausts the decoder stack
            logger.error("Invalid JSON in %s: %s", source_name, exc)
            raise InvalidFormatError(f"Invalid JSON: {exc}", source_name) from exc

        full_text, segments = self._decode(payload, source_name)
        logger.debug("Decoded %d JSON segments from %s", len(segments), source_name)

        return ParsedDocument(
            source_file_name=source_name,
            document_kind=kind,
            full_text=full_text,
            segments=tuple(segments),
        )

    def _decode(self, payload: Any, source_name: str) -> tuple[str, list[TextSegment]]:
        for model, field in (
            (TextFieldTranscript, "text"),
            (TranscriptFieldTranscript, "transcript"),
        ):
            try:
                document = model.model_validate(payload)
            except ValidationError:
                continue

            full_text: str = getattr(document, field)
            segments = [s.to_segment() for s in document.segments or []]
            if not segments:
                segments = [TextSegment(content=full_text)]
            return full_text, segments

        try:
            items = _SEGMENT_ARRAY.validate_python(payload)
        except ValidationError as exc:
            logger.error("Unrecognized JSON transcript shape in %s", source_name)
            raise InvalidFormatError(
                "JSON is neither a text/transcript object nor an array of segments",
                source_name,
            ) from exc

        segments = [item.to_segment() for item in items]
        return SEGMENT_SEPARATOR.join(s.content for s in segments), segments
