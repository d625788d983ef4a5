# parsers/models.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class DocumentKind(str, Enum):
    """Coarse document classification supplied by the caller."""

    TRANSCRIPT = "transcript"
    PRESENTATION = "presentation"
    AUDIO = "audio"


_KIND_BY_EXTENSION: dict[str, DocumentKind] = {
    "txt": DocumentKind.TRANSCRIPT,
    "vtt": DocumentKind.TRANSCRIPT,
    "srt": DocumentKind.TRANSCRIPT,
    "json": DocumentKind.TRANSCRIPT,
    "m4a": DocumentKind.AUDIO,
    "mp3": DocumentKind.AUDIO,
    "wav": DocumentKind.AUDIO,
    "pdf": DocumentKind.PRESENTATION,
    "pptx": DocumentKind.PRESENTATION,
    "key": DocumentKind.PRESENTATION,
}


def normalize_extension(extension: str) -> str:
    return extension.strip().lstrip(".").lower()


def kind_for_extension(
    extension: str, default: DocumentKind = DocumentKind.TRANSCRIPT
) -> DocumentKind:
    """Classify a file extension; unknown extensions map to ``default``."""
    return _KIND_BY_EXTENSION.get(normalize_extension(extension), default)


@dataclass(frozen=True)
class TextSegment:
    """One cue, subtitle block, JSON element, PDF page or whole text file.

    Times are seconds from the start of the recording.
    """

    content: str
    start_time: float | None = None
    end_time: float | None = None
    speaker: str | None = None

    @property
    def duration(self) -> float | None:
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time


@dataclass(frozen=True)
class ParsedDocument:
    """Normalized parse result.

    Immutable. Segments are in document order and may be empty.
    """

    source_file_name: str
    document_kind: DocumentKind
    full_text: str
    segments: tuple[TextSegment, ...] = ()
    id: UUID = field(default_factory=uuid4)
    parsed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_placeholder: bool = False

    @property
    def speakers(self) -> list[str]:
        """Distinct speaker names in order of first appearance."""
        seen: dict[str, None] = {}
        for segment in self.segments:
            if segment.speaker is not None:
                seen.setdefault(segment.speaker, None)
        return list(seen)
