from pathlib import Path

import pytest

from transcript_kit.parsers.dispatcher import parse_file
from transcript_kit.parsers.errors import NoExtractableContentError, UnableToLoadError
from transcript_kit.parsers.models import DocumentKind, ParsedDocument
from transcript_kit.parsers.pdf_parser import PAGE_SEPARATOR, PdfParser

# --- Document-level tests ---


def test_sets_presentation_kind(parsed_deck: ParsedDocument) -> None:
    assert parsed_deck.document_kind == DocumentKind.PRESENTATION
    assert parsed_deck.source_file_name == "deck.pdf"


def test_one_segment_per_page_with_text(parsed_deck: ParsedDocument) -> None:
    assert len(parsed_deck.segments) == 2


def test_pages_are_in_order(parsed_deck: ParsedDocument) -> None:
    first, second = parsed_deck.segments
    assert "Q3 PLANNING" in first.content
    assert "Agenda: roadmap, hiring, budget" in first.content
    assert "Ship transcript import by October." in second.content


def test_full_text_joins_pages_with_separator(parsed_deck: ParsedDocument) -> None:
    assert parsed_deck.full_text == PAGE_SEPARATOR.join(
        s.content for s in parsed_deck.segments
    )
    assert "\n\n---\n\n" in parsed_deck.full_text


def test_segments_have_no_metadata(parsed_deck: ParsedDocument) -> None:
    for segment in parsed_deck.segments:
        assert segment.content == segment.content.strip()
        assert segment.speaker is None
        assert segment.start_time is None
        assert segment.end_time is None


# --- Input variants ---


def test_accepts_raw_bytes(pdf_dir: Path, parsed_deck: ParsedDocument) -> None:
    result = PdfParser().parse((pdf_dir / "deck.pdf").read_bytes())
    assert result.segments == parsed_deck.segments


def test_parse_file_dispatches_pdf(pdf_dir: Path, parsed_deck: ParsedDocument) -> None:
    result = parse_file(pdf_dir / "deck.pdf")
    assert result.full_text == parsed_deck.full_text


# --- Determinism test ---


def test_parsing_is_deterministic(pdf_dir: Path) -> None:
    parser = PdfParser()
    path = pdf_dir / "deck.pdf"

    with open(path, "rb") as f:
        first = parser.parse(f)
    with open(path, "rb") as f:
        second = parser.parse(f)

    assert first.full_text == second.full_text
    assert first.segments == second.segments


# --- Failure modes ---


def test_blank_pdf_raises_no_extractable_content(pdf_dir: Path) -> None:
    with pytest.raises(NoExtractableContentError):
        PdfParser().parse((pdf_dir / "blank.pdf").read_bytes())


def test_invalid_pdf_raises_unable_to_load(pdf_dir: Path) -> None:
    with open(pdf_dir / "notapdf.pdf", "rb") as f:
        with pytest.raises(UnableToLoadError):
            PdfParser().parse(f)


def test_load_failure_is_distinct_from_empty_content(pdf_dir: Path) -> None:
    with pytest.raises(UnableToLoadError) as exc_info:
        PdfParser().parse(b"")
    assert not isinstance(exc_info.value, NoExtractableContentError)


def test_unexpected_errors_are_not_reported_as_load_failures(
    pdf_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_open(*args: object, **kwargs: object) -> None:
        raise RuntimeError("extraction bug")

    monkeypatch.setattr("transcript_kit.parsers.pdf_parser.pdfplumber.open", broken_open)

    with pytest.raises(RuntimeError, match="extraction bug"):
        PdfParser().parse((pdf_dir / "deck.pdf").read_bytes())
