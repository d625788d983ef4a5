from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from transcript_kit.parsers.models import ParsedDocument
from transcript_kit.parsers.pdf_parser import PdfParser


def _draw_lines(c: canvas.Canvas, lines: list[str]) -> None:
    _, height = LETTER
    text = c.beginText(40, height - 50)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()


def _create_deck_pdf(path: Path) -> None:
    """Creates a deterministic three-slide deck with a blank middle slide."""
    c = canvas.Canvas(str(path), pagesize=LETTER)

    _draw_lines(
        c,
        [
            "Q3 PLANNING",
            "Agenda: roadmap, hiring, budget",
        ],
    )

    # Blank slide
    c.showPage()

    _draw_lines(
        c,
        [
            "ROADMAP",
            "Ship transcript import by October.",
        ],
    )

    c.save()


def _create_blank_pdf(path: Path) -> None:
    """Creates a PDF that opens fine but has no text on any page."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    c.showPage()
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_deck_pdf(dir_path / "deck.pdf")
    _create_blank_pdf(dir_path / "blank.pdf")
    (dir_path / "notapdf.pdf").write_text("Not a real PDF", encoding="utf-8")

    return dir_path


@pytest.fixture(scope="module")
def parsed_deck(pdf_dir: Path) -> ParsedDocument:
    """Parse the deck once, reuse across tests."""
    parser = PdfParser()
    with open(pdf_dir / "deck.pdf", "rb") as f:
        return parser.parse(f, source_name="deck.pdf")
