import io

import pytest

from transcript_kit.parsers.errors import UnreadableFileError
from transcript_kit.parsers.models import DocumentKind
from transcript_kit.parsers.text_parser import PlainTextParser


@pytest.fixture
def parser() -> PlainTextParser:
    return PlainTextParser()


def test_whole_file_is_one_segment(parser: PlainTextParser) -> None:
    content = "This is a simple text file.\nIt has multiple lines.\nAnd should be parsed correctly."
    result = parser.parse(content.encode("utf-8"), source_name="test.txt")

    assert result.source_file_name == "test.txt"
    assert result.document_kind == DocumentKind.TRANSCRIPT
    assert result.full_text == content
    assert len(result.segments) == 1
    assert result.segments[0].content == content
    assert result.segments[0].speaker is None
    assert result.segments[0].start_time is None


def test_empty_file(parser: PlainTextParser) -> None:
    result = parser.parse(b"")

    assert result.full_text == ""
    assert len(result.segments) == 1
    assert result.segments[0].content == ""


def test_content_is_kept_verbatim(parser: PlainTextParser) -> None:
    content = "  leading\r\n\n\ttrailing  \n"
    result = parser.parse(content.encode("utf-8"))

    assert result.full_text == content
    assert result.segments[0].content == content


def test_accepts_binary_stream(parser: PlainTextParser) -> None:
    result = parser.parse(io.BytesIO("Grüße aus Köln".encode("utf-8")))
    assert result.full_text == "Grüße aus Köln"


def test_records_caller_kind(parser: PlainTextParser) -> None:
    result = parser.parse(b"notes", kind=DocumentKind.PRESENTATION)
    assert result.document_kind == DocumentKind.PRESENTATION


def test_invalid_utf8_raises(parser: PlainTextParser) -> None:
    with pytest.raises(UnreadableFileError):
        parser.parse(b"\xff\xfe\xfa not utf-8", source_name="bad.txt")
