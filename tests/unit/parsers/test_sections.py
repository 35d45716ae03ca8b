import pytest

from nfo_kit.parsers.sections import Section, detect_section
from nfo_kit.parsers.tokenizer import tokenize


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("General Information", Section.GENERAL),
        ("Media Information", Section.MEDIA),
        ("Book Description", Section.DESCRIPTION),
        ("  General Information  ", Section.GENERAL),
    ],
)
def test_detects_headers(line: str, expected: Section) -> None:
    assert detect_section(tokenize(line)) is expected


@pytest.mark.parametrize(
    "line",
    [
        "General",
        "general information",
        "Information General",
        "Title: General Information",
        "Book Descriptions",
        "",
    ],
)
def test_other_lines_are_not_headers(line: str) -> None:
    assert detect_section(tokenize(line)) is None


def test_extra_words_after_header_still_match() -> None:
    """Only the first two tokens are compared."""
    assert detect_section(tokenize("Media Information (rip)")) is Section.MEDIA
