# parsers/sections.py

from collections.abc import Sequence
from enum import Enum


class Section(Enum):
    NONE = "none"
    GENERAL = "general"
    MEDIA = "media"
    DESCRIPTION = "description"


SECTION_HEADERS: dict[tuple[str, str], Section] = {
    ("General", "Information"): Section.GENERAL,
    ("Media", "Information"): Section.MEDIA,
    ("Book", "Description"): Section.DESCRIPTION,
}


def detect_section(tokens: Sequence[str]) -> Section | None:
    """Return the section a header line opens, or None for any other line."""
    if len(tokens) < 2:
        return None
    return SECTION_HEADERS.get((tokens[0], tokens[1]))
