# parsers/tokenizer.py

from collections.abc import Sequence

import regex

# Default Unicode word boundaries (UAX #29). VERSION1 lets split() cut on
# zero-width matches.
_WORD_BOUNDARY = regex.compile(r"\b", flags=regex.WORD | regex.VERSION1)
_UINT = regex.compile(r"[0-9]+")
_INT = regex.compile(r"[+-]?[0-9]+")


def tokenize(line: str) -> list[str]:
    """
    Split a line into word tokens.

    - Segments follow Unicode word boundary rules ("44.1" stays whole)
    - Segments without any alphanumeric character are dropped
    """
    return [
        segment
        for segment in _WORD_BOUNDARY.split(line)
        if any(ch.isalnum() for ch in segment)
    ]


def join_tokens(tokens: Sequence[str]) -> str:
    return " ".join(tokens)


def parse_uint(text: str, bits: int) -> int | None:
    """Strict ASCII decimal parse, bounded to an unsigned `bits`-bit range."""
    if not _UINT.fullmatch(text):
        return None
    value = int(text)
    if value >= 1 << bits:
        return None
    return value


def parse_int(text: str) -> int | None:
    if not _INT.fullmatch(text):
        return None
    return int(text)
