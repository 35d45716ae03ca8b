# src/nfo_kit/parsers/config.py

import codecs
from dataclasses import dataclass


@dataclass(frozen=True)
class NfoParserConfig:
    """Configuration for the NFO parser.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Appended after every description line. Not a real newline.
    description_separator: str = "/n"
    min_tokens: int = 2
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.min_tokens < 2:
            raise ValueError("min_tokens must be >= 2")
        if not self.description_separator:
            raise ValueError("description_separator must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")
        # Files are split on b"\n" before decoding, one line at a time
        try:
            newline = "\n".encode(self.encoding)
        except LookupError:
            raise ValueError(f"Not a text encoding: {self.encoding}")
        if newline != b"\n":
            raise ValueError(
                f"Encoding must be ASCII-compatible for line splitting: {self.encoding}"
            )
