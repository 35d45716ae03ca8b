# parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, lines: Iterable[str]) -> ParsedDocument:
        """
        Parse decoded lines and return a structured, deterministic representation.

        Requirements:
        - Deterministic output for same input
        - No state carried between calls
        - Malformed lines never raise
        """
        raise NotImplementedError

    @abstractmethod
    def parse_file(self, path: str | Path) -> ParsedDocument | None:
        """Parse a file on disk. Returns None when the file cannot be opened."""
        raise NotImplementedError
