from .base import DocumentParser
from .config import NfoParserConfig
from .factory import create_nfo_parser, load_nfo
from .models import (
    EncodedInfo,
    GeneralInfo,
    MediaInfo,
    ParseDiagnostic,
    ParsedDocument,
    SourceInfo,
)
from .nfo_parser import NfoParser
from .sections import Section
from .tokenizer import tokenize

__all__ = [
    "DocumentParser",
    "EncodedInfo",
    "GeneralInfo",
    "MediaInfo",
    "NfoParser",
    "NfoParserConfig",
    "ParseDiagnostic",
    "ParsedDocument",
    "Section",
    "SourceInfo",
    "create_nfo_parser",
    "load_nfo",
    "tokenize",
]
