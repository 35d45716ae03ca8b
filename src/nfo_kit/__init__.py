# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentParser,
    EncodedInfo,
    GeneralInfo,
    MediaInfo,
    NfoParser,
    NfoParserConfig,
    ParseDiagnostic,
    ParsedDocument,
    SourceInfo,
    create_nfo_parser,
    load_nfo,
)

__all__ = [
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "EncodedInfo",
    "GeneralInfo",
    "MediaInfo",
    "NfoParser",
    "NfoParserConfig",
    "ParseDiagnostic",
    "ParsedDocument",
    "SourceInfo",
    "create_nfo_parser",
    "load_nfo",
]
