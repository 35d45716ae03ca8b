# src/nfo_kit/parsers/factory.py

from pathlib import Path

from nfo_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import NfoParserConfig
from .models import ParsedDocument
from .nfo_parser import NfoParser


def create_nfo_parser(
    config: NfoParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> NfoParser:
    return NfoParser(config=config or NfoParserConfig(), metrics_hook=metrics_hook)


def load_nfo(
    path: str | Path,
    config: NfoParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument | None:
    """Parse one NFO file. Returns None if the file cannot be opened."""
    return create_nfo_parser(config, metrics_hook).parse_file(path)
