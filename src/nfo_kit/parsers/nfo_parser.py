# parsers/nfo_parser.py

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from time import monotonic
from typing import BinaryIO

from nfo_kit.observability import names
from nfo_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import NfoParserConfig
from .context import ParserContext
from .general import match_general
from .media import match_media
from .models import (
    EncodedInfo,
    GeneralInfo,
    MediaInfo,
    ParsedDocument,
    SourceInfo,
)
from .sections import Section, detect_section
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class NfoParser(DocumentParser):
    """
    Section-aware parser for audiobook NFO files.

    - One pass, one line at a time
    - A header line switches section and discards the line after it
    - Unknown labels and malformed values never abort the parse
    """

    def __init__(
        self,
        config: NfoParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or NfoParserConfig()
        self.metrics_hook = metrics_hook

    def parse(self, lines: Iterable[str]) -> ParsedDocument:
        return self._run(lines)

    def parse_file(self, path: str | Path) -> ParsedDocument | None:
        path = Path(path)
        try:
            handle = open(path, "rb")
        except OSError as exc:
            logger.warning("Cannot open NFO file %s: %s", path, exc)
            self.metrics_hook.increment(names.NFO_OPEN_ERRORS_TOTAL)
            return None

        logger.info("Parsing NFO file: %s", path)
        with handle:
            document = self._run(self._decode(handle))
        logger.info(
            "Parsed NFO file %s with %d diagnostics", path, len(document.diagnostics)
        )
        return document

    def _decode(self, handle: BinaryIO) -> Iterator[str | bytes]:
        # Undecodable lines are passed through as bytes so they still count
        for raw in handle:
            try:
                yield raw.decode(self.config.encoding)
            except UnicodeDecodeError:
                yield raw

    def _run(self, lines: Iterable[str | bytes]) -> ParsedDocument:
        start = monotonic()
        ctx = ParserContext()

        for line in lines:
            self._feed(ctx, line)

        document = self._build(ctx)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.NFO_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.NFO_FILES_PARSED_TOTAL)
        self.metrics_hook.record_gauge(names.NFO_LINES_TOTAL, ctx.line_number)
        for diagnostic in document.diagnostics:
            self.metrics_hook.increment(
                names.NFO_FIELD_ERRORS_TOTAL, labels={"field": diagnostic.field}
            )
        return document

    def _feed(self, ctx: ParserContext, line: str | bytes) -> None:
        ctx.line_number += 1

        if ctx.skip_next:
            ctx.skip_next = False
            return

        if isinstance(line, bytes):
            ctx.report("line", repr(line), "undecodable line dropped")
            return

        line = line.rstrip("\r\n")
        if ctx.line_number == 1:
            line = line.removeprefix(_BOM)

        tokens = tokenize(line)

        section = detect_section(tokens)
        if section is not None:
            logger.debug("Line %d: entering section %s", ctx.line_number, section)
            ctx.section = section
            ctx.skip_next = True
            return

        # Description keeps every line, however short
        if ctx.section is Section.DESCRIPTION:
            ctx.description.append(line)
            return

        if len(tokens) < self.config.min_tokens:
            return

        if ctx.section is Section.GENERAL:
            match_general(ctx, tokens)
        elif ctx.section is Section.MEDIA:
            match_media(ctx, tokens)

    def _build(self, ctx: ParserContext) -> ParsedDocument:
        separator = self.config.description_separator
        description = "".join(line + separator for line in ctx.description)

        return ParsedDocument(
            general=GeneralInfo(**ctx.general.values),
            media=MediaInfo(
                source=SourceInfo(**ctx.source.values),
                encoded=EncodedInfo(**ctx.encoded.values),
                **ctx.media.values,
            ),
            description=description or None,
            diagnostics=tuple(ctx.diagnostics),
        )
