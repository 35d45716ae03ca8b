# parsers/media.py

import logging
from collections.abc import Sequence

from .context import FieldAccumulator, ParserContext
from .general import YES_NO
from .tokenizer import join_tokens, parse_uint

logger = logging.getLogger(__name__)

# Second token -> text field, per stream record
SOURCE_TEXT_FIELDS: dict[str, str] = {"Format": "format", "Bitrate": "bitrate"}
ENCODED_TEXT_FIELDS: dict[str, str] = {"Codec": "codec", "Bitrate": "bitrate"}

CHAPTER_NOTES: dict[str, str] = {"Adjust": "chapter_adjust", "Rename": "chapter_rename"}


def match_media(ctx: ParserContext, tokens: Sequence[str]) -> None:
    label = tokens[0]

    if label == "Source":
        _match_stream(ctx, ctx.source, SOURCE_TEXT_FIELDS, tokens)
    elif label == "Encoded":
        _match_stream(ctx, ctx.encoded, ENCODED_TEXT_FIELDS, tokens)
    elif label == "Lossless":
        # Both "Lossless: Yes" and "Lossless Encode: Yes"
        answer = tokens[2] if tokens[1] == "Encode" and len(tokens) > 2 else tokens[1]
        if answer in YES_NO:
            ctx.encoded.set_once("lossless", YES_NO[answer])
    elif label == "Chapter":
        if tokens[1] in CHAPTER_NOTES:
            ctx.media.set_once(CHAPTER_NOTES[tokens[1]], join_tokens(tokens[2:]))
    elif label == "Ripper":
        ctx.media.set_once("ripper", join_tokens(tokens[1:]))
    elif label == "ID":
        if tokens[1] == "Tagging":
            ctx.media.set_once("id_tagging", join_tokens(tokens[2:]))
    else:
        logger.debug("Line %d: unknown media label %r", ctx.line_number, label)


def _match_stream(
    ctx: ParserContext,
    acc: FieldAccumulator,
    text_fields: dict[str, str],
    tokens: Sequence[str],
) -> None:
    """Handle "<Source|Encoded> <attribute>: value" lines."""
    attribute = tokens[1]

    if attribute in text_fields:
        acc.set_once(text_fields[attribute], join_tokens(tokens[2:]))
    elif attribute == "Sample":
        if len(tokens) > 2 and tokens[2] == "Rate":
            acc.set_once("sample_rate", join_tokens(tokens[3:]))
    elif attribute == "Channels":
        if not acc.is_set("channels"):
            text = join_tokens(tokens[2:])
            channels = parse_uint(text, 16)
            if channels is None:
                ctx.report(acc.path("channels"), text, "failed to parse channels")
            else:
                acc.set_once("channels", channels)
