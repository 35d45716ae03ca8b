# parsers/general.py

import logging
from collections.abc import Sequence
from datetime import timedelta

from .context import ParserContext
from .tokenizer import join_tokens, parse_int, parse_uint

logger = logging.getLogger(__name__)

# Leading label -> field holding the rest of the line
TEXT_FIELDS: dict[str, str] = {
    "Title": "title",
    "Author": "author",
    "Copyright": "copyright",
    "Genre": "genre",
    "Publisher": "publisher",
}

# Token offset -> unit, for lines like "Duration: 11 hours 30 minutes 5 seconds"
DURATION_OFFSETS: tuple[tuple[int, str], ...] = (
    (1, "hours"),
    (3, "minutes"),
    (5, "seconds"),
)

YES_NO: dict[str, bool] = {"Yes": True, "No": False}


def match_general(ctx: ParserContext, tokens: Sequence[str]) -> None:
    acc = ctx.general
    label = tokens[0]

    if label in TEXT_FIELDS:
        acc.set_once(TEXT_FIELDS[label], join_tokens(tokens[1:]))
    elif label == "Read":
        if tokens[1] == "By":
            acc.set_once("read_by", join_tokens(tokens[2:]))
    elif label == "Duration":
        if not acc.is_set("duration"):
            duration = parse_duration(tokens)
            if duration:
                acc.set_once("duration", duration)
    elif label == "Chapters":
        if not acc.is_set("chapters"):
            text = join_tokens(tokens[1:])
            chapters = parse_uint(text, 32)
            if chapters is None:
                ctx.report(acc.path("chapters"), text, "failed to parse chapters")
            else:
                acc.set_once("chapters", chapters)
    elif label == "Unabridged":
        if tokens[1] in YES_NO:
            acc.set_once("unabridged", YES_NO[tokens[1]])
    else:
        logger.debug("Line %d: unknown general label %r", ctx.line_number, label)


def parse_duration(tokens: Sequence[str]) -> timedelta:
    """
    Sum the components found at the fixed offsets.

    Missing or non-numeric components contribute nothing.
    """
    duration = timedelta()
    for offset, unit in DURATION_OFFSETS:
        if offset >= len(tokens):
            break
        amount = parse_int(tokens[offset])
        if amount is None:
            continue
        try:
            duration += timedelta(**{unit: amount})
        except OverflowError:
            logger.debug("Duration %s component out of range: %d", unit, amount)
    return duration
