"""Reference-range parsing."""

import logging
import re

from ..schemas.reference_range import (
    Interval,
    LowerBound,
    RangePredicate,
    Unparseable,
    UpperBound,
)

logger = logging.getLogger(__name__)

# Leading decimal of a string; trailing units ("g/dL", "U/L") are ignored
_LEADING_DECIMAL = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_decimal(text: str | None) -> float | None:
    """Parse the leading decimal number of a string.

    Returns None when the text does not start with a number, e.g. "Absent"
    or "Pale Yellow".
    """
    if not text:
        return None
    match = _LEADING_DECIMAL.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_reference_range(range_text: str | None) -> RangePredicate:
    """Parse a free-text reference range into a predicate.

    Grammars, checked in order:
    - "a-b": interval, split on the first "-" that is not a leading sign
    - "<b": upper bound, values >= b are abnormal
    - ">a": lower bound, values <= a are abnormal
    Anything else, or an interval side that is not a number, is Unparseable.
    """
    text = (range_text or "").strip()
    if not text:
        return Unparseable(text="")

    start = 1 if text[0] in "+-" else 0
    dash = text.find("-", start)
    if dash != -1:
        low = parse_decimal(text[:dash].strip())
        high = parse_decimal(text[dash + 1 :].strip())
        if low is None or high is None:
            logger.debug(f"Interval reference range not numeric: {text!r}")
            return Unparseable(text=text)
        return Interval(min=low, max=high)

    if text.startswith("<"):
        bound = parse_decimal(text[1:].strip())
        if bound is None:
            return Unparseable(text=text)
        return UpperBound(max=bound)

    if text.startswith(">"):
        bound = parse_decimal(text[1:].strip())
        if bound is None:
            return Unparseable(text=text)
        return LowerBound(min=bound)

    return Unparseable(text=text)
