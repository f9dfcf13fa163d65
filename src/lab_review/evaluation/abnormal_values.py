"""Abnormal lab value detection against reference ranges."""

from ..schemas.reference_range import RangePredicate
from .reference_ranges import parse_decimal, parse_reference_range

# Qualitative results that are never flagged
NORMAL_LITERALS = frozenset({"Absent", "Normal"})


def _is_empty(value: str | float | None) -> bool:
    """Missing values, empty strings and numeric zero count as not entered."""
    if isinstance(value, str):
        return value == ""
    return not value


def _measured_value(value: str | float | None) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if value in NORMAL_LITERALS:
        return None
    return parse_decimal(value)


def is_abnormal_for(value: str | float | None, predicate: RangePredicate) -> bool:
    """Evaluate a measured value against an already parsed reference range."""
    if _is_empty(value):
        return False
    measured = _measured_value(value)
    if measured is None:
        return False
    return predicate.is_abnormal(measured)


def is_abnormal(value: str | float | None, range_text: str | None) -> bool:
    """Return True when a measured value falls outside its reference range.

    Never raises. Empty values or ranges, the literals "Absent" and "Normal",
    non-numeric measurements and ranges the parser does not understand all
    resolve to False.
    """
    if _is_empty(value) or not range_text:
        return False
    if value in NORMAL_LITERALS:
        return False
    return is_abnormal_for(value, parse_reference_range(range_text))
