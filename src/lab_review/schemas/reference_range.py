"""Parsed reference-range predicates.

A component's reference range is authored as free text ("12.0-15.5 g/dL",
"<200", ">40", "Absent"). Parsing turns it into one of the variants below,
each of which decides whether a numeric measurement lies outside the range.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Predicate(BaseModel):
    model_config = ConfigDict(frozen=True)


class Interval(_Predicate):
    """Closed interval; values within [min, max] are normal."""

    kind: Literal["interval"] = "interval"
    min: float
    max: float

    def is_abnormal(self, value: float) -> bool:
        return value < self.min or value > self.max


class UpperBound(_Predicate):
    """'<max'; values at or above max are abnormal."""

    kind: Literal["upper_bound"] = "upper_bound"
    max: float

    def is_abnormal(self, value: float) -> bool:
        return value >= self.max


class LowerBound(_Predicate):
    """'>min'; values at or below min are abnormal."""

    kind: Literal["lower_bound"] = "lower_bound"
    min: float

    def is_abnormal(self, value: float) -> bool:
        return value <= self.min


class Unparseable(_Predicate):
    """Text the parser does not understand ("Absent", "Clear", ...)."""

    kind: Literal["unparseable"] = "unparseable"
    text: str = ""

    def is_abnormal(self, value: float) -> bool:
        return False


RangePredicate = Annotated[
    Interval | UpperBound | LowerBound | Unparseable,
    Field(discriminator="kind"),
]
