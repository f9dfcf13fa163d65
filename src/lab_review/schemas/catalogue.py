"""Test catalogue schema."""

from pydantic import BaseModel

from .common import LabRecord, RecordId


class Component(LabRecord):
    """One measurable parameter of a test, e.g. Hemoglobin."""

    name: str
    reference_range: str | None = None
    units: str | None = None
    method: str | None = None


class ReportNote(BaseModel):
    """Free-text note printed under a test in the report."""

    heading: str | None = None
    text: str | None = None


class LabTest(LabRecord):
    """Orderable test from the laboratory catalogue."""

    id: RecordId
    name: str
    department: str
    price: float = 0
    components: list[Component] = []
    note: ReportNote | None = None


def build_catalogue(tests: list[LabTest]) -> dict[str, LabTest]:
    """Index tests by stringified id so 1 and "1" resolve to the same entry."""
    return {str(test.id): test for test in tests}


def lookup_test(catalogue: dict[str, LabTest], test_id: RecordId) -> LabTest | None:
    """Return the catalogue entry for a test id, or None when it was deleted."""
    return catalogue.get(str(test_id))
