"""Sample (specimen / test order) schema."""

from datetime import date
from typing import Any

from pydantic import field_validator

from .common import LabRecord, RecordId, SampleStatus


class Sample(LabRecord):
    """A registered specimen with its ordered tests and recorded results."""

    id: str
    patient_id: RecordId
    tests: list[RecordId] = []
    collection_date: date | None = None
    report_date: date | None = None
    status: SampleStatus = SampleStatus.PENDING
    # test id -> component name -> measured value
    results: dict[str, dict[str, str]] = {}
    total_amount: float = 0

    @field_validator("results", mode="before")
    @classmethod
    def _stringify_result_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalized = {}
        for test_id, components in value.items():
            if isinstance(components, dict):
                components = {
                    name: "" if measured is None else str(measured)
                    for name, measured in components.items()
                }
            normalized[str(test_id)] = components
        return normalized

    def results_for(self, test_id: RecordId) -> dict[str, str]:
        """Recorded results for one test, empty until results are entered."""
        return self.results.get(str(test_id), {})
