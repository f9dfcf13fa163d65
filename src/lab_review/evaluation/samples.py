"""Sample registration and result entry."""

import logging
from datetime import date

from ..schemas.catalogue import LabTest
from ..schemas.common import RecordId, SampleStatus
from ..schemas.sample import Sample
from .billing import compute_totals

logger = logging.getLogger(__name__)

SAMPLE_ID_WIDTH = 5


def next_sample_id(samples: list[Sample]) -> str:
    """Zero-padded id one past the highest numeric sample id.

    Lab-assigned ids that are not numeric (e.g. "LAB003") are ignored.
    """
    highest = 0
    for sample in samples:
        if sample.id.isdigit():
            highest = max(highest, int(sample.id))
    return str(highest + 1).zfill(SAMPLE_ID_WIDTH)


def register_sample(
    sample_id: str,
    patient_id: RecordId,
    test_ids: list[RecordId],
    catalogue: dict[str, LabTest],
    collection_date: date | None = None,
) -> Sample:
    """Create a Pending sample with its untaxed total amount."""
    totals = compute_totals(test_ids, catalogue)
    return Sample(
        id=sample_id,
        patient_id=patient_id,
        tests=list(test_ids),
        collection_date=collection_date or date.today(),
        status=SampleStatus.PENDING,
        results={},
        total_amount=totals.subtotal,
    )


def record_results(
    sample: Sample,
    results: dict[str, dict[str, str]],
    report_date: date | None = None,
) -> Sample:
    """Return a completed copy of the sample carrying the entered results."""
    completed = Sample.model_validate(
        {
            **sample.model_dump(),
            "results": results,
            "status": SampleStatus.COMPLETED,
            "report_date": report_date or date.today(),
        }
    )
    logger.info(f"Results recorded for sample {sample.id}")
    return completed
