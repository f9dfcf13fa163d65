"""Dashboard statistics over patients and samples."""

from datetime import date

from ..schemas.common import PatientInfo, RecordId, SampleStatus
from ..schemas.report import DashboardSummary
from ..schemas.sample import Sample


def filter_by_doctor(
    patients: list[PatientInfo],
    samples: list[Sample],
    referring_doctor: RecordId | None,
) -> tuple[list[PatientInfo], list[Sample]]:
    """Keep patients referred by the doctor and the samples of those patients."""
    if referring_doctor is None:
        return patients, samples

    doctor = str(referring_doctor)
    kept_patients = [
        p for p in patients
        if p.referring_doctor is not None and str(p.referring_doctor) == doctor
    ]
    kept_ids = {str(p.id) for p in kept_patients}
    kept_samples = [s for s in samples if str(s.patient_id) in kept_ids]
    return kept_patients, kept_samples


def summarize_dashboard(
    patients: list[PatientInfo],
    samples: list[Sample],
    today: date | None = None,
    referring_doctor: RecordId | None = None,
) -> DashboardSummary:
    """Count today's registrations, completed and pending work, and revenue."""
    today = today or date.today()
    patients, samples = filter_by_doctor(patients, samples, referring_doctor)

    pending = (SampleStatus.PENDING, SampleStatus.PROCESSING)
    return DashboardSummary(
        patients_today=sum(1 for p in patients if p.date_added == today),
        total_patients=len(patients),
        total_samples=len(samples),
        completed_tests=sum(1 for s in samples if s.status == SampleStatus.COMPLETED),
        pending_reports=sum(1 for s in samples if s.status in pending),
        revenue_today=sum(s.total_amount for s in samples if s.collection_date == today),
        total_revenue=sum(s.total_amount for s in samples),
    )
