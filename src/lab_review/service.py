"""Lab review service.

Bundles the stateless evaluation functions behind one object that owns the
billing configuration, so request handlers receive it explicitly instead of
reaching for shared application state:

1. Flags abnormal results against component reference ranges
2. Groups a sample's tests by department and lays out the report
3. Computes totals and issues at most one receipt per sample
4. Summarizes dashboard counts and revenue
"""

import logging
from datetime import date

from .config import BillingConfig, load_billing_config
from .evaluation import (
    build_receipt,
    build_report,
    compute_totals,
    generate_missing_receipts,
    group_by_department,
    is_abnormal,
    next_sample_id,
    record_results,
    register_sample,
    summarize_dashboard,
)
from .schemas import (
    BillingTotals,
    DashboardSummary,
    GroupedTest,
    LabReport,
    LabTest,
    PatientInfo,
    Receipt,
    RecordId,
    Sample,
)

logger = logging.getLogger(__name__)


class LabReviewService:
    """Evaluation and billing operations over caller-supplied records.

    Holds no records between calls; the catalogue, samples and receipt list
    are passed to every method.
    """

    def __init__(self, config: BillingConfig | None = None):
        self.config = config or load_billing_config()

    # --- Results ---

    def is_abnormal(self, value: str | float | None, range_text: str | None) -> bool:
        return is_abnormal(value, range_text)

    def group_by_department(
        self, sample: Sample, catalogue: dict[str, LabTest]
    ) -> dict[str, list[GroupedTest]]:
        return group_by_department(sample, catalogue)

    def build_report(
        self,
        sample: Sample,
        catalogue: dict[str, LabTest],
        patient: PatientInfo | None = None,
    ) -> LabReport:
        return build_report(sample, catalogue, patient)

    # --- Billing ---

    def compute_totals(
        self, test_ids: list[RecordId], catalogue: dict[str, LabTest]
    ) -> BillingTotals:
        return compute_totals(test_ids, catalogue, self.config.tax_rate_percent)

    def build_receipt(
        self,
        sample: Sample,
        patient: PatientInfo | None,
        catalogue: dict[str, LabTest],
        existing_receipts: list[Receipt],
        issue_date: date | None = None,
    ) -> Receipt | None:
        """Receipt for the sample, or None if it already has one."""
        return build_receipt(
            sample,
            patient,
            catalogue,
            self.config.tax_rate_percent,
            existing_receipts=existing_receipts,
            issue_date=issue_date,
            payment_method=self.config.payment_method,
            prefix=self.config.receipt_prefix,
        )

    def generate_missing_receipts(
        self,
        samples: list[Sample],
        patients: list[PatientInfo],
        catalogue: dict[str, LabTest],
        existing_receipts: list[Receipt],
        issue_date: date | None = None,
    ) -> list[Receipt]:
        return generate_missing_receipts(
            samples,
            patients,
            catalogue,
            existing_receipts,
            self.config.tax_rate_percent,
            issue_date=issue_date,
            payment_method=self.config.payment_method,
            prefix=self.config.receipt_prefix,
            billable_statuses=self.config.billable_statuses,
        )

    # --- Samples ---

    def register_sample(
        self,
        patient_id: RecordId,
        test_ids: list[RecordId],
        catalogue: dict[str, LabTest],
        existing_samples: list[Sample],
        collection_date: date | None = None,
    ) -> Sample:
        sample_id = next_sample_id(existing_samples)
        logger.info(f"Registering sample {sample_id} for patient {patient_id}")
        return register_sample(
            sample_id, patient_id, test_ids, catalogue, collection_date
        )

    def complete_sample(
        self,
        sample: Sample,
        results: dict[str, dict[str, str]],
        patient: PatientInfo | None,
        catalogue: dict[str, LabTest],
        existing_receipts: list[Receipt],
        report_date: date | None = None,
    ) -> tuple[Sample, Receipt | None]:
        """Record results and issue the sample's receipt if it has none yet."""
        completed = record_results(sample, results, report_date)
        receipt = self.build_receipt(
            completed, patient, catalogue, existing_receipts, issue_date=report_date
        )
        if receipt is not None:
            logger.info(f"Receipt {receipt.id} generated for sample {completed.id}")
        return completed, receipt

    # --- Dashboard ---

    def summarize_dashboard(
        self,
        patients: list[PatientInfo],
        samples: list[Sample],
        today: date | None = None,
        referring_doctor: RecordId | None = None,
    ) -> DashboardSummary:
        return summarize_dashboard(patients, samples, today, referring_doctor)
