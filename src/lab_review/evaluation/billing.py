"""Billing aggregation and receipt construction."""

import logging
import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from ..schemas.catalogue import LabTest, lookup_test
from ..schemas.common import PatientInfo, RecordId, SampleStatus
from ..schemas.receipt import BillingTotals, Receipt, ReceiptLine
from ..schemas.sample import Sample

logger = logging.getLogger(__name__)

RECEIPT_PREFIX = "REC"
BILLABLE_STATUSES = (SampleStatus.COMPLETED, SampleStatus.PENDING)


def _round_half_up(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def _snapshot_lines(
    test_ids: list[RecordId], catalogue: dict[str, LabTest]
) -> list[ReceiptLine]:
    """Resolve test ids to name/price lines, dropping ids missing from the catalogue."""
    lines: list[ReceiptLine] = []
    for test_id in test_ids:
        test = lookup_test(catalogue, test_id)
        if test is None:
            logger.debug(f"Test {test_id} not in catalogue, not billed")
            continue
        lines.append(ReceiptLine(test_name=test.name, price=test.price))
    return lines


def _totals_for_lines(
    lines: list[ReceiptLine], tax_rate_percent: float
) -> BillingTotals:
    subtotal = sum((Decimal(str(line.price)) for line in lines), Decimal(0))
    tax = _round_half_up(subtotal * Decimal(str(tax_rate_percent)) / 100)
    return BillingTotals(
        subtotal=float(subtotal),
        tax_amount=float(tax),
        total=float(subtotal + tax),
    )


def compute_totals(
    test_ids: list[RecordId],
    catalogue: dict[str, LabTest],
    tax_rate_percent: float = 0,
) -> BillingTotals:
    """Compute subtotal, tax and total for a list of test ids.

    Prices are read from the catalogue at call time. A test listed twice is
    billed twice; ids missing from the catalogue contribute nothing. Tax is
    rounded half-up to whole currency units.
    """
    return _totals_for_lines(_snapshot_lines(test_ids, catalogue), tax_rate_percent)


def next_receipt_id(
    existing_receipts: list[Receipt], prefix: str = RECEIPT_PREFIX
) -> str:
    """Return the receipt id following the highest sequence already issued."""
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    highest = 0
    for receipt in existing_receipts:
        match = pattern.match(receipt.id)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{prefix}{highest + 1:03d}"


def has_receipt(sample_id: str, existing_receipts: list[Receipt]) -> bool:
    """Check whether any receipt already references the sample."""
    return any(receipt.sample_id == sample_id for receipt in existing_receipts)


def build_receipt(
    sample: Sample,
    patient: PatientInfo | None,
    catalogue: dict[str, LabTest],
    tax_rate_percent: float = 0,
    existing_receipts: list[Receipt] | None = None,
    receipt_id: str | None = None,
    issue_date: date | None = None,
    payment_method: str = "Cash",
    prefix: str = RECEIPT_PREFIX,
) -> Receipt | None:
    """Build the receipt for a sample.

    Returns None instead of a duplicate when a receipt in existing_receipts
    already references the sample, and None when the patient is unknown.
    The caller owns the receipt list; nothing is appended here.
    """
    existing_receipts = existing_receipts or []
    if has_receipt(sample.id, existing_receipts):
        logger.debug(f"Sample {sample.id} already has a receipt")
        return None
    if patient is None:
        logger.warning(f"Patient not found for sample {sample.id}, no receipt issued")
        return None

    lines = _snapshot_lines(sample.tests, catalogue)
    totals = _totals_for_lines(lines, tax_rate_percent)

    return Receipt(
        id=receipt_id or next_receipt_id(existing_receipts, prefix),
        sample_id=sample.id,
        patient_name=patient.name,
        patient_contact=patient.contact,
        tests=lines,
        subtotal=totals.subtotal,
        tax_rate=tax_rate_percent,
        tax_amount=totals.tax_amount,
        total=totals.total,
        issue_date=issue_date or date.today(),
        payment_method=payment_method,
    )


def generate_missing_receipts(
    samples: list[Sample],
    patients: list[PatientInfo],
    catalogue: dict[str, LabTest],
    existing_receipts: list[Receipt],
    tax_rate_percent: float = 0,
    issue_date: date | None = None,
    payment_method: str = "Cash",
    prefix: str = RECEIPT_PREFIX,
    billable_statuses: tuple[SampleStatus, ...] = BILLABLE_STATUSES,
) -> list[Receipt]:
    """Issue receipts for every billable sample that does not have one yet.

    Returns only the new receipts; existing_receipts is not modified.
    """
    patients_by_id = {str(patient.id): patient for patient in patients}
    issued = list(existing_receipts)
    created: list[Receipt] = []

    for sample in samples:
        if sample.status not in billable_statuses:
            continue
        receipt = build_receipt(
            sample,
            patients_by_id.get(str(sample.patient_id)),
            catalogue,
            tax_rate_percent,
            existing_receipts=issued,
            issue_date=issue_date,
            payment_method=payment_method,
            prefix=prefix,
        )
        if receipt is not None:
            issued.append(receipt)
            created.append(receipt)

    if created:
        logger.info(f"Generated {len(created)} new receipt(s)")
    else:
        logger.info("No new receipts to generate")
    return created
