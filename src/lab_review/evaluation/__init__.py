"""Lab result evaluation and billing aggregation."""

from .abnormal_values import is_abnormal, is_abnormal_for
from .billing import (
    build_receipt,
    compute_totals,
    generate_missing_receipts,
    has_receipt,
    next_receipt_id,
)
from .dashboard import filter_by_doctor, summarize_dashboard
from .department_grouping import group_by_department
from .reference_ranges import parse_decimal, parse_reference_range
from .reports import build_report, reference_range_lines
from .samples import next_sample_id, record_results, register_sample

__all__ = [
    # Reference ranges
    "parse_decimal",
    "parse_reference_range",
    "is_abnormal",
    "is_abnormal_for",
    # Layout
    "group_by_department",
    "build_report",
    "reference_range_lines",
    # Billing
    "compute_totals",
    "build_receipt",
    "generate_missing_receipts",
    "has_receipt",
    "next_receipt_id",
    # Samples
    "next_sample_id",
    "register_sample",
    "record_results",
    # Dashboard
    "filter_by_doctor",
    "summarize_dashboard",
]
