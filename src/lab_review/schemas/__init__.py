"""Laboratory record schemas for result evaluation and billing."""

from .catalogue import Component, LabTest, ReportNote, build_catalogue, lookup_test
from .common import LabRecord, PatientInfo, RecordId, SampleStatus
from .receipt import BillingTotals, Receipt, ReceiptLine
from .reference_range import (
    Interval,
    LowerBound,
    RangePredicate,
    Unparseable,
    UpperBound,
)
from .report import (
    DashboardSummary,
    DepartmentSection,
    GroupedTest,
    LabReport,
    ReportSection,
    ResultRow,
)
from .sample import Sample

__all__ = [
    # Common
    "LabRecord",
    "RecordId",
    "SampleStatus",
    "PatientInfo",
    # Catalogue
    "Component",
    "ReportNote",
    "LabTest",
    "build_catalogue",
    "lookup_test",
    # Sample
    "Sample",
    # Reference ranges
    "Interval",
    "UpperBound",
    "LowerBound",
    "Unparseable",
    "RangePredicate",
    # Billing
    "ReceiptLine",
    "BillingTotals",
    "Receipt",
    # Report
    "GroupedTest",
    "ResultRow",
    "ReportSection",
    "DepartmentSection",
    "LabReport",
    "DashboardSummary",
]
