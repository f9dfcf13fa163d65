"""Printable lab report and dashboard schemas."""

from datetime import date

from pydantic import BaseModel

from .catalogue import LabTest, ReportNote
from .common import RecordId


class GroupedTest(BaseModel):
    """A catalogue test paired with the sample's results for it."""

    test: LabTest
    results: dict[str, str] = {}


class ResultRow(BaseModel):
    """One component line of a report."""

    component: str
    value: str = ""
    units: str | None = None
    reference_range_lines: list[str] = []
    method: str | None = None
    abnormal: bool = False


class ReportSection(BaseModel):
    """All result rows for one ordered test."""

    test_id: RecordId
    test_name: str
    rows: list[ResultRow] = []
    note: ReportNote | None = None


class DepartmentSection(BaseModel):
    """Tests of one department, in the order they were ordered."""

    department: str
    tests: list[ReportSection] = []


class LabReport(BaseModel):
    """Report layout for a single sample."""

    sample_id: str
    patient_name: str | None = None
    collection_date: date | None = None
    report_date: date | None = None
    departments: list[DepartmentSection] = []
    abnormal_count: int = 0


class DashboardSummary(BaseModel):
    """Headline counts shown on the dashboard."""

    patients_today: int = 0
    total_patients: int = 0
    total_samples: int = 0
    completed_tests: int = 0
    pending_reports: int = 0
    revenue_today: float = 0
    total_revenue: float = 0
