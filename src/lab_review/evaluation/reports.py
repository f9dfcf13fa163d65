"""Printable lab report assembly."""

from ..schemas.catalogue import LabTest
from ..schemas.common import PatientInfo
from ..schemas.report import DepartmentSection, LabReport, ReportSection, ResultRow
from ..schemas.sample import Sample
from .abnormal_values import is_abnormal
from .department_grouping import group_by_department


def reference_range_lines(range_text: str | None) -> list[str]:
    """Split a multi-part reference range ("M: 13-17; F: 12-15") for display."""
    if not range_text:
        return []
    return [part.strip() for part in range_text.split(";") if part.strip()]


def build_report(
    sample: Sample,
    catalogue: dict[str, LabTest],
    patient: PatientInfo | None = None,
) -> LabReport:
    """Lay out a sample's results by department with abnormal values flagged."""
    departments: list[DepartmentSection] = []
    abnormal_count = 0

    for department, grouped in group_by_department(sample, catalogue).items():
        sections: list[ReportSection] = []
        for entry in grouped:
            rows: list[ResultRow] = []
            for component in entry.test.components:
                value = entry.results.get(component.name, "")
                abnormal = is_abnormal(value, component.reference_range)
                if abnormal:
                    abnormal_count += 1
                rows.append(
                    ResultRow(
                        component=component.name,
                        value=value,
                        units=component.units,
                        reference_range_lines=reference_range_lines(
                            component.reference_range
                        ),
                        method=component.method,
                        abnormal=abnormal,
                    )
                )
            sections.append(
                ReportSection(
                    test_id=entry.test.id,
                    test_name=entry.test.name,
                    rows=rows,
                    note=entry.test.note,
                )
            )
        departments.append(DepartmentSection(department=department, tests=sections))

    return LabReport(
        sample_id=sample.id,
        patient_name=patient.name if patient else None,
        collection_date=sample.collection_date,
        report_date=sample.report_date,
        departments=departments,
        abnormal_count=abnormal_count,
    )
