"""Tests for the lab review service, configuration and record parsing."""

from datetime import date

import pytest
from pydantic import ValidationError

from lab_review import BillingConfig, LabReviewService, load_billing_config
from lab_review.config import PAYMENT_METHOD_ENV, TAX_RATE_ENV
from lab_review.schemas import (
    LabTest,
    PatientInfo,
    Receipt,
    Sample,
    SampleStatus,
    build_catalogue,
)

# Records as exported by the storage layer (camelCase keys)
STORE_TESTS = [
    {
        "id": 1,
        "name": "Complete Blood Count (CBC)",
        "department": "HEMATOLOGY",
        "price": 350,
        "components": [
            {"name": "Hemoglobin", "referenceRange": "12.0-15.5 g/dL", "units": "g/dL"},
            {"name": "Platelet Count", "referenceRange": "150000-450000 /μL", "units": "/μL"},
        ],
    },
    {
        "id": 2,
        "name": "Liver Function Test (LFT)",
        "department": "CLINICAL BIOCHEMISTRY",
        "price": 450,
        "components": [
            {
                "name": "SGOT (AST)",
                "referenceRange": "0-40 U/L",
                "units": "U/L",
                "method": "IFCC",
            },
        ],
        "note": {"heading": "Note", "text": "Fasting sample preferred."},
    },
]
STORE_PATIENT = {
    "id": 2,
    "name": "MRS. PINKI",
    "age": 34,
    "gender": "Female",
    "contact": "9876543211",
    "email": "pinki@email.com",
    "referringDoctor": 2,
    "dateAdded": "2025-09-14",
}
STORE_SAMPLE = {
    "id": "01051",
    "patientId": 2,
    "tests": [1, 2],
    "collectionDate": "2025-08-26",
    "status": "Pending",
    "results": {},
    "totalAmount": 800,
}


@pytest.fixture
def catalogue() -> dict[str, LabTest]:
    return build_catalogue([LabTest.model_validate(t) for t in STORE_TESTS])


@pytest.fixture
def patient() -> PatientInfo:
    return PatientInfo.model_validate(STORE_PATIENT)


@pytest.fixture
def sample() -> Sample:
    return Sample.model_validate(STORE_SAMPLE)


class TestStoreRecords:
    """Records with camelCase keys validate into the schemas."""

    def test_catalogue_components(self, catalogue):
        component = catalogue["2"].components[0]
        assert component.reference_range == "0-40 U/L"
        assert component.method == "IFCC"
        assert catalogue["2"].note.text == "Fasting sample preferred."

    def test_patient(self, patient):
        assert patient.referring_doctor == 2
        assert patient.date_added == date(2025, 9, 14)

    def test_sample(self, sample):
        assert sample.patient_id == 2
        assert sample.status == SampleStatus.PENDING
        assert sample.collection_date == date(2025, 8, 26)
        assert sample.total_amount == 800

    def test_result_keys_normalized(self):
        sample = Sample.model_validate(
            {"id": "x", "patientId": 1, "results": {1: {"Hemoglobin": 14.2}}}
        )
        assert sample.results == {"1": {"Hemoglobin": "14.2"}}

    def test_receipt_date_alias(self):
        receipt = Receipt.model_validate(
            {"id": "REC001", "sampleId": "00425", "date": "2025-08-12"}
        )
        assert receipt.issue_date == date(2025, 8, 12)

    def test_malformed_record_rejected(self):
        with pytest.raises(ValidationError):
            Sample.model_validate({"patientId": 1})


class TestBillingConfig:
    """Tests for configuration loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(TAX_RATE_ENV, raising=False)
        monkeypatch.delenv(PAYMENT_METHOD_ENV, raising=False)
        config = load_billing_config()
        assert config.tax_rate_percent == 0
        assert config.payment_method == "Cash"
        assert config.receipt_prefix == "REC"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv(TAX_RATE_ENV, "18")
        monkeypatch.setenv(PAYMENT_METHOD_ENV, "UPI")
        config = load_billing_config()
        assert config.tax_rate_percent == 18
        assert config.payment_method == "UPI"

    def test_explicit_override_wins(self, monkeypatch):
        monkeypatch.setenv(TAX_RATE_ENV, "18")
        assert load_billing_config(tax_rate_percent=5).tax_rate_percent == 5

    def test_negative_tax_rate_rejected(self):
        with pytest.raises(ValidationError):
            BillingConfig(tax_rate_percent=-1)


class TestLabReviewService:
    """End-to-end flows through the service object."""

    def test_totals_use_configured_rate(self, catalogue):
        service = LabReviewService(BillingConfig(tax_rate_percent=18))
        totals = service.compute_totals([1, 2], catalogue)
        assert (totals.subtotal, totals.tax_amount, totals.total) == (800, 144, 944)

    def test_receipt_once_per_sample(self, catalogue, patient, sample):
        service = LabReviewService(BillingConfig())
        receipts: list[Receipt] = []

        first = service.build_receipt(sample, patient, catalogue, receipts)
        receipts.append(first)
        second = service.build_receipt(sample, patient, catalogue, receipts)

        assert first.total == 800
        assert first.patient_contact == "9876543211"
        assert second is None
        assert len(receipts) == 1

    def test_configured_prefix_and_payment_method(self, catalogue, patient, sample):
        service = LabReviewService(
            BillingConfig(receipt_prefix="INV", payment_method="Card")
        )
        receipt = service.build_receipt(sample, patient, catalogue, [])
        assert receipt.id == "INV001"
        assert receipt.payment_method == "Card"

    def test_complete_sample_issues_receipt(self, catalogue, patient, sample):
        service = LabReviewService(BillingConfig())
        results = {
            "1": {"Hemoglobin": "11.1", "Platelet Count": "250000"},
            "2": {"SGOT (AST)": "15"},
        }

        completed, receipt = service.complete_sample(
            sample, results, patient, catalogue, [], report_date=date(2025, 8, 27)
        )

        assert completed.status == SampleStatus.COMPLETED
        assert receipt.sample_id == "01051"
        assert receipt.issue_date == date(2025, 8, 27)

        report = service.build_report(completed, catalogue, patient)
        assert [d.department for d in report.departments] == [
            "HEMATOLOGY",
            "CLINICAL BIOCHEMISTRY",
        ]
        assert report.abnormal_count == 1
        assert report.departments[1].tests[0].note.heading == "Note"

    def test_complete_sample_already_billed(self, catalogue, patient, sample):
        service = LabReviewService(BillingConfig())
        existing = [Receipt(id="REC001", sample_id="01051")]
        _, receipt = service.complete_sample(
            sample, {}, patient, catalogue, existing
        )
        assert receipt is None

    def test_register_sample(self, catalogue, sample):
        service = LabReviewService(BillingConfig(tax_rate_percent=18))
        registered = service.register_sample(
            2, [1, 2], catalogue, [sample], collection_date=date(2025, 9, 1)
        )
        assert registered.id == "01052"
        assert registered.total_amount == 800
        assert registered.status == SampleStatus.PENDING

    def test_generate_missing_receipts_respects_statuses(
        self, catalogue, patient, sample
    ):
        service = LabReviewService(
            BillingConfig(billable_statuses=(SampleStatus.COMPLETED,))
        )
        created = service.generate_missing_receipts([sample], [patient], catalogue, [])
        assert created == []

    def test_grouping_and_dashboard(self, catalogue, patient, sample):
        service = LabReviewService(BillingConfig())
        groups = service.group_by_department(sample, catalogue)
        assert list(groups) == ["HEMATOLOGY", "CLINICAL BIOCHEMISTRY"]
        assert service.is_abnormal("55", "0-40") is True

        summary = service.summarize_dashboard(
            [patient], [sample], today=date(2025, 8, 26)
        )
        assert summary.revenue_today == 800
        assert summary.pending_reports == 1
