"""Billing schemas."""

from datetime import date

from pydantic import BaseModel, Field

from .common import LabRecord


class ReceiptLine(LabRecord):
    """Name and price of a billed test at the time the receipt was issued."""

    test_name: str
    price: float


class BillingTotals(BaseModel):
    """Subtotal, tax and total for a list of tests."""

    subtotal: float = 0
    tax_amount: float = 0
    total: float = 0


class Receipt(LabRecord):
    """Billing snapshot issued once per sample."""

    id: str
    sample_id: str
    patient_name: str | None = None
    patient_contact: str | None = None
    tests: list[ReceiptLine] = []
    subtotal: float = 0
    tax_rate: float = 0
    tax_amount: float = 0
    total: float = 0
    issue_date: date | None = Field(default=None, alias="date")
    payment_method: str = "Cash"
