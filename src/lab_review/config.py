"""Billing configuration."""

import logging
import os

from pydantic import BaseModel, Field

from .evaluation.billing import BILLABLE_STATUSES, RECEIPT_PREFIX
from .schemas.common import SampleStatus

logger = logging.getLogger(__name__)

TAX_RATE_ENV = "LAB_TAX_RATE_PERCENT"
PAYMENT_METHOD_ENV = "LAB_PAYMENT_METHOD"


class BillingConfig(BaseModel):
    """Settings applied when totals and receipts are computed."""

    # Percent of the subtotal; 0 bills without tax
    tax_rate_percent: float = Field(default=0, ge=0)
    payment_method: str = "Cash"
    receipt_prefix: str = RECEIPT_PREFIX
    billable_statuses: tuple[SampleStatus, ...] = BILLABLE_STATUSES


def load_billing_config(**overrides: object) -> BillingConfig:
    """Build a BillingConfig from environment variables and explicit overrides.

    Explicit keyword arguments win over LAB_TAX_RATE_PERCENT and
    LAB_PAYMENT_METHOD.
    """
    values: dict[str, object] = {}
    tax_rate = os.getenv(TAX_RATE_ENV)
    if tax_rate:
        values["tax_rate_percent"] = tax_rate
    payment_method = os.getenv(PAYMENT_METHOD_ENV)
    if payment_method:
        values["payment_method"] = payment_method
    values.update(overrides)

    config = BillingConfig(**values)
    logger.debug(f"Billing config loaded: tax rate {config.tax_rate_percent}%")
    return config
