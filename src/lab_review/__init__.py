"""Lab result evaluation and billing for a laboratory management system."""

from .config import BillingConfig, load_billing_config
from .service import LabReviewService

__all__ = ["BillingConfig", "LabReviewService", "load_billing_config"]
