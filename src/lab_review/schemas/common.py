"""Shared types for laboratory records."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

RecordId = int | str


class LabRecord(BaseModel):
    """Base model accepting both snake_case fields and camelCase store keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SampleStatus(str, Enum):
    """Processing status of a registered sample."""

    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"

    @classmethod
    def _missing_(cls, value):
        # Older records store the status in lower case
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class PatientInfo(LabRecord):
    """Patient demographic and contact information."""

    id: RecordId
    name: str
    age: int | None = None
    gender: str | None = None
    contact: str | None = None
    email: str | None = None
    address: str | None = None
    referring_doctor: RecordId | None = None
    date_added: date | None = None
