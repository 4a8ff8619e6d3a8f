"""
Validation for report creation and prescription attachment.

Each validator returns a tagged result: Valid carrying the cleaned values,
or Invalid naming the first failing field and why.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Generic, List, Mapping, Optional, Sequence, TypeVar, Union

from .models import Medication

T = TypeVar("T")

PAIN_LEVEL_MIN = 0
PAIN_LEVEL_MAX = 10
MIN_DIAGNOSIS_LENGTH = 10
MIN_TREATMENT_LENGTH = 20
MEDICATION_FIELDS = ("name", "dosage", "frequency", "duration")


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    field: str
    reason: str


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class ReportDraft:
    """Validated input for a new report."""
    user_id: str
    user_name: str
    title: str
    description: str
    image_url: str
    location: str
    pain_level: int


@dataclass(frozen=True)
class PrescriptionDraft:
    """Validated input for a prescription, before it gets an id."""
    diagnosis: str
    treatment: str
    medications: List[Medication]
    follow_up_date: Optional[date] = None
    doctor_notes: Optional[str] = None


def validate_report_input(user_id: str, user_name: str, title: str, description: str,
                          image_url: str, location: str, pain_level: Any) -> ValidationResult:
    """Check the owner reference and the pain level of a new report."""
    if not user_id:
        return Invalid("user_id", "Report owner is required")
    if isinstance(pain_level, bool) or not isinstance(pain_level, int):
        return Invalid("pain_level", "Pain level must be a whole number")
    if not PAIN_LEVEL_MIN <= pain_level <= PAIN_LEVEL_MAX:
        return Invalid(
            "pain_level",
            f"Pain level must be between {PAIN_LEVEL_MIN} and {PAIN_LEVEL_MAX}",
        )
    return Valid(ReportDraft(
        user_id=user_id,
        user_name=user_name,
        title=title,
        description=description,
        image_url=image_url,
        location=location,
        pain_level=pain_level,
    ))


def _medication_value(medication: Any, field: str) -> Any:
    if isinstance(medication, Mapping):
        return medication.get(field)
    return getattr(medication, field, None)


def validate_prescription_input(diagnosis: Optional[str], treatment: Optional[str],
                                medications: Optional[Sequence[Any]],
                                follow_up_date: Optional[date] = None,
                                doctor_notes: Optional[str] = None) -> ValidationResult:
    """
    Check a prescription before it is attached.
    
    Fields are checked in order: diagnosis, treatment, medications (the list,
    then each medication's name, dosage, frequency and duration). The first
    failure is reported.
    """
    if not diagnosis or len(diagnosis) < MIN_DIAGNOSIS_LENGTH:
        return Invalid(
            "diagnosis",
            f"Diagnosis must be at least {MIN_DIAGNOSIS_LENGTH} characters",
        )
    if not treatment or len(treatment) < MIN_TREATMENT_LENGTH:
        return Invalid(
            "treatment",
            f"Treatment must be at least {MIN_TREATMENT_LENGTH} characters",
        )
    if not medications:
        return Invalid("medications", "At least one medication is required")

    cleaned = []
    for index, medication in enumerate(medications):
        values = {}
        for field in MEDICATION_FIELDS:
            value = _medication_value(medication, field)
            if not isinstance(value, str) or not value:
                return Invalid(
                    f"medications[{index}].{field}",
                    f"Medication {field} is required",
                )
            values[field] = value
        cleaned.append(Medication(**values))

    return Valid(PrescriptionDraft(
        diagnosis=diagnosis,
        treatment=treatment,
        medications=cleaned,
        follow_up_date=follow_up_date,
        doctor_notes=doctor_notes or None,
    ))
