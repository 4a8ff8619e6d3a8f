"""
Report, Prescription and Medication records.
"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel


class ReportStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class Medication(BaseModel):
    """A single prescribed medication; a value with no identity of its own."""
    name: str
    dosage: str
    frequency: str
    duration: str


class Prescription(BaseModel):
    """
    The admin-authored assessment attached to a report.
    
    Fields:
    - id: Unique prescription ID
    - report_id: The report this prescription belongs to (1:1)
    - created_at: When the prescription was attached
    - diagnosis: At least 10 characters
    - treatment: At least 20 characters
    - medications: One or more medications
    - follow_up_date: Optional follow-up date
    - doctor_notes: Optional free-text notes
    """
    id: str
    report_id: str
    created_at: datetime
    diagnosis: str
    treatment: str
    medications: List[Medication]
    follow_up_date: Optional[date] = None
    doctor_notes: Optional[str] = None


class Report(BaseModel):
    """
    A patient-submitted wound record.
    
    Fields:
    - id: Unique report ID
    - user_id: Owner principal ID
    - user_name: Owner's display name at submission time
    - created_at: Submission time
    - status: pending until a prescription is attached, then completed
    - title, description, location: Free text supplied by the patient
    - image_url: Reference to the uploaded wound image
    - pain_level: Integer from 0 to 10
    - prescription: Present exactly when status is completed
    """
    id: str
    user_id: str
    user_name: str
    created_at: datetime
    status: ReportStatus = ReportStatus.PENDING
    title: str
    description: str
    image_url: str
    location: str
    pain_level: int
    prescription: Optional[Prescription] = None
