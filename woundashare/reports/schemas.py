"""
Report Schemas - request and response models for the report endpoints.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field
from .models import Report

class ReportCreate(BaseModel):
    """
    Report Create Schema - Submitted by the upload form
    
    Fields:
    - title: At least 5 characters
    - description: At least 20 characters
    - image_url: URL returned by the image upload endpoint
    - location: Body location, at least 3 characters
    - pain_level: integer from 0 to 10, no coercion from bools or strings (range checked by the report store)
    """
    title: str = Field(..., min_length=5, description="Report title")
    description: str = Field(..., min_length=20, description="Wound description")
    image_url: str = Field(..., min_length=1, description="Uploaded image URL")
    location: str = Field(..., min_length=3, description="Location on the body")
    pain_level: int = Field(..., strict=True, description="Pain level from 0 to 10")

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "title": "Cut on hand",
                "description": "Sliced my palm while cooking, bleeding has stopped.",
                "image_url": "/placeholder.svg",
                "location": "Left palm",
                "pain_level": 7
            }
        }

class MedicationIn(BaseModel):
    """One medication line of the review form; blanks are reported by the store."""
    name: str = ""
    dosage: str = ""
    frequency: str = ""
    duration: str = ""

class PrescriptionCreate(BaseModel):
    """
    Prescription Create Schema - Submitted by the admin review form
    
    Fields:
    - diagnosis: At least 10 characters
    - treatment: At least 20 characters
    - medications: At least one medication with all fields filled
    - follow_up_date: Optional follow-up date
    - doctor_notes: Optional notes
    """
    diagnosis: str = ""
    treatment: str = ""
    medications: List[MedicationIn] = Field(default_factory=list)
    follow_up_date: Optional[date] = None
    doctor_notes: Optional[str] = None

class ImageUploadResponse(BaseModel):
    image_url: str

class StatusCounts(BaseModel):
    total: int
    pending: int
    completed: int

class ReportSummary(StatusCounts):
    """Patient dashboard: counts plus the newest reports."""
    recent: List[Report]
