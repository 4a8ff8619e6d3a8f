"""
Report Service - the report store operations.

Every operation first awaits its simulated latency and then does all of its
reading and writing in one synchronous step inside a repository
transaction, so concurrent callers never interleave their writes.
"""
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Sequence
import logging
import uuid

from ..config import settings
from ..core.latency import simulate_latency
from ..exceptions import InvalidInputException, NotFoundException
from .lifecycle import INITIAL_STATUS, complete_with_prescription
from .models import Prescription, Report
from .repository import ReportRepository
from .validation import Invalid, validate_prescription_input, validate_report_input

# Set up logging
logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


async def create_report(
    repository: ReportRepository,
    user_id: str,
    user_name: str,
    title: str,
    description: str,
    image_url: str,
    location: str,
    pain_level: Any
) -> Report:
    """
    Create a new pending report.
    
    Args:
        repository: Report repository
        user_id: Owner principal ID
        user_name: Owner display name, copied onto the report
        title: Report title
        description: Wound description
        image_url: URL returned by the image upload
        location: Body location of the wound
        pain_level: Integer from 0 to 10
        
    Returns:
        Report: The created report
        
    Raises:
        InvalidInputException: If validation fails; nothing is stored
    """
    await simulate_latency("create_report")

    result = validate_report_input(user_id, user_name, title, description,
                                   image_url, location, pain_level)
    if isinstance(result, Invalid):
        logger.warning(f"Report creation rejected for {user_id}: {result.field} - {result.reason}")
        raise InvalidInputException(result.field, result.reason)

    draft = result.value
    report = Report(
        id=_new_id("report"),
        user_id=draft.user_id,
        user_name=draft.user_name,
        created_at=datetime.now(timezone.utc),
        status=INITIAL_STATUS,
        title=draft.title,
        description=draft.description,
        image_url=draft.image_url,
        location=draft.location,
        pain_level=draft.pain_level,
    )
    created = repository.create(report)
    logger.info(f"Report {created.id} created by {user_id}")
    return created


async def get_reports_by_owner(repository: ReportRepository, user_id: str) -> List[Report]:
    """
    Get all reports owned by a principal, newest first.
    
    Returns an empty list when the principal has no reports.
    """
    await simulate_latency("list_reports")
    return repository.get_by_owner(user_id)


async def get_all_reports(repository: ReportRepository) -> List[Report]:
    """
    Get every report, newest first.
    
    Callers must have checked the access policy before calling this.
    """
    await simulate_latency("list_reports")
    return repository.get_all()


async def get_report(repository: ReportRepository, report_id: str) -> Optional[Report]:
    """Point lookup; None when the report does not exist."""
    await simulate_latency("get_report")
    return repository.get(report_id)


async def attach_prescription(
    repository: ReportRepository,
    report_id: str,
    diagnosis: str,
    treatment: str,
    medications: Sequence[Any],
    follow_up_date: Optional[date] = None,
    doctor_notes: Optional[str] = None
) -> Report:
    """
    Attach a prescription to a report and mark it completed.
    
    Args:
        repository: Report repository
        report_id: Report to prescribe for
        diagnosis: At least 10 characters
        treatment: At least 20 characters
        medications: One or more medications, each with name, dosage,
            frequency and duration
        follow_up_date: Optional follow-up date
        doctor_notes: Optional notes
        
    Returns:
        Report: The updated report
        
    Raises:
        NotFoundException: If the report does not exist
        InvalidInputException: If validation fails, naming the first failing field
        InvalidTransitionException: If the report is completed and
            overwriting is disabled
    """
    await simulate_latency("attach_prescription")

    with repository.transaction():
        report = repository.get(report_id)
        if report is None:
            logger.warning(f"Prescription rejected: report {report_id} not found")
            raise NotFoundException(f"Report {report_id} not found")

        result = validate_prescription_input(diagnosis, treatment, medications,
                                             follow_up_date, doctor_notes)
        if isinstance(result, Invalid):
            logger.warning(f"Prescription rejected for report {report_id}: {result.field} - {result.reason}")
            raise InvalidInputException(result.field, result.reason)

        draft = result.value
        prescription = Prescription(
            id=_new_id("prescription"),
            report_id=report.id,
            created_at=datetime.now(timezone.utc),
            diagnosis=draft.diagnosis,
            treatment=draft.treatment,
            medications=draft.medications,
            follow_up_date=draft.follow_up_date,
            doctor_notes=draft.doctor_notes,
        )
        updated = complete_with_prescription(
            report, prescription, allow_overwrite=settings.allow_prescription_overwrite
        )
        stored = repository.update(updated)

    logger.info(f"Prescription {prescription.id} attached to report {report_id}")
    return stored


async def upload_image(filename: Optional[str], content_type: Optional[str], size: int) -> str:
    """
    Accept a wound image and return the URL it can be referenced by.
    
    Nothing is stored: after checking type and size the placeholder URL is
    returned.
    
    Raises:
        InvalidInputException: If the type is not accepted or the file is
            empty or too large
    """
    if content_type not in settings.accepted_image_types:
        raise InvalidInputException(
            "image", "Only .jpg, .jpeg, .png and .webp formats are supported"
        )
    if size <= 0:
        raise InvalidInputException("image", "Please upload an image")
    if size > settings.max_upload_bytes:
        max_mb = settings.max_upload_bytes // (1024 * 1024)
        raise InvalidInputException("image", f"Max file size is {max_mb}MB")

    await simulate_latency("upload_image")
    logger.info(f"Accepted image upload {filename} ({content_type}, {size} bytes)")
    return settings.placeholder_image_url
