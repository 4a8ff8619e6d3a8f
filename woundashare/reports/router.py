"""
Report Router - patient-facing report endpoints.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Query, UploadFile, status
import logging

from ..auth.dependencies import get_current_principal, require_permission
from ..auth.exceptions import UnauthorizedException
from ..auth.models import Principal
from ..core.permissions import Permission, can_view_report
from ..database import get_report_repository
from ..exceptions import NotFoundException
from .filters import SortOrder, StatusFilter, count_by_status, filter_reports, recent_reports
from .models import Report
from .repository import ReportRepository
from .schemas import ImageUploadResponse, ReportCreate, ReportSummary
from .service import create_report, get_report, get_reports_by_owner, upload_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/reports", tags=["Reports"])

@router.post("/images", response_model=ImageUploadResponse)
async def upload_report_image(
    image: UploadFile = File(...),
    current_principal: Principal = Depends(require_permission(Permission.UPLOAD_IMAGE))
):
    """
    Upload a wound image and get back the URL to submit with the report.
    """
    content = await image.read()
    image_url = await upload_image(image.filename, image.content_type, len(content))
    return ImageUploadResponse(image_url=image_url)

@router.post("", response_model=Report, status_code=status.HTTP_201_CREATED)
async def submit_report(
    report_data: ReportCreate,
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_permission(Permission.CREATE_REPORT))
):
    """
    Submit a new wound report owned by the current principal.
    """
    return await create_report(
        repository,
        user_id=current_principal.id,
        user_name=current_principal.name,
        title=report_data.title,
        description=report_data.description,
        image_url=report_data.image_url,
        location=report_data.location,
        pain_level=report_data.pain_level,
    )

@router.get("", response_model=List[Report])
async def list_my_reports(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status", description="Filter by status"),
    q: Optional[str] = Query(None, description="Search title, description and location"),
    order: SortOrder = Query(SortOrder.NEWEST, description="newest or oldest first"),
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_permission(Permission.VIEW_OWN_REPORTS))
):
    """
    List the current principal's reports with optional filtering.
    """
    reports = await get_reports_by_owner(repository, current_principal.id)
    return filter_reports(reports, status=status_filter, query=q, order=order)

@router.get("/summary", response_model=ReportSummary)
async def my_report_summary(
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_permission(Permission.VIEW_OWN_REPORTS))
):
    """
    Dashboard statistics for the current principal.
    """
    reports = await get_reports_by_owner(repository, current_principal.id)
    return ReportSummary(**count_by_status(reports), recent=recent_reports(reports))

@router.get("/{report_id}", response_model=Report)
async def read_report(
    report_id: str,
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(get_current_principal)
):
    """
    Get one report. Patients may only open their own reports.
    """
    report = await get_report(repository, report_id)
    if report is None:
        raise NotFoundException(f"Report {report_id} not found")
    if not can_view_report(current_principal, report):
        logger.warning(f"Principal {current_principal.id} denied report {report_id}")
        raise UnauthorizedException("You can only view your own reports", redirect="/my-reports")
    return report
