"""
Admin Router - report review, prescription issuance and user listing.

Every endpoint is guarded before any store operation runs.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
import logging

from ..auth.dependencies import require_admin, require_permission
from ..auth.exceptions import UnauthorizedException
from ..auth.models import Principal, UserRole
from ..auth.service import PrincipalDirectory
from ..core.pagination import PageParams, paginate
from ..core.permissions import Permission, can_create_prescription
from ..database import get_principal_directory, get_report_repository
from ..exceptions import NotFoundException
from ..reports.filters import SortOrder, StatusFilter, count_by_status, filter_reports
from ..reports.models import Report
from ..reports.repository import ReportRepository
from ..reports.schemas import PrescriptionCreate
from ..reports.service import attach_prescription, get_all_reports, get_report
from .schemas import AdminReportSummary, PrincipalPage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/admin", tags=["Admin"])

@router.get("/reports", response_model=List[Report])
async def list_all_reports(
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status", description="Filter by status"),
    q: Optional[str] = Query(None, description="Search title, description, location and patient name"),
    order: SortOrder = Query(SortOrder.NEWEST, description="newest or oldest first"),
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_admin)
):
    """
    List every report for review.
    """
    reports = await get_all_reports(repository)
    return filter_reports(reports, status=status_filter, query=q, order=order, match_owner=True)

@router.get("/reports/summary", response_model=AdminReportSummary)
async def all_reports_summary(
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_admin)
):
    """
    Pending/completed counts over every report.
    """
    reports = await get_all_reports(repository)
    return AdminReportSummary(**count_by_status(reports))

@router.get("/reports/{report_id}", response_model=Report)
async def read_any_report(
    report_id: str,
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_admin)
):
    """
    Get one report for review.
    """
    report = await get_report(repository, report_id)
    if report is None:
        raise NotFoundException(f"Report {report_id} not found")
    return report

@router.post("/reports/{report_id}/prescription", response_model=Report)
async def issue_prescription(
    report_id: str,
    prescription_data: PrescriptionCreate,
    repository: ReportRepository = Depends(get_report_repository),
    current_principal: Principal = Depends(require_admin)
):
    """
    Attach a prescription to a report, completing it.
    """
    if not can_create_prescription(current_principal):
        raise UnauthorizedException("Only admins can issue prescriptions")
    return await attach_prescription(
        repository,
        report_id,
        diagnosis=prescription_data.diagnosis,
        treatment=prescription_data.treatment,
        medications=[m.model_dump() for m in prescription_data.medications],
        follow_up_date=prescription_data.follow_up_date,
        doctor_notes=prescription_data.doctor_notes,
    )

@router.get("/users", response_model=PrincipalPage)
async def list_users(
    search: Optional[str] = Query(None, description="Search by name or email"),
    role: Optional[UserRole] = Query(None, description="Only patients or only admins; omit for all"),
    page_params: PageParams = Depends(),
    directory: PrincipalDirectory = Depends(get_principal_directory),
    current_principal: Principal = Depends(require_permission(Permission.VIEW_USERS))
):
    """
    Paginated list of known principals.
    """
    return paginate(directory.list(search, role), page_params)
