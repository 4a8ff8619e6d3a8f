"""
Admin Schemas - response models for the review dashboard and user listing.
"""
from ..auth.models import Principal
from ..core.pagination import PageResponse
from ..reports.schemas import StatusCounts

class AdminReportSummary(StatusCounts):
    """Counts over every report in the system."""

PrincipalPage = PageResponse[Principal]
