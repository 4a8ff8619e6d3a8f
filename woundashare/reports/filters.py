"""
List filtering, sorting and dashboard summaries for reports.
"""
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .models import Report, ReportStatus

RECENT_REPORTS_LIMIT = 3


class StatusFilter(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class SortOrder(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"


def filter_reports(
    reports: Sequence[Report],
    status: StatusFilter = StatusFilter.ALL,
    query: Optional[str] = None,
    order: SortOrder = SortOrder.NEWEST,
    match_owner: bool = False
) -> List[Report]:
    """
    Filter by status, then by free-text query, then sort by creation time.
    
    Args:
        reports: Reports to filter
        status: Status to keep, or ALL
        query: Case-insensitive substring of title, description or location
        order: NEWEST or OLDEST first
        match_owner: Also match the query against the owner's display name
        
    Returns:
        List[Report]: A new list; the input is not modified
    """
    filtered = list(reports)
    if status != StatusFilter.ALL:
        filtered = [r for r in filtered if r.status.value == status.value]

    if query and query.strip():
        needle = query.strip().lower()

        def matches(report: Report) -> bool:
            fields = [report.title, report.description, report.location]
            if match_owner:
                fields.append(report.user_name)
            return any(needle in field.lower() for field in fields)

        filtered = [r for r in filtered if matches(r)]

    return sorted(filtered, key=lambda r: r.created_at, reverse=order == SortOrder.NEWEST)


def count_by_status(reports: Sequence[Report]) -> Dict[str, int]:
    pending = sum(1 for r in reports if r.status == ReportStatus.PENDING)
    completed = sum(1 for r in reports if r.status == ReportStatus.COMPLETED)
    return {"total": len(reports), "pending": pending, "completed": completed}


def recent_reports(reports: Sequence[Report], limit: int = RECENT_REPORTS_LIMIT) -> List[Report]:
    return filter_reports(reports, order=SortOrder.NEWEST)[:limit]
