"""
Report status lifecycle.

pending is the initial state and completed is terminal. Attaching a
prescription is the only edge. Re-attaching to a completed report keeps it
completed and replaces the prescription, unless overwriting is disabled.
"""
from typing import Dict, FrozenSet
import logging

from ..exceptions import InvalidTransitionException
from .models import Prescription, Report, ReportStatus

logger = logging.getLogger(__name__)

INITIAL_STATUS = ReportStatus.PENDING

TRANSITIONS: Dict[ReportStatus, FrozenSet[ReportStatus]] = {
    ReportStatus.PENDING: frozenset({ReportStatus.COMPLETED}),
    ReportStatus.COMPLETED: frozenset(),
}


def can_transition(current: ReportStatus, target: ReportStatus) -> bool:
    return target in TRANSITIONS.get(current, frozenset())


def is_consistent(report: Report) -> bool:
    """status == completed exactly when a prescription is present."""
    has_prescription = report.prescription is not None
    return (report.status == ReportStatus.COMPLETED) == has_prescription


def complete_with_prescription(report: Report, prescription: Prescription,
                               allow_overwrite: bool = True) -> Report:
    """
    Return a copy of the report carrying the prescription, moved to completed.
    
    Args:
        report: Current stored report
        prescription: Prescription to attach, already bound to report.id
        allow_overwrite: Whether a completed report may be re-prescribed
        
    Returns:
        Report: The updated copy; the input is not modified
        
    Raises:
        InvalidTransitionException: If the report is completed and
            overwriting is disabled
    """
    if report.status == ReportStatus.COMPLETED:
        if not allow_overwrite:
            logger.warning(f"Refused to replace prescription on completed report {report.id}")
            raise InvalidTransitionException(
                f"Report {report.id} is already completed"
            )
        previous = report.prescription.id if report.prescription else None
        logger.warning(
            f"Replacing prescription {previous} on completed report {report.id} with {prescription.id}"
        )
    elif not can_transition(report.status, ReportStatus.COMPLETED):
        raise InvalidTransitionException(
            f"Report {report.id} cannot move from {report.status.value} to completed"
        )

    return report.model_copy(
        update={"status": ReportStatus.COMPLETED, "prescription": prescription},
        deep=True,
    )
