"""
Report repository interface and its in-memory implementation.
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional
import logging
import threading

from .lifecycle import is_consistent
from .models import Report

logger = logging.getLogger(__name__)


class ReportRepository(ABC):
    """
    Storage seam for reports.
    
    Reads return ordered newest-created-first. `transaction()` serializes a
    read-validate-write sequence so no caller observes another's partial
    effect.
    """

    @abstractmethod
    def create(self, report: Report) -> Report:
        ...

    @abstractmethod
    def get(self, report_id: str) -> Optional[Report]:
        ...

    @abstractmethod
    def get_by_owner(self, user_id: str) -> List[Report]:
        ...

    @abstractmethod
    def get_all(self) -> List[Report]:
        ...

    @abstractmethod
    def update(self, report: Report) -> Report:
        ...

    @abstractmethod
    def transaction(self):
        ...


def _newest_first(reports: Iterable[Report]) -> List[Report]:
    # stable: equal timestamps keep head-of-table (most recent insert) first
    return sorted(reports, key=lambda r: r.created_at, reverse=True)


class InMemoryReportRepository(ReportRepository):
    """
    One table of reports, most recent insert at the head.
    
    All access goes through a re-entrant lock, and records cross the
    boundary as deep copies so callers never hold references into the table.
    """

    def __init__(self, reports: Optional[Iterable[Report]] = None):
        self._lock = threading.RLock()
        self._reports: List[Report] = []
        for report in reports or []:
            self._check(report)
            self._reports.append(report.model_copy(deep=True))

    @contextmanager
    def transaction(self) -> Iterator["InMemoryReportRepository"]:
        with self._lock:
            yield self

    def create(self, report: Report) -> Report:
        self._check(report)
        with self._lock:
            if self._index(report.id) is not None:
                raise ValueError(f"Report {report.id} already exists")
            self._reports.insert(0, report.model_copy(deep=True))
        return report.model_copy(deep=True)

    def get(self, report_id: str) -> Optional[Report]:
        with self._lock:
            index = self._index(report_id)
            if index is None:
                return None
            return self._reports[index].model_copy(deep=True)

    def get_by_owner(self, user_id: str) -> List[Report]:
        with self._lock:
            owned = [r.model_copy(deep=True) for r in self._reports if r.user_id == user_id]
        return _newest_first(owned)

    def get_all(self) -> List[Report]:
        with self._lock:
            everything = [r.model_copy(deep=True) for r in self._reports]
        return _newest_first(everything)

    def update(self, report: Report) -> Report:
        self._check(report)
        with self._lock:
            index = self._index(report.id)
            if index is None:
                raise KeyError(report.id)
            self._reports[index] = report.model_copy(deep=True)
        return report.model_copy(deep=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._reports)

    def _index(self, report_id: str) -> Optional[int]:
        for index, report in enumerate(self._reports):
            if report.id == report_id:
                return index
        return None

    @staticmethod
    def _check(report: Report) -> None:
        if not is_consistent(report):
            logger.error(f"Refusing to store inconsistent report {report.id} ({report.status.value})")
            raise ValueError(f"Report {report.id} status does not match its prescription")
