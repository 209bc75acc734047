from __future__ import annotations

from datetime import date, time
from typing import ContextManager, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_open_for_personnel_and_date(self, personnel_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def session_lock(self, personnel_id: str, work_date: date) -> ContextManager[None]:
        """Serializes check-in/check-out for one person on one day."""

        raise NotImplementedError

    def create_checkin(
        self,
        *,
        personnel_id: str,
        personnel_name: str,
        work_date: date,
        check_in: time,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_checkout(self, *, record_id: str, check_out: time, duration: int) -> Optional[AttendanceRecord]:
        """Close an open record; returns None when it is missing or already closed."""

        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
