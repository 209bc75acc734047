from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import now_local, truncate_to_minute
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import AlreadyCheckedInError, NoOpenSessionError
from .duration import DurationCalculator, TimeOfDayDurationCalculator
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Time accounting: opens and closes one daily session per person.

    Every call re-reads the store; the service keeps no state of its own.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        calculator: Optional[DurationCalculator] = None,
    ):
        self._attendance = attendance
        self._clock = clock
        self._calculator = calculator or TimeOfDayDurationCalculator()

    def check_in(
        self,
        personnel_id: str,
        personnel_name: str,
        *,
        now: datetime | None = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        now = now or self._clock()
        today = now.date()
        personnel_id = require_non_empty(personnel_id, "Personnel id")
        notes = optional_text(notes, "Notes")

        # The open-session check and the write must not interleave with another check-in.
        with self._attendance.session_lock(personnel_id, today):
            if self._attendance.get_open_for_personnel_and_date(personnel_id, today):
                raise AlreadyCheckedInError(f"Personnel {personnel_id} is already checked in today")

            record = self._attendance.create_checkin(
                personnel_id=personnel_id,
                personnel_name=personnel_name,
                work_date=today,
                check_in=truncate_to_minute(now),
                notes=notes,
            )
        logger.info("Check-in personnel=%s date=%s at=%s", personnel_id, today, record.check_in)
        return record

    def check_out(self, personnel_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or self._clock()
        today = now.date()
        personnel_id = require_non_empty(personnel_id, "Personnel id")

        with self._attendance.session_lock(personnel_id, today):
            record = self._attendance.get_open_for_personnel_and_date(personnel_id, today)
            if not record:
                raise NoOpenSessionError(f"No open session for personnel {personnel_id} today")

            check_out = truncate_to_minute(now)
            duration = self._calculator.minutes_between(record.check_in, check_out)
            closed = self._attendance.update_checkout(record_id=record.id, check_out=check_out, duration=duration)
            if not closed:
                raise NoOpenSessionError(f"No open session for personnel {personnel_id} today")

        logger.info("Check-out personnel=%s date=%s duration=%dmin", personnel_id, today, duration)
        return closed

    def open_session_for(self, personnel_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        """Today's open record for a person, if any."""
        now = now or self._clock()
        personnel_id = require_non_empty(personnel_id, "Personnel id")
        return self._attendance.get_open_for_personnel_and_date(personnel_id, now.date())

    def list_records(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def get_today(self, *, now: datetime | None = None) -> list[AttendanceRecord]:
        today = (now or self._clock()).date()
        return [r for r in self._attendance.list_all() if r.date == today]

    def get_monthly(self, *, now: datetime | None = None) -> list[AttendanceRecord]:
        # Month-only match: records from the same month of other years count too.
        month = (now or self._clock()).month
        return [r for r in self._attendance.list_all() if r.date.month == month]

    def delete_record(self, record_id: str) -> bool:
        deleted = self._attendance.delete_by_id(record_id)
        if deleted:
            logger.info("Attendance record deleted id=%s", record_id)
        return deleted

    @staticmethod
    def calculate_total_minutes(records: Iterable[AttendanceRecord]) -> int:
        return sum(r.duration for r in records)
