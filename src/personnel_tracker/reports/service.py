from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, now_local
from ..core.exceptions import ValidationError
from ..personnel.repository import PersonnelRepository
from .formatter import attendance_to_csv, personnel_to_csv
from .query import (
    AttendanceStats,
    PersonnelSummary,
    ReportCriteria,
    aggregate,
    filter_records,
    summarize_by_personnel,
)


@dataclass(frozen=True)
class AttendanceReport:
    records: list[AttendanceRecord]
    stats: AttendanceStats
    summary: list[PersonnelSummary]


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        personnel: PersonnelRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._personnel = personnel
        self._clock = clock

    def today(self) -> date:
        return self._clock().date()

    def default_range(self) -> tuple[date, date]:
        """Current calendar month, first to last day."""
        return month_bounds(self.today())

    def filtered_records(self, criteria: ReportCriteria) -> list[AttendanceRecord]:
        if criteria.start_date and criteria.end_date and criteria.start_date > criteria.end_date:
            raise ValidationError("Start date must not be after end date")
        return filter_records(self._attendance.list_all(), self._personnel.list_all(), criteria)

    def build_report(self, criteria: ReportCriteria) -> AttendanceReport:
        records = self.filtered_records(criteria)
        return AttendanceReport(records=records, stats=aggregate(records), summary=summarize_by_personnel(records))

    def export_attendance_csv(self, criteria: ReportCriteria) -> str:
        return attendance_to_csv(self.filtered_records(criteria))

    def export_personnel_csv(self) -> str:
        return personnel_to_csv(self._personnel.list_all())
