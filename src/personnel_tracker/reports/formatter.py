from __future__ import annotations

import csv
import io
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_date, format_time
from ..core.constants import CSV_DELIMITER, EMPTY_FIELD_LABEL, OPEN_SESSION_LABEL
from ..personnel.model import Personnel

ATTENDANCE_HEADERS = ["Personnel", "Date", "Check In", "Check Out", "Duration"]
PERSONNEL_HEADERS = ["Name", "Email", "Position", "Department", "Phone", "Start Date", "Status"]


def format_duration(minutes: int) -> str:
    """125 -> '2h 5m'."""
    return f"{minutes // 60}h {minutes % 60}m"


def _write_rows(headers: list[str], rows: Iterable[list[str]]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, delimiter=CSV_DELIMITER, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    writer.writerows(rows)
    return out.getvalue().rstrip("\n")


def attendance_to_csv(records: Iterable[AttendanceRecord]) -> str:
    """One line per record; open sessions and zero durations get placeholders."""
    rows = (
        [
            r.personnel_name,
            format_date(r.date),
            format_time(r.check_in),
            format_time(r.check_out) if r.check_out else OPEN_SESSION_LABEL,
            format_duration(r.duration) if r.duration > 0 else EMPTY_FIELD_LABEL,
        ]
        for r in records
    )
    return _write_rows(ATTENDANCE_HEADERS, rows)


def personnel_to_csv(personnel: Iterable[Personnel]) -> str:
    rows = (
        [
            p.name,
            p.email,
            p.position,
            p.department,
            p.phone_number or EMPTY_FIELD_LABEL,
            format_date(p.start_date),
            "Active" if p.is_active else "Inactive",
        ]
        for p in personnel
    )
    return _write_rows(PERSONNEL_HEADERS, rows)
