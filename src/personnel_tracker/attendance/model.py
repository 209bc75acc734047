from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_date, format_time, parse_date, parse_time


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one daily attendance session.

    ``personnel_name`` is a snapshot taken at check-in. ``check_out`` is None
    while the session is open, and ``duration`` (minutes) stays 0 until then.
    """

    id: str
    personnel_id: str
    personnel_name: str
    date: date
    check_in: time
    check_out: Optional[time] = None
    duration: int = 0
    notes: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.check_out is None


def record_to_dict(r: AttendanceRecord) -> dict:
    out = {
        "id": r.id,
        "personnelId": r.personnel_id,
        "personnelName": r.personnel_name,
        "date": format_date(r.date),
        "checkIn": format_time(r.check_in),
        "checkOut": format_time(r.check_out) if r.check_out else None,
        "duration": int(r.duration),
    }
    if r.notes:
        out["notes"] = r.notes
    return out


def record_from_dict(d: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(d["id"]),
        personnel_id=str(d["personnelId"]),
        personnel_name=d.get("personnelName", ""),
        date=parse_date(d["date"]),
        check_in=parse_time(d["checkIn"]),
        check_out=parse_time(d["checkOut"]) if d.get("checkOut") else None,
        duration=int(d.get("duration") or 0),
        notes=d.get("notes"),
    )
