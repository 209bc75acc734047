"""Filtering and aggregation over attendance snapshots.

Pure functions: callers pass in freshly loaded records and personnel.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..personnel.model import Personnel


@dataclass(frozen=True)
class ReportCriteria:
    """All fields optional; set fields are combined with AND."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    department: Optional[str] = None
    personnel_name: Optional[str] = None


@dataclass(frozen=True)
class AttendanceStats:
    total_minutes: int
    total_days: int
    total_personnel: int
    avg_minutes_per_day: float


@dataclass(frozen=True)
class PersonnelSummary:
    name: str
    total_minutes: int
    total_days: int


def filter_records(
    records: Iterable[AttendanceRecord],
    personnel: Iterable[Personnel],
    criteria: ReportCriteria,
) -> list[AttendanceRecord]:
    out = list(records)

    if criteria.start_date is not None:
        out = [r for r in out if r.date >= criteria.start_date]
    if criteria.end_date is not None:
        out = [r for r in out if r.date <= criteria.end_date]

    if criteria.department is not None:
        # Joined on the name snapshot, not on personnel_id.
        names = {p.name for p in personnel if p.department == criteria.department}
        out = [r for r in out if r.personnel_name in names]

    if criteria.personnel_name is not None:
        out = [r for r in out if r.personnel_name == criteria.personnel_name]

    return out


def aggregate(records: Sequence[AttendanceRecord]) -> AttendanceStats:
    total_minutes = sum(r.duration for r in records)
    total_days = len({r.date for r in records})
    total_personnel = len({r.personnel_name for r in records})
    return AttendanceStats(
        total_minutes=total_minutes,
        total_days=total_days,
        total_personnel=total_personnel,
        avg_minutes_per_day=total_minutes / total_days if total_days > 0 else 0,
    )


def summarize_by_personnel(records: Iterable[AttendanceRecord]) -> list[PersonnelSummary]:
    totals: dict[str, list[int]] = {}
    for r in records:
        s = totals.setdefault(r.personnel_name, [0, 0])
        s[0] += r.duration
        s[1] += 1

    summary = [PersonnelSummary(name=name, total_minutes=m, total_days=d) for name, (m, d) in totals.items()]
    summary.sort(key=lambda s: s.total_minutes, reverse=True)
    return summary
