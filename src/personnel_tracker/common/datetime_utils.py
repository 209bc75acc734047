from __future__ import annotations

import calendar
from datetime import date, datetime, time

from ..core.constants import DATE_FORMAT, ISO_DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def format_date(value: date) -> str:
    """Render a calendar date in the stored DD.MM.YYYY form."""
    return value.strftime(DATE_FORMAT)


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (DD.MM.YYYY): {value!r}")


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def parse_time(value: str) -> time:
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def truncate_to_minute(value: datetime) -> time:
    return value.time().replace(second=0, microsecond=0)


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so services can take it as an injectable clock.
    """
    return datetime.now()
