from __future__ import annotations

from datetime import date, datetime, time

import pytest

from personnel_tracker.attendance.duration import TimeOfDayDurationCalculator
from personnel_tracker.core.enums import ErrorKind
from personnel_tracker.core.exceptions import AlreadyCheckedInError, NoOpenSessionError, ValidationError


def at(hour: int, minute: int, *, day: int = 31) -> datetime:
    return datetime(2026, 1, day, hour, minute)


def test_check_in_creates_open_record(attendance_service, attendance_repo):
    rec = attendance_service.check_in("p1", "Ada", now=datetime(2026, 1, 31, 9, 0, 59))

    assert rec.personnel_id == "p1"
    assert rec.personnel_name == "Ada"
    assert rec.date == date(2026, 1, 31)
    assert rec.check_in == time(9, 0)
    assert rec.check_out is None
    assert rec.duration == 0
    assert list(attendance_repo.list_all()) == [rec]


def test_scenario_check_in_then_out_full_day(attendance_service):
    attendance_service.check_in("p1", "Ada", now=at(9, 0))
    rec = attendance_service.check_out("p1", now=at(17, 30))

    assert rec.check_out == time(17, 30)
    assert rec.duration == 510


def test_second_check_in_while_open_is_rejected(attendance_service, attendance_repo):
    attendance_service.check_in("p1", "Ada", now=at(9, 0))

    with pytest.raises(AlreadyCheckedInError) as exc:
        attendance_service.check_in("p1", "Ada", now=at(10, 0))

    assert exc.value.kind == ErrorKind.ALREADY_CHECKED_IN
    assert len(attendance_repo.list_all()) == 1


def test_check_in_again_after_checkout_opens_new_session(attendance_service, attendance_repo):
    attendance_service.check_in("p1", "Ada", now=at(9, 0))
    attendance_service.check_out("p1", now=at(12, 0))
    attendance_service.check_in("p1", "Ada", now=at(13, 0))

    records = attendance_repo.list_all()
    assert len(records) == 2
    assert [r.is_open for r in records] == [False, True]


def test_open_session_yesterday_does_not_block_today(attendance_service):
    attendance_service.check_in("p1", "Ada", now=at(9, 0, day=30))
    rec = attendance_service.check_in("p1", "Ada", now=at(9, 0, day=31))
    assert rec.date == date(2026, 1, 31)


def test_check_out_without_open_session_fails_and_keeps_store(attendance_service, store):
    before = dict((k, store.get(k)) for k in store.keys())

    with pytest.raises(NoOpenSessionError) as exc:
        attendance_service.check_out("p1", now=at(17, 0))

    assert exc.value.kind == ErrorKind.NO_OPEN_SESSION
    assert dict((k, store.get(k)) for k in store.keys()) == before


def test_check_out_twice_fails(attendance_service):
    attendance_service.check_in("p1", "Ada", now=at(9, 0))
    attendance_service.check_out("p1", now=at(10, 0))

    with pytest.raises(NoOpenSessionError):
        attendance_service.check_out("p1", now=at(11, 0))


def test_check_out_earlier_than_check_in_clamps_to_zero(attendance_service):
    # Overnight sessions are not representable: time-of-day only, no wrap.
    attendance_service.check_in("p1", "Ada", now=at(22, 0))
    rec = attendance_service.check_out("p1", now=at(6, 0))

    assert rec.check_out == time(6, 0)
    assert rec.duration == 0


def test_clock_is_used_when_now_is_omitted(attendance_service, fixed_now):
    rec = attendance_service.check_in("p1", "Ada")
    assert rec.date == fixed_now.date()
    assert rec.check_in == time(9, 0)


def test_today_and_monthly_views(attendance_service, fixed_now):
    attendance_service.check_in("p1", "Ada", now=datetime(2026, 1, 5, 9, 0))
    attendance_service.check_in("p2", "Bob", now=datetime(2026, 1, 31, 9, 0))
    attendance_service.check_in("p3", "Cy", now=datetime(2026, 2, 1, 9, 0))
    attendance_service.check_in("p4", "Di", now=datetime(2025, 1, 10, 9, 0))

    assert [r.personnel_name for r in attendance_service.get_today()] == ["Bob"]
    assert [r.personnel_name for r in attendance_service.get_monthly()] == ["Ada", "Bob", "Di"]


def test_open_session_for_and_delete(attendance_service):
    rec = attendance_service.check_in("p1", "Ada", now=at(9, 0))
    assert attendance_service.open_session_for("p1", now=at(12, 0)) == rec

    assert attendance_service.delete_record(rec.id) is True
    assert attendance_service.delete_record(rec.id) is False
    assert attendance_service.open_session_for("p1", now=at(12, 0)) is None


def test_total_minutes(attendance_service):
    attendance_service.check_in("p1", "Ada", now=at(9, 0))
    attendance_service.check_out("p1", now=at(10, 15))
    attendance_service.check_in("p2", "Bob", now=at(9, 0))

    assert attendance_service.calculate_total_minutes(attendance_service.list_records()) == 75


def test_time_of_day_calculator():
    calc = TimeOfDayDurationCalculator()
    assert calc.minutes_between(time(8, 30), time(17, 0)) == 510
    assert calc.minutes_between(time(8, 30), time(8, 30)) == 0
    assert calc.minutes_between(time(23, 0), time(1, 0)) == 0


def test_personnel_id_is_trimmed_for_every_session_call(attendance_service):
    attendance_service.check_in(" p1 ", "Ada", now=at(9, 0))

    assert attendance_service.open_session_for(" p1", now=at(9, 30)).personnel_id == "p1"
    assert attendance_service.check_out("p1 ", now=at(10, 0)).duration == 60


def test_non_text_notes_are_rejected(attendance_service, attendance_repo):
    with pytest.raises(ValidationError):
        attendance_service.check_in("p1", "Ada", now=at(9, 0), notes=5)

    assert list(attendance_repo.list_all()) == []
