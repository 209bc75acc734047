from __future__ import annotations

from datetime import date

import pytest

from personnel_tracker.attendance.service import AttendanceService
from personnel_tracker.core.enums import ErrorKind, PersonnelStatus
from personnel_tracker.core.exceptions import NotFoundError, ValidationError
from personnel_tracker.personnel.service import PersonnelService


@pytest.fixture
def svc(personnel_repo, fixed_now):
    return PersonnelService(personnel_repo, clock=lambda: fixed_now)


def add_ada(svc: PersonnelService):
    return svc.add_personnel(
        name=" Ada ",
        email="ada@example.com",
        position="Analyst",
        department="Management",
        start_date=date(2024, 3, 1),
        phone_number="",
    )


def test_add_assigns_id_and_defaults(svc):
    p = add_ada(svc)

    assert p.id
    assert p.name == "Ada"
    assert p.status == PersonnelStatus.ACTIVE
    assert p.phone_number is None
    assert svc.list_personnel() == [p]


def test_start_date_defaults_to_today(svc, fixed_now):
    p = svc.add_personnel(name="B", email="b@x", position="P", department="Sales")
    assert p.start_date == fixed_now.date()


@pytest.mark.parametrize("missing", ["name", "email", "position", "department"])
def test_add_requires_fields(svc, missing):
    fields = dict(name="A", email="a@x", position="P", department="Sales")
    fields[missing] = "  "

    with pytest.raises(ValidationError) as exc:
        svc.add_personnel(**fields)

    assert exc.value.kind == ErrorKind.VALIDATION_FAILED
    assert svc.list_personnel() == []


def test_add_rejects_unknown_status(svc):
    with pytest.raises(ValidationError):
        svc.add_personnel(name="A", email="a@x", position="P", department="Sales", status="retired")


def test_partial_update_merges_fields(svc):
    p = add_ada(svc)

    updated = svc.update_personnel(p.id, {"position": "Lead", "status": "inactive"})

    assert updated.position == "Lead"
    assert updated.status == PersonnelStatus.INACTIVE
    assert updated.email == "ada@example.com"
    assert svc.get_personnel(p.id) == updated


def test_update_that_blanks_required_field_leaves_store_unchanged(svc):
    p = add_ada(svc)

    with pytest.raises(ValidationError):
        svc.update_personnel(p.id, {"name": ""})

    assert svc.get_personnel(p.id) == p


def test_update_rejects_id_change(svc):
    p = add_ada(svc)
    with pytest.raises(ValidationError):
        svc.update_personnel(p.id, {"id": "other"})


def test_update_unknown_id(svc):
    with pytest.raises(NotFoundError):
        svc.update_personnel("nope", {"name": "X"})


def test_delete_keeps_attendance_records(svc, attendance_repo, fixed_now):
    p = add_ada(svc)
    attendance = AttendanceService(attendance_repo, clock=lambda: fixed_now)
    rec = attendance.check_in(p.id, p.name)

    assert svc.delete_personnel(p.id) is True
    assert svc.list_personnel() == []
    assert [r.id for r in attendance.list_records()] == [rec.id]
    assert svc.delete_personnel(p.id) is False
