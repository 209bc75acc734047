from __future__ import annotations

from datetime import datetime

import pytest

from personnel_tracker.attendance.kv_attendance_repository import KVAttendanceRepository
from personnel_tracker.attendance.service import AttendanceService
from personnel_tracker.container import build_container
from personnel_tracker.main import create_app
from personnel_tracker.personnel.kv_personnel_repository import KVPersonnelRepository
from personnel_tracker.storage.kv_store import InMemoryKeyValueStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 9, 0, 42)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def attendance_repo(store) -> KVAttendanceRepository:
    return KVAttendanceRepository(store)


@pytest.fixture
def personnel_repo(store) -> KVPersonnelRepository:
    return KVPersonnelRepository(store)


@pytest.fixture
def attendance_service(attendance_repo, fixed_now) -> AttendanceService:
    return AttendanceService(attendance_repo, clock=lambda: fixed_now)


@pytest.fixture
def container(store, fixed_now):
    return build_container(store=store, clock=lambda: fixed_now)


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()
