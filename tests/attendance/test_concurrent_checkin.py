from __future__ import annotations

import threading
import time
from datetime import datetime

import pytest

from personnel_tracker.attendance.kv_attendance_repository import KVAttendanceRepository
from personnel_tracker.attendance.service import AttendanceService
from personnel_tracker.core.exceptions import AlreadyCheckedInError, NoOpenSessionError
from personnel_tracker.storage.kv_store import InMemoryKeyValueStore, StoreLockTimeout


class SlowStore(InMemoryKeyValueStore):
    """Widens the gap between reading a collection and writing it back."""

    def get(self, key):
        value = super().get(key)
        time.sleep(0.05)
        return value


NOW = datetime(2026, 1, 31, 9, 0)


@pytest.fixture
def slow_repo() -> KVAttendanceRepository:
    return KVAttendanceRepository(SlowStore())


@pytest.fixture
def slow_service(slow_repo) -> AttendanceService:
    return AttendanceService(slow_repo, clock=lambda: NOW)


def run_together(*calls):
    """Start every call at once; return one result or exception per call."""
    barrier = threading.Barrier(len(calls))
    results: list = [None] * len(calls)

    def worker(index, fn):
        barrier.wait()
        try:
            results[index] = fn()
        except Exception as exc:
            results[index] = exc

    threads = [threading.Thread(target=worker, args=(i, fn)) for i, fn in enumerate(calls)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    return results


def test_simultaneous_check_ins_for_same_person_open_one_session(slow_service, slow_repo):
    results = run_together(
        lambda: slow_service.check_in("p1", "Ada"),
        lambda: slow_service.check_in("p1", "Ada"),
    )

    rejected = [r for r in results if isinstance(r, AlreadyCheckedInError)]
    assert len(rejected) == 1
    assert len(slow_repo.list_all()) == 1


def test_simultaneous_check_ins_for_different_people_are_both_stored(slow_service, slow_repo):
    results = run_together(
        lambda: slow_service.check_in("p1", "Ada"),
        lambda: slow_service.check_in("p2", "Bob"),
    )

    assert not [r for r in results if isinstance(r, Exception)]
    assert sorted(r.personnel_id for r in slow_repo.list_all()) == ["p1", "p2"]


def test_simultaneous_check_outs_close_the_session_once(slow_service, slow_repo):
    slow_service.check_in("p1", "Ada", now=datetime(2026, 1, 31, 8, 0))

    results = run_together(
        lambda: slow_service.check_out("p1"),
        lambda: slow_service.check_out("p1"),
    )

    assert len([r for r in results if isinstance(r, NoOpenSessionError)]) == 1
    [record] = slow_repo.list_all()
    assert record.duration == 60


def test_named_lock_times_out():
    store = InMemoryKeyValueStore(lock_timeout=0.01)

    with store.locked("k"):
        with pytest.raises(StoreLockTimeout):
            with store.locked("k"):
                pass
        with store.locked("other"):
            pass
