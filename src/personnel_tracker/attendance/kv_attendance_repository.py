from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, time
from typing import Callable, ContextManager, Optional, Sequence

from ..core.constants import ATTENDANCE_KEY
from ..storage.collection import JsonCollection
from ..storage.kv_store import KeyValueStore
from .model import AttendanceRecord, record_from_dict, record_to_dict
from .repository import AttendanceRepository


class KVAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore, *, id_factory: Callable[[], str] = lambda: uuid.uuid4().hex):
        self._store = store
        self._items = JsonCollection(store, ATTENDANCE_KEY, encode=record_to_dict, decode=record_from_dict)
        self._new_id = id_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._items.load()

    def get_open_for_personnel_and_date(self, personnel_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._items.find(lambda r: r.personnel_id == personnel_id and r.date == work_date and r.is_open)

    def session_lock(self, personnel_id: str, work_date: date) -> ContextManager[None]:
        return self._store.locked(f"{ATTENDANCE_KEY}:{personnel_id}:{work_date.isoformat()}")

    def create_checkin(
        self,
        *,
        personnel_id: str,
        personnel_name: str,
        work_date: date,
        check_in: time,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        return self._items.append(
            AttendanceRecord(
                id=self._new_id(),
                personnel_id=personnel_id,
                personnel_name=personnel_name,
                date=work_date,
                check_in=check_in,
                notes=notes,
            )
        )

    def update_checkout(self, *, record_id: str, check_out: time, duration: int) -> Optional[AttendanceRecord]:
        return self._items.replace(
            lambda r: r.id == record_id and r.is_open,
            lambda r: replace(r, check_out=check_out, duration=int(duration)),
        )

    def delete_by_id(self, record_id: str) -> bool:
        return self._items.remove(lambda r: r.id == record_id) > 0
