from __future__ import annotations

import uuid
from typing import Callable, Optional, Sequence

from ..core.constants import DEPARTMENT_KEY
from ..storage.collection import JsonCollection
from ..storage.kv_store import KeyValueStore
from .model import Department, department_from_dict, department_to_dict
from .repository import DepartmentRepository


class KVDepartmentRepository(DepartmentRepository):
    def __init__(self, store: KeyValueStore, *, id_factory: Callable[[], str] = lambda: uuid.uuid4().hex):
        self._items = JsonCollection(store, DEPARTMENT_KEY, encode=department_to_dict, decode=department_from_dict)
        self._new_id = id_factory

    def list_all(self) -> Sequence[Department]:
        return self._items.load()

    def get_by_id(self, dept_id: str) -> Optional[Department]:
        return self._items.find(lambda d: d.id == dept_id)

    def seed_if_empty(self, departments: Sequence[Department]) -> bool:
        return self._items.save_if_missing(list(departments))

    def create(self, *, name: str, description: str) -> Department:
        return self._items.append(Department(id=self._new_id(), name=name, description=description))

    def update(self, department: Department) -> bool:
        return self._items.replace(lambda d: d.id == department.id, lambda _: department) is not None

    def delete_by_id(self, dept_id: str) -> bool:
        return self._items.remove(lambda d: d.id == dept_id) > 0
