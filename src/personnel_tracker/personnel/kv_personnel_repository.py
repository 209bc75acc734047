from __future__ import annotations

import uuid
from datetime import date
from typing import Callable, Optional, Sequence

from ..core.constants import PERSONNEL_KEY
from ..core.enums import PersonnelStatus
from ..storage.collection import JsonCollection
from ..storage.kv_store import KeyValueStore
from .model import Personnel, personnel_from_dict, personnel_to_dict
from .repository import PersonnelRepository


def new_id() -> str:
    return uuid.uuid4().hex


class KVPersonnelRepository(PersonnelRepository):
    def __init__(self, store: KeyValueStore, *, id_factory: Callable[[], str] = new_id):
        self._items = JsonCollection(store, PERSONNEL_KEY, encode=personnel_to_dict, decode=personnel_from_dict)
        self._new_id = id_factory

    def list_all(self) -> Sequence[Personnel]:
        return self._items.load()

    def get_by_id(self, personnel_id: str) -> Optional[Personnel]:
        return self._items.find(lambda p: p.id == personnel_id)

    def create(
        self,
        *,
        name: str,
        email: str,
        position: str,
        department: str,
        start_date: date,
        status: PersonnelStatus,
        phone_number: Optional[str] = None,
    ) -> Personnel:
        return self._items.append(
            Personnel(
                id=self._new_id(),
                name=name,
                email=email,
                position=position,
                department=department,
                start_date=start_date,
                status=status,
                phone_number=phone_number,
            )
        )

    def update(self, personnel: Personnel) -> bool:
        return self._items.replace(lambda p: p.id == personnel.id, lambda _: personnel) is not None

    def delete_by_id(self, personnel_id: str) -> bool:
        return self._items.remove(lambda p: p.id == personnel_id) > 0
