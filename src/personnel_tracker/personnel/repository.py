from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PersonnelStatus
from .model import Personnel


class PersonnelRepository(Protocol):
    """Repository interface for Personnel.

    Note: the service layer depends on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Personnel]:
        raise NotImplementedError

    def get_by_id(self, personnel_id: str) -> Optional[Personnel]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, personnel: Personnel) -> bool:
        raise NotImplementedError

    def delete_by_id(self, personnel_id: str) -> bool:
        raise NotImplementedError
