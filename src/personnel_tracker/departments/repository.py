from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, dept_id: str) -> Optional[Department]:
        raise NotImplementedError

    def seed_if_empty(self, departments: Sequence[Department]) -> bool:
        """Store ``departments`` unless data already exists; True when written."""

        raise NotImplementedError

    def create(self, *, name: str, description: str) -> Department:
        raise NotImplementedError

    def update(self, department: Department) -> bool:
        raise NotImplementedError

    def delete_by_id(self, dept_id: str) -> bool:
        raise NotImplementedError
