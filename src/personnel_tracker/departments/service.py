from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_DEPARTMENTS
from ..core.exceptions import NotFoundError, ValidationError
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


def default_departments() -> list[Department]:
    return [Department(id=i, name=n, description=d) for i, n, d in DEFAULT_DEPARTMENTS]


class DepartmentService:
    """Use case: department list used by personnel forms and report filters."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[Department]:
        """All departments; seeds the default set on the first read of an empty store."""
        defaults = default_departments()
        if self._departments.seed_if_empty(defaults):
            logger.info("Seeded %d default departments", len(defaults))
            return defaults
        return self._departments.list_all()

    def department_names(self) -> list[str]:
        return [d.name for d in self.list_departments()]

    def _ensure_unique_name(self, name: str, *, exclude_id: Optional[str] = None) -> None:
        for d in self.list_departments():
            if d.name == name and d.id != exclude_id:
                raise ValidationError(f"Department {name!r} already exists")

    def add_department(self, *, name: str, description: str = "") -> Department:
        name = require_non_empty(name, "Department name")
        self._ensure_unique_name(name)
        return self._departments.create(name=name, description=optional_text(description, "Description") or "")

    def update_department(self, dept_id: str, *, name: Optional[str] = None, description: Optional[str] = None) -> Department:
        self.list_departments()
        current = self._departments.get_by_id(dept_id)
        if not current:
            raise NotFoundError(f"Department {dept_id} not found")

        updated = current
        if name is not None:
            name = require_non_empty(name, "Department name")
            self._ensure_unique_name(name, exclude_id=dept_id)
            updated = replace(updated, name=name)
        if description is not None:
            updated = replace(updated, description=optional_text(description, "Description") or "")

        self._departments.update(updated)
        return updated

    def delete_department(self, dept_id: str) -> bool:
        return self._departments.delete_by_id(dept_id)
