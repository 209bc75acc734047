from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty, require_one_of
from ..core.enums import PersonnelStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import EDITABLE_FIELDS, Personnel
from .repository import PersonnelRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("name", "Name"),
    ("email", "Email"),
    ("position", "Position"),
    ("department", "Department"),
)


def _coerce_status(value: Any) -> PersonnelStatus:
    if isinstance(value, PersonnelStatus):
        return value
    require_one_of(str(value), "Status", [s.value for s in PersonnelStatus])
    return PersonnelStatus(str(value))


def _validated(p: Personnel) -> Personnel:
    """Return ``p`` with required text fields stripped, or raise ValidationError."""
    cleaned = {field: require_non_empty(getattr(p, field), label) for field, label in REQUIRED_FIELDS}
    if not isinstance(p.start_date, date):
        raise ValidationError("Start date is required")
    phone = optional_text(p.phone_number, "Phone number")
    return replace(p, phone_number=phone, **cleaned)


class PersonnelService:
    """Use case: manage personnel (create, partial update, delete)."""

    def __init__(self, personnel: PersonnelRepository, *, clock: Callable[[], datetime] = now_local):
        self._personnel = personnel
        self._clock = clock

    def list_personnel(self) -> Sequence[Personnel]:
        return self._personnel.list_all()

    def get_personnel(self, personnel_id: str) -> Personnel:
        p = self._personnel.get_by_id(personnel_id)
        if not p:
            raise NotFoundError(f"Personnel {personnel_id} not found")
        return p

    def add_personnel(
        self,
        *,
        name: str,
        email: str,
        position: str,
        department: str,
        start_date: Optional[date] = None,
        status: PersonnelStatus | str = PersonnelStatus.ACTIVE,
        phone_number: Optional[str] = None,
    ) -> Personnel:
        draft = _validated(
            Personnel(
                id="",
                name=name,
                email=email,
                position=position,
                department=department,
                start_date=start_date or self._clock().date(),
                status=_coerce_status(status),
                phone_number=phone_number,
            )
        )
        created = self._personnel.create(
            name=draft.name,
            email=draft.email,
            position=draft.position,
            department=draft.department,
            start_date=draft.start_date,
            status=draft.status,
            phone_number=draft.phone_number,
        )
        logger.info("Personnel created id=%s department=%s", created.id, created.department)
        return created

    def update_personnel(self, personnel_id: str, changes: dict[str, Any]) -> Personnel:
        """Merge ``changes`` field by field into the stored entry.

        The merged entry must still satisfy the create-time rules; on failure
        nothing is written.
        """
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown or read-only fields: {', '.join(unknown)}")

        current = self.get_personnel(personnel_id)
        updates = dict(changes)
        if "status" in updates:
            updates["status"] = _coerce_status(updates["status"])

        merged = _validated(replace(current, **updates))
        if not self._personnel.update(merged):
            raise NotFoundError(f"Personnel {personnel_id} not found")
        return merged

    def delete_personnel(self, personnel_id: str) -> bool:
        """Delete by id. Attendance records of the person are left in place."""
        deleted = self._personnel.delete_by_id(personnel_id)
        if deleted:
            logger.info("Personnel deleted id=%s", personnel_id)
        return deleted
