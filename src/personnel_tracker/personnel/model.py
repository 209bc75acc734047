from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_date, parse_date
from ..core.enums import PersonnelStatus


@dataclass(frozen=True)
class Personnel:
    """Domain entity: an employee tracked by the system.

    ``department`` holds the department *name*, not its id.
    """

    id: str
    name: str
    email: str
    position: str
    department: str
    start_date: date
    status: PersonnelStatus = PersonnelStatus.ACTIVE
    phone_number: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == PersonnelStatus.ACTIVE


EDITABLE_FIELDS = ("name", "email", "position", "department", "phone_number", "start_date", "status")


def personnel_to_dict(p: Personnel) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "email": p.email,
        "position": p.position,
        "department": p.department,
        "phoneNumber": p.phone_number or "",
        "startDate": format_date(p.start_date),
        "status": p.status.value,
    }


def personnel_from_dict(d: dict) -> Personnel:
    return Personnel(
        id=str(d["id"]),
        name=d.get("name", ""),
        email=d.get("email", ""),
        position=d.get("position", ""),
        department=d.get("department", ""),
        start_date=parse_date(d["startDate"]),
        status=PersonnelStatus(d.get("status", PersonnelStatus.ACTIVE.value)),
        phone_number=d.get("phoneNumber") or None,
    )
