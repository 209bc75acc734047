from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    description: str = ""


def department_to_dict(d: Department) -> dict:
    return {"id": d.id, "name": d.name, "description": d.description}


def department_from_dict(d: dict) -> Department:
    return Department(id=str(d["id"]), name=d.get("name", ""), description=d.get("description", ""))
