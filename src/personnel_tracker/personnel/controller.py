from __future__ import annotations

from datetime import date
from typing import Any

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_date, parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container
from .model import personnel_to_dict

# JSON body keys -> service field names
FIELD_MAP = {
    "name": "name",
    "email": "email",
    "position": "position",
    "department": "department",
    "phoneNumber": "phone_number",
    "startDate": "start_date",
    "status": "status",
}


def _parse_start_date(value: Any) -> date:
    # Accept the stored DD.MM.YYYY form as well as HTML date inputs (YYYY-MM-DD).
    text = str(value or "").strip()
    if "-" in text:
        return parse_iso_date(text)
    return parse_date(text)


def _fields_from_json(payload: dict) -> dict[str, Any]:
    unknown = sorted(k for k in payload if k not in FIELD_MAP and k != "id")
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}")

    fields = {FIELD_MAP[k]: v for k, v in payload.items() if k in FIELD_MAP}
    if fields.get("start_date"):
        fields["start_date"] = _parse_start_date(fields["start_date"])
    elif "start_date" in fields:
        fields.pop("start_date")
    return fields


def register(app: Flask, container: Container) -> None:
    svc = container.personnel_service

    @app.route("/api/personnel", methods=["GET"], endpoint="personnel_list")
    def personnel_list():
        return jsonify([personnel_to_dict(p) for p in svc.list_personnel()])

    @app.route("/api/personnel", methods=["POST"], endpoint="personnel_create")
    def personnel_create():
        fields = _fields_from_json(request.get_json(silent=True) or {})
        created = svc.add_personnel(
            name=fields.get("name", ""),
            email=fields.get("email", ""),
            position=fields.get("position", ""),
            department=fields.get("department", ""),
            start_date=fields.get("start_date"),
            status=fields.get("status", "active"),
            phone_number=fields.get("phone_number"),
        )
        return jsonify(personnel_to_dict(created)), 201

    @app.route("/api/personnel/<personnel_id>", methods=["GET"], endpoint="personnel_detail")
    def personnel_detail(personnel_id: str):
        return jsonify(personnel_to_dict(svc.get_personnel(personnel_id)))

    @app.route("/api/personnel/<personnel_id>", methods=["PATCH", "PUT"], endpoint="personnel_update")
    def personnel_update(personnel_id: str):
        fields = _fields_from_json(request.get_json(silent=True) or {})
        return jsonify(personnel_to_dict(svc.update_personnel(personnel_id, fields)))

    @app.route("/api/personnel/<personnel_id>", methods=["DELETE"], endpoint="personnel_delete")
    def personnel_delete(personnel_id: str):
        return jsonify({"success": True, "deleted": svc.delete_personnel(personnel_id)})
