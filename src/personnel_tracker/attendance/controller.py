from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_non_empty
from ..container import Container
from .model import record_to_dict


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    personnel = container.personnel_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        return jsonify([record_to_dict(r) for r in attendance.list_records()])

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        return jsonify([record_to_dict(r) for r in attendance.get_today()])

    @app.route("/api/attendance/month", methods=["GET"], endpoint="attendance_month")
    def attendance_month():
        records = attendance.get_monthly()
        return jsonify(
            {
                "records": [record_to_dict(r) for r in records],
                "totalMinutes": attendance.calculate_total_minutes(records),
            }
        )

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    def attendance_check_in():
        data = request.get_json(silent=True) or {}
        personnel_id = require_non_empty(data.get("personnelId"), "Personnel id")
        name = data.get("personnelName") or personnel.get_personnel(personnel_id).name
        record = attendance.check_in(personnel_id, name, notes=data.get("notes"))
        return jsonify({"success": True, "record": record_to_dict(record)}), 201

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    def attendance_check_out():
        data = request.get_json(silent=True) or {}
        personnel_id = require_non_empty(data.get("personnelId"), "Personnel id")
        record = attendance.check_out(personnel_id)
        return jsonify({"success": True, "record": record_to_dict(record)})

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(record_id: str):
        return jsonify({"success": True, "deleted": attendance.delete_record(record_id)})
