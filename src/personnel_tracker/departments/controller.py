from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .model import department_to_dict


def register(app: Flask, container: Container) -> None:
    svc = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    def departments_list():
        return jsonify([department_to_dict(d) for d in svc.list_departments()])

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    def departments_create():
        data = request.get_json(silent=True) or {}
        created = svc.add_department(name=data.get("name", ""), description=data.get("description", ""))
        return jsonify(department_to_dict(created)), 201

    @app.route("/api/departments/<dept_id>", methods=["PATCH", "PUT"], endpoint="departments_update")
    def departments_update(dept_id: str):
        data = request.get_json(silent=True) or {}
        updated = svc.update_department(dept_id, name=data.get("name"), description=data.get("description"))
        return jsonify(department_to_dict(updated))

    @app.route("/api/departments/<dept_id>", methods=["DELETE"], endpoint="departments_delete")
    def departments_delete(dept_id: str):
        return jsonify({"success": True, "deleted": svc.delete_department(dept_id)})
