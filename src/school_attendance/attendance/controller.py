from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    attendance = container.attendance_service

    @app.route("/attendance", methods=["POST"], endpoint="attendance_create")
    @json_endpoint("recording attendance")
    @guards.authenticate
    @guards.require_role([Role.TEACHER])
    def attendance_create():
        data = json_body()
        record = attendance.record(
            class_name=data.get("className"),
            date=data.get("date"),
            student_name=data.get("studentName"),
            student_email=data.get("studentEmail"),
            status=data.get("status"),
        )
        return jsonify({"data": record.to_dict()}), 201

    @app.route("/attendance/<attendance_id>", methods=["PUT"], endpoint="attendance_update")
    @json_endpoint("updating attendance")
    @guards.authenticate
    @guards.require_role([Role.TEACHER])
    def attendance_update(attendance_id: str):
        record = attendance.update_status(attendance_id, status=json_body().get("status"))
        return jsonify({"data": record.to_dict()})

    @app.route("/attendance/session/<session_id>", methods=["GET"], endpoint="attendance_by_session")
    @json_endpoint("listing attendance by session")
    @guards.authenticate
    @guards.require_role([Role.ADMIN, Role.TEACHER])
    def attendance_by_session(session_id: str):
        return jsonify({"data": [r.to_dict() for r in attendance.for_session(session_id)]})

    @app.route("/attendance/student/<student_id>", methods=["GET"], endpoint="attendance_by_student")
    @json_endpoint("listing attendance by student")
    @guards.authenticate
    @guards.require_role([Role.ADMIN, Role.TEACHER])
    def attendance_by_student(student_id: str):
        return jsonify({"data": [r.to_dict() for r in attendance.for_student(student_id)]})

    @app.route("/attendance/class/<class_id>", methods=["GET"], endpoint="attendance_by_class")
    @json_endpoint("listing attendance by class")
    @guards.authenticate
    @guards.require_role([Role.ADMIN, Role.TEACHER])
    def attendance_by_class(class_id: str):
        return jsonify({"data": [r.to_dict() for r in attendance.for_class(class_id)]})
