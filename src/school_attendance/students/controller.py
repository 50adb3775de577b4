from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    students = container.student_service

    @app.route("/students", methods=["GET"], endpoint="students_list")
    @json_endpoint("listing students")
    def students_list():
        return jsonify({"data": [s.to_dict() for s in students.list_students()]})

    @app.route("/students/<student_id>", methods=["GET"], endpoint="students_get")
    @json_endpoint("fetching student")
    def students_get(student_id: str):
        return jsonify({"data": students.get_student(student_id).to_dict()})

    @app.route("/students", methods=["POST"], endpoint="students_create")
    @json_endpoint("creating student")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def students_create():
        data = json_body()
        created = students.create_student(
            name=data.get("name"),
            email=data.get("email"),
            class_name=data.get("className"),
        )
        return jsonify({"data": created.to_dict()}), 201

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="students_update")
    @json_endpoint("updating student")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def students_update(student_id: str):
        data = json_body()
        updated = students.update_student(
            student_id,
            name=data.get("name"),
            email=data.get("email"),
            class_name=data.get("className"),
        )
        return jsonify({"data": updated.to_dict()})

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    @json_endpoint("deleting student")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def students_delete(student_id: str):
        students.delete_student(student_id)
        return jsonify({"message": "Student deleted"})
