from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    subjects = container.subject_service

    @app.route("/subjects", methods=["GET"], endpoint="subjects_list")
    @json_endpoint("listing subjects")
    def subjects_list():
        return jsonify({"data": [s.to_dict() for s in subjects.list_subjects()]})

    @app.route("/subjects/<subject_id>", methods=["GET"], endpoint="subjects_get")
    @json_endpoint("fetching subject")
    def subjects_get(subject_id: str):
        return jsonify({"data": subjects.get_subject(subject_id).to_dict()})

    @app.route("/subjects", methods=["POST"], endpoint="subjects_create")
    @json_endpoint("creating subject")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def subjects_create():
        created = subjects.create_subject(name=json_body().get("name"))
        return jsonify({"data": created.to_dict()}), 201

    @app.route("/subjects/<subject_id>", methods=["PUT"], endpoint="subjects_update")
    @json_endpoint("updating subject")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def subjects_update(subject_id: str):
        updated = subjects.update_subject(subject_id, name=json_body().get("name"))
        return jsonify({"data": updated.to_dict()})

    @app.route("/subjects/<subject_id>", methods=["DELETE"], endpoint="subjects_delete")
    @json_endpoint("deleting subject")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def subjects_delete(subject_id: str):
        subjects.delete_subject(subject_id)
        return jsonify({"message": "Subject deleted"})
