from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.enums import Role

STAFF = [Role.ADMIN, Role.TEACHER]


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    sessions = container.session_service

    @app.route("/sessions", methods=["GET"], endpoint="sessions_list")
    @json_endpoint("listing sessions")
    def sessions_list():
        return jsonify({"data": [s.to_dict() for s in sessions.list_sessions()]})

    @app.route("/sessions/<session_id>", methods=["GET"], endpoint="sessions_get")
    @json_endpoint("fetching session")
    def sessions_get(session_id: str):
        return jsonify({"data": sessions.get_session(session_id).to_dict()})

    @app.route("/sessions", methods=["POST"], endpoint="sessions_create")
    @json_endpoint("creating session")
    @guards.authenticate
    @guards.require_role(STAFF)
    def sessions_create():
        data = json_body()
        created = sessions.create_session(
            requester=g.identity,
            date=data.get("date"),
            class_name=data.get("className"),
            subject_name=data.get("subjectName"),
            teacher_name=data.get("teacherName"),
        )
        return jsonify({"data": created.to_dict()}), 201

    @app.route("/sessions/<session_id>", methods=["PUT"], endpoint="sessions_update")
    @json_endpoint("updating session")
    @guards.authenticate
    @guards.require_role(STAFF)
    def sessions_update(session_id: str):
        data = json_body()
        updated = sessions.update_session(
            session_id,
            requester=g.identity,
            date=data.get("date"),
            class_name=data.get("className"),
            subject_name=data.get("subjectName"),
            teacher_name=data.get("teacherName"),
        )
        return jsonify({"data": updated.to_dict()})

    @app.route("/sessions/<session_id>", methods=["DELETE"], endpoint="sessions_delete")
    @json_endpoint("deleting session")
    @guards.authenticate
    @guards.require_role(STAFF)
    def sessions_delete(session_id: str):
        sessions.delete_session(session_id)
        return jsonify({"message": "Session deleted"})
