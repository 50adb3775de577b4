from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    classes = container.class_service

    @app.route("/classes", methods=["GET"], endpoint="classes_list")
    @json_endpoint("listing classes")
    def classes_list():
        return jsonify({"data": [c.to_dict() for c in classes.list_classes()]})

    @app.route("/classes/<class_id>", methods=["GET"], endpoint="classes_get")
    @json_endpoint("fetching class")
    def classes_get(class_id: str):
        return jsonify({"data": classes.get_class(class_id).to_dict()})

    @app.route("/classes", methods=["POST"], endpoint="classes_create")
    @json_endpoint("creating class")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def classes_create():
        created = classes.create_class(name=json_body().get("name"))
        return jsonify({"data": created.to_dict()}), 201

    @app.route("/classes/<class_id>", methods=["PUT"], endpoint="classes_update")
    @json_endpoint("updating class")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def classes_update(class_id: str):
        updated = classes.update_class(class_id, name=json_body().get("name"))
        return jsonify({"data": updated.to_dict()})

    @app.route("/classes/<class_id>", methods=["DELETE"], endpoint="classes_delete")
    @json_endpoint("deleting class")
    @guards.authenticate
    @guards.require_role([Role.ADMIN])
    def classes_delete(class_id: str):
        classes.delete_class(class_id)
        return jsonify({"message": "Class deleted"})
