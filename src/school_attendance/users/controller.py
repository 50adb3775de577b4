from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/auth/register", methods=["POST"], endpoint="auth_register")
    @json_endpoint("registering user")
    def auth_register():
        data = json_body()
        user = auth.register(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            role=data.get("role"),
        )
        return jsonify(user.to_public()), 201

    @app.route("/auth/login", methods=["POST"], endpoint="auth_login")
    @json_endpoint("logging in")
    def auth_login():
        data = json_body()
        result = auth.login(email=data.get("email"), password=data.get("password"))
        return jsonify({"token": result.token, "user": result.user.to_public()})
