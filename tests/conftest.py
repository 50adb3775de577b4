from __future__ import annotations

import pytest

from school_attendance.main import create_app


@pytest.fixture()
def app():
    return create_app("school_attendance.config.testing")


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def register(client):
    def _register(name, email, password="secret123", role=None):
        body = {"name": name, "email": email, "password": password}
        if role:
            body["role"] = role
        return client.post("/auth/register", json=body)

    return _register


@pytest.fixture()
def bearer(client, register):
    """Register a user and return ``Authorization`` headers for it."""

    def _bearer(name, email, role=None, password="secret123"):
        register(name, email, password=password, role=role)
        res = client.post("/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.get_json()
        return {"Authorization": f"Bearer {res.get_json()['token']}"}

    return _bearer


@pytest.fixture()
def admin_headers(bearer):
    # first registered user is promoted to admin
    return bearer("Admin", "admin@school.io")
