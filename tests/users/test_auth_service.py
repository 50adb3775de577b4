from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from school_attendance.core.enums import Role
from school_attendance.core.exceptions import AuthenticationError, ConfigurationError, ValidationError
from school_attendance.security.tokens import TokenService
from school_attendance.users.model import User
from school_attendance.users.service import AuthService


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def get_by_name(self, name: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.name == name), None)

    def count(self) -> int:
        return len(self._by_id)

    def create_user(self, *, name, email, password_hash, role) -> Optional[int]:
        if self.get_by_email(email):
            return None
        uid = self._next_id
        self._next_id += 1
        self._by_id[uid] = User(user_id=uid, name=name, email=email, password_hash=password_hash, role=role)
        return uid

    def remove(self, user_id: int) -> None:
        self._by_id.pop(user_id, None)


@pytest.fixture()
def users():
    return InMemoryUsers()


@pytest.fixture()
def auth(users):
    return AuthService(users, TokenService("unit-secret"))


def test_first_user_becomes_admin_regardless_of_requested_role(auth):
    first = auth.register(name="Ann", email="ann@x.io", password="secret1", role="student")
    second = auth.register(name="Bob", email="bob@x.io", password="secret1", role="teacher")
    third = auth.register(name="Cid", email="cid@x.io", password="secret1")

    assert first.role == Role.ADMIN
    assert second.role == Role.TEACHER
    assert third.role == Role.STUDENT


def test_register_stores_hash_not_plain_password(auth, users):
    user = auth.register(name="Ann", email="ann@x.io", password="secret1")
    stored = users.get_by_id(user.user_id)

    assert stored.password_hash != "secret1"
    assert "password" not in user.to_public()


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "", "email": "a@x.io", "password": "secret1"}, "Name, email and password are required"),
        ({"name": "A", "email": None, "password": "secret1"}, "Name, email and password are required"),
        ({"name": "A", "email": "a@x.io", "password": ""}, "Name, email and password are required"),
        ({"name": "A", "email": "not-an-email", "password": "secret1"}, "Invalid email"),
        ({"name": "A", "email": "a@x.io", "password": "12345"}, "Password must be at least 6 characters"),
        ({"name": "A", "email": "a@x.io", "password": "secret1", "role": "principal"}, "Invalid role"),
    ],
)
def test_register_rejects_invalid_input(auth, payload, message):
    with pytest.raises(ValidationError) as exc:
        auth.register(**payload)
    assert str(exc.value) == message


def test_register_rejects_duplicate_email(auth):
    auth.register(name="Ann", email="ann@x.io", password="secret1")
    with pytest.raises(ValidationError, match="Email already in use"):
        auth.register(name="Other", email="ann@x.io", password="secret1")


def test_login_failure_message_is_identical_for_unknown_email_and_wrong_password(auth):
    auth.register(name="Ann", email="ann@x.io", password="secret1")

    with pytest.raises(ValidationError) as unknown:
        auth.login(email="nobody@x.io", password="secret1")
    with pytest.raises(ValidationError) as wrong:
        auth.login(email="ann@x.io", password="wrong-pass")

    assert str(unknown.value) == str(wrong.value) == "Invalid email or password"


def test_login_requires_both_fields(auth):
    with pytest.raises(ValidationError, match="Email and password are required"):
        auth.login(email="ann@x.io", password=None)


def test_login_token_identifies_user_with_role_from_store(auth):
    auth.register(name="Ann", email="ann@x.io", password="secret1")
    result = auth.login(email="ann@x.io", password="secret1")

    identity = auth.identify(f"Bearer {result.token}")

    assert identity.user_id == result.user.user_id
    assert identity.role == Role.ADMIN


@pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc", "Bearer a b", "Bearer not-a-jwt"])
def test_identify_rejects_missing_or_malformed_header(auth, header):
    with pytest.raises(AuthenticationError, match="Unauthorized"):
        auth.identify(header)


def test_identify_rejects_token_of_deleted_user(auth, users):
    auth.register(name="Ann", email="ann@x.io", password="secret1")
    token = auth.login(email="ann@x.io", password="secret1").token
    users.remove(1)

    with pytest.raises(AuthenticationError):
        auth.identify(f"Bearer {token}")


def test_identify_rejects_expired_token(users):
    past = datetime.now(timezone.utc) - timedelta(days=30)
    stale = TokenService("unit-secret", clock=lambda: past)
    auth = AuthService(users, stale)
    auth.register(name="Ann", email="ann@x.io", password="secret1")
    token = auth.login(email="ann@x.io", password="secret1").token

    fresh = AuthService(users, TokenService("unit-secret"))
    with pytest.raises(AuthenticationError):
        fresh.identify(f"Bearer {token}")


def test_identify_rejects_token_signed_with_other_secret(users):
    other = TokenService("other-secret")
    token = other.issue(user_id=1, role="admin")
    auth = AuthService(users, TokenService("unit-secret"))
    auth.register(name="Ann", email="ann@x.io", password="secret1")

    with pytest.raises(AuthenticationError):
        auth.identify(f"Bearer {token}")


def test_missing_secret_is_a_configuration_error(users):
    auth = AuthService(users, TokenService(None))
    auth.register(name="Ann", email="ann@x.io", password="secret1")

    with pytest.raises(ConfigurationError, match="Authentication not configured"):
        auth.login(email="ann@x.io", password="secret1")
    with pytest.raises(ConfigurationError):
        auth.identify("Bearer abc")
