from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..app_logger import get_logger
from ..common.validators import is_blank, is_email, require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..security.guards import Identity
from ..security.tokens import TokenService
from .model import User
from .repository import UserRepository

logger = get_logger(__name__)

DEFAULT_ROLE = Role.STUDENT
INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class AuthService:
    """Use cases: register, login, and resolve a bearer token to an identity."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def register(self, *, name: Any, email: Any, password: Any, role: Any = None) -> User:
        if is_blank(name) or is_blank(email) or not isinstance(password, str) or not password:
            raise ValidationError("Name, email and password are required")
        if not is_email(email):
            raise ValidationError("Invalid email")
        require_min_length(password, f"Password must be at least {MIN_PASSWORD_LENGTH} characters", MIN_PASSWORD_LENGTH)

        requested = self._parse_role(role)
        name = name.strip()
        email = email.strip()

        if self._users.get_by_email(email):
            raise ValidationError("Email already in use")

        # Not atomic: two concurrent first registrations may both become admin.
        assigned = Role.ADMIN if self._users.count() == 0 else requested

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=assigned,
        )
        if user_id is None:
            raise ValidationError("Email already in use")

        logger.info("Registered user %s with role %s", user_id, assigned.value)
        return User(user_id=user_id, name=name, email=email, password_hash="", role=assigned)

    def login(self, *, email: Any, password: Any) -> LoginResult:
        if is_blank(email) or not isinstance(password, str) or not password:
            raise ValidationError("Email and password are required")

        user = self._users.get_by_email(email.strip())
        if not user:
            raise ValidationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False
        if not ok:
            raise ValidationError(INVALID_CREDENTIALS)

        token = self._tokens.issue(user_id=user.user_id, role=user.role.value)
        return LoginResult(token=token, user=user)

    def identify(self, authorization: Optional[str]) -> Identity:
        """Resolve an ``Authorization`` header into the requester's identity."""
        if not authorization:
            raise AuthenticationError("Unauthorized")

        parts = authorization.split(" ")
        if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
            raise AuthenticationError("Unauthorized")

        claims = self._tokens.verify(parts[1])
        user = self._users.get_by_id(claims.user_id)
        if not user:
            logger.debug("Token for missing user %s rejected", claims.user_id)
            raise AuthenticationError("Unauthorized")

        return Identity(user_id=user.user_id, role=user.role)

    @staticmethod
    def _parse_role(role: Any) -> Role:
        if role is None or (isinstance(role, str) and not role.strip()):
            return DEFAULT_ROLE
        try:
            return Role(str(role).strip().lower())
        except ValueError:
            raise ValidationError("Invalid role")
