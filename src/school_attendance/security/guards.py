from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Iterable

from flask import g, request

from ..app_logger import get_logger
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError

if TYPE_CHECKING:
    from ..users.service import AuthService

logger = get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """Authenticated requester attached to ``flask.g.identity``."""

    user_id: int
    role: Role


def current_identity() -> Identity | None:
    return g.get("identity")


class Guards:
    """Route decorators: ``authenticate`` then ``require_role(...)``.

    Both raise domain errors; ``json_endpoint`` turns them into 401/403.
    """

    def __init__(self, auth_service: "AuthService"):
        self._auth = auth_service

    def authenticate(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization")
            g.identity = self._auth.identify(header)
            return view(*args, **kwargs)

        return wrapper

    def require_role(self, roles: Iterable[Role]):
        allowed = frozenset(roles)

        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                identity = current_identity()
                if identity is None:
                    raise AuthenticationError("Unauthorized")
                if identity.role not in allowed:
                    logger.debug("Role %s refused for %s", identity.role.value, request.path)
                    raise AuthorizationError("Forbidden: insufficient role")
                return view(*args, **kwargs)

            return wrapper

        return decorator
