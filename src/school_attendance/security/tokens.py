from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from jose import JWTError, jwt

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_TOKEN_DAYS, JWT_ALGORITHM
from ..core.exceptions import AuthenticationError, ConfigurationError


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    role: Optional[str]


class TokenService:
    """Issue and verify HS256 bearer tokens carrying ``{userId, role}``."""

    def __init__(
        self,
        secret: Optional[str],
        *,
        expires_days: int = DEFAULT_TOKEN_DAYS,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._secret = secret
        self._ttl = timedelta(days=int(expires_days))
        self._clock = clock

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("Authentication not configured")
        return self._secret

    def issue(self, *, user_id: int, role: str) -> str:
        secret = self._require_secret()
        issued_at = self._clock()
        claims = {
            "userId": int(user_id),
            "role": role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        secret = self._require_secret()
        try:
            payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
        except JWTError as e:
            # signature and expiry errors both land here
            raise AuthenticationError("Unauthorized") from e

        user_id = payload.get("userId")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id <= 0:
            raise AuthenticationError("Unauthorized")
        return TokenClaims(user_id=user_id, role=payload.get("role"))
