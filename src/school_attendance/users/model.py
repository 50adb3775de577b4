from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object; the password hash never leaves the service layer.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role

    def to_public(self) -> dict:
        return {"id": self.user_id, "name": self.name, "email": self.email, "role": self.role.value}
