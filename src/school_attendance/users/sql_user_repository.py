from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from ..core.enums import Role
from ..database.orm_base import session_scope
from ..database.tables import UserRow
from .model import User
from .repository import UserRepository


def to_user(row: UserRow) -> User:
    return User(
        user_id=int(row.id),
        name=row.name,
        email=row.email,
        password_hash=row.password,
        role=Role(row.role),
    )


class SQLUserRepository(UserRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        with session_scope() as session:
            row = session.get(UserRow, int(user_id))
            return to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with session_scope() as session:
            row = session.execute(select(UserRow).where(UserRow.email == email)).scalar_one_or_none()
            return to_user(row) if row else None

    def get_by_name(self, name: str) -> Optional[User]:
        with session_scope() as session:
            row = session.execute(
                select(UserRow).where(UserRow.name == name).order_by(UserRow.id).limit(1)
            ).scalar_one_or_none()
            return to_user(row) if row else None

    def count(self) -> int:
        with session_scope() as session:
            return int(session.execute(select(func.count(UserRow.id))).scalar_one())

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> Optional[int]:
        try:
            with session_scope() as session:
                row = UserRow(name=name, email=email, password=password_hash, role=role.value)
                session.add(row)
                session.flush()
                return int(row.id)
        except IntegrityError:
            return None
