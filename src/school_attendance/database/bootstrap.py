from __future__ import annotations

import os

from flask import Flask
from sqlalchemy import inspect, select
from werkzeug.security import generate_password_hash

from ..app_logger import get_logger
from ..core.enums import Role
from .connection import db
from .orm_base import session_scope
from .tables import ClassRow, SubjectRow, UserRow

logger = get_logger(__name__)


def apply_schema(app: Flask) -> None:
    """Create missing tables from the ORM definitions (idempotent)."""
    with app.app_context():
        # tables module must be imported so every model is registered on db.metadata
        from . import tables  # noqa: F401

        db.create_all()


def list_tables(app: Flask) -> list[str]:
    with app.app_context():
        return sorted(inspect(db.engine).get_table_names())


def ensure_demo_data(app: Flask) -> None:
    """Create demo accounts and reference data when they are missing."""

    demo_users = [
        ("Admin Demo", os.getenv("DEMO_ADMIN_EMAIL", "admin@example.com"), os.getenv("DEMO_ADMIN_PASSWORD", "admin123"), Role.ADMIN),
        ("Teacher Demo", os.getenv("DEMO_TEACHER_EMAIL", "teacher@example.com"), os.getenv("DEMO_TEACHER_PASSWORD", "teacher123"), Role.TEACHER),
    ]

    with app.app_context(), session_scope() as session:
        for name, email, password, role in demo_users:
            existing = session.execute(select(UserRow).where(UserRow.email == email)).scalar_one_or_none()
            if existing:
                continue
            session.add(UserRow(name=name, email=email, password=generate_password_hash(password), role=role.value))
            logger.info("Seeded demo user %s (%s)", email, role.value)

        if not session.execute(select(ClassRow).where(ClassRow.name == "Demo Class")).first():
            session.add(ClassRow(name="Demo Class"))
        if not session.execute(select(SubjectRow).where(SubjectRow.name == "Demo Subject")).first():
            session.add(SubjectRow(name="Demo Subject"))
