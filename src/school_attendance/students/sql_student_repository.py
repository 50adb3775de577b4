from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from ..database.orm_base import session_scope
from ..database.tables import StudentRow
from .model import Student
from .repository import StudentRepository


def to_student(row: StudentRow) -> Student:
    return Student(
        student_id=int(row.id),
        name=row.name,
        email=row.email,
        class_id=int(row.class_entity.id),
        class_name=row.class_entity.name,
    )


def _select_students():
    return select(StudentRow).options(joinedload(StudentRow.class_entity))


class SQLStudentRepository(StudentRepository):
    def list_all(self) -> Sequence[Student]:
        with session_scope() as session:
            rows = session.execute(_select_students().order_by(StudentRow.id)).scalars().all()
            return [to_student(r) for r in rows]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with session_scope() as session:
            row = session.execute(_select_students().where(StudentRow.id == int(student_id))).scalar_one_or_none()
            return to_student(row) if row else None

    def get_by_email(self, email: str) -> Optional[Student]:
        with session_scope() as session:
            row = session.execute(_select_students().where(StudentRow.email == email)).scalar_one_or_none()
            return to_student(row) if row else None

    def find_by_name_and_email(self, *, name: str, email: str) -> Optional[Student]:
        with session_scope() as session:
            row = session.execute(
                _select_students().where(StudentRow.name == name, StudentRow.email == email)
            ).scalar_one_or_none()
            return to_student(row) if row else None

    def create(self, *, name: str, email: str, class_id: int) -> Optional[int]:
        try:
            with session_scope() as session:
                row = StudentRow(name=name, email=email, class_id=int(class_id))
                session.add(row)
                session.flush()
                return int(row.id)
        except IntegrityError:
            return None

    def update(self, *, student_id: int, name: str, email: str, class_id: int) -> Optional[bool]:
        try:
            with session_scope() as session:
                row = session.get(StudentRow, int(student_id))
                if not row:
                    return False
                row.name = name
                row.email = email
                row.class_id = int(class_id)
                session.flush()
                return True
        except IntegrityError:
            return None

    def delete(self, *, student_id: int) -> bool:
        # Attendance rows follow the schema's ON DELETE rule
        with session_scope() as session:
            result = session.execute(delete(StudentRow).where(StudentRow.id == int(student_id)))
            return result.rowcount > 0
