from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import joinedload

from ..core.enums import Role
from ..database.orm_base import session_scope
from ..database.tables import SessionRow
from .model import ClassSession, TeacherRef
from .repository import SessionRepository

# class, subject and teacher are part of every session payload
SESSION_OPTIONS = (
    joinedload(SessionRow.class_entity),
    joinedload(SessionRow.subject),
    joinedload(SessionRow.teacher),
)


def to_class_session(row: SessionRow) -> ClassSession:
    teacher = None
    if row.teacher is not None:
        teacher = TeacherRef(
            user_id=int(row.teacher.id),
            name=row.teacher.name,
            email=row.teacher.email,
            role=Role(row.teacher.role),
        )
    return ClassSession(
        session_id=int(row.id),
        date=row.date,
        class_id=int(row.class_entity.id),
        class_name=row.class_entity.name,
        subject_id=int(row.subject.id),
        subject_name=row.subject.name,
        teacher=teacher,
    )


class SQLSessionRepository(SessionRepository):
    def list_all(self) -> Sequence[ClassSession]:
        with session_scope() as session:
            rows = session.execute(select(SessionRow).options(*SESSION_OPTIONS).order_by(SessionRow.id)).scalars().all()
            return [to_class_session(r) for r in rows]

    def get_by_id(self, session_id: int) -> Optional[ClassSession]:
        with session_scope() as session:
            row = session.execute(
                select(SessionRow).options(*SESSION_OPTIONS).where(SessionRow.id == int(session_id))
            ).scalar_one_or_none()
            return to_class_session(row) if row else None

    def find_for_class_and_date(self, *, class_id: int, session_date: date) -> Optional[ClassSession]:
        with session_scope() as session:
            row = (
                session.execute(
                    select(SessionRow)
                    .options(*SESSION_OPTIONS)
                    .where(SessionRow.class_id == int(class_id), SessionRow.date == session_date)
                    .order_by(SessionRow.id)
                    .limit(1)
                )
                .scalars()
                .first()
            )
            return to_class_session(row) if row else None

    def create(self, *, session_date: date, class_id: int, subject_id: int, teacher_id: Optional[int]) -> int:
        with session_scope() as session:
            row = SessionRow(date=session_date, class_id=int(class_id), subject_id=int(subject_id), teacher_id=teacher_id)
            session.add(row)
            session.flush()
            return int(row.id)

    def update(
        self,
        *,
        session_id: int,
        session_date: date,
        class_id: int,
        subject_id: int,
        teacher_id: Optional[int],
    ) -> bool:
        with session_scope() as session:
            row = session.get(SessionRow, int(session_id))
            if not row:
                return False
            row.date = session_date
            row.class_id = int(class_id)
            row.subject_id = int(subject_id)
            row.teacher_id = teacher_id
            return True

    def delete(self, *, session_id: int) -> bool:
        with session_scope() as session:
            result = session.execute(delete(SessionRow).where(SessionRow.id == int(session_id)))
            return result.rowcount > 0
