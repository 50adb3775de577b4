from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from ..database.orm_base import session_scope
from ..database.tables import ClassRow
from .model import ClassDetail, ClassMeeting, ClassMember, SchoolClass
from .repository import ClassRepository

# Students and sessions are always fetched together for the detail view.
_DETAIL_OPTIONS = (selectinload(ClassRow.students), selectinload(ClassRow.sessions))


def _to_detail(row: ClassRow) -> ClassDetail:
    return ClassDetail(
        class_id=int(row.id),
        name=row.name,
        students=tuple(ClassMember(student_id=int(s.id), name=s.name, email=s.email) for s in row.students),
        sessions=tuple(ClassMeeting(session_id=int(s.id), date=s.date) for s in row.sessions),
    )


class SQLClassRepository(ClassRepository):
    def list_detailed(self) -> Sequence[ClassDetail]:
        with session_scope() as session:
            rows = session.execute(select(ClassRow).options(*_DETAIL_OPTIONS).order_by(ClassRow.id)).scalars().all()
            return [_to_detail(r) for r in rows]

    def get_detail(self, class_id: int) -> Optional[ClassDetail]:
        with session_scope() as session:
            row = session.execute(
                select(ClassRow).options(*_DETAIL_OPTIONS).where(ClassRow.id == int(class_id))
            ).scalar_one_or_none()
            return _to_detail(row) if row else None

    def get_by_name(self, name: str) -> Optional[SchoolClass]:
        with session_scope() as session:
            row = session.execute(
                select(ClassRow).where(ClassRow.name == name).order_by(ClassRow.id).limit(1)
            ).scalar_one_or_none()
            return SchoolClass(class_id=int(row.id), name=row.name) if row else None

    def create(self, *, name: str) -> int:
        with session_scope() as session:
            row = ClassRow(name=name)
            session.add(row)
            session.flush()
            return int(row.id)

    def update(self, *, class_id: int, name: str) -> bool:
        with session_scope() as session:
            row = session.get(ClassRow, int(class_id))
            if not row:
                return False
            row.name = name
            return True

    def delete(self, *, class_id: int) -> bool:
        # Dependent students/sessions follow the schema's ON DELETE rules
        with session_scope() as session:
            result = session.execute(delete(ClassRow).where(ClassRow.id == int(class_id)))
            return result.rowcount > 0
