from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from ..database.orm_base import session_scope
from ..database.tables import SubjectRow
from .model import Subject
from .repository import SubjectRepository


def _to_subject(row: SubjectRow) -> Subject:
    return Subject(subject_id=int(row.id), name=row.name)


class SQLSubjectRepository(SubjectRepository):
    def list_all(self) -> Sequence[Subject]:
        with session_scope() as session:
            rows = session.execute(select(SubjectRow).order_by(SubjectRow.id)).scalars().all()
            return [_to_subject(r) for r in rows]

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        with session_scope() as session:
            row = session.get(SubjectRow, int(subject_id))
            return _to_subject(row) if row else None

    def get_by_name(self, name: str) -> Optional[Subject]:
        with session_scope() as session:
            row = session.execute(select(SubjectRow).where(SubjectRow.name == name)).scalar_one_or_none()
            return _to_subject(row) if row else None

    def create(self, *, name: str) -> Optional[int]:
        try:
            with session_scope() as session:
                row = SubjectRow(name=name)
                session.add(row)
                session.flush()
                return int(row.id)
        except IntegrityError:
            return None

    def update(self, *, subject_id: int, name: str) -> Optional[bool]:
        try:
            with session_scope() as session:
                row = session.get(SubjectRow, int(subject_id))
                if not row:
                    return False
                row.name = name
                session.flush()
                return True
        except IntegrityError:
            return None

    def delete(self, *, subject_id: int) -> bool:
        with session_scope() as session:
            result = session.execute(delete(SubjectRow).where(SubjectRow.id == int(subject_id)))
            return result.rowcount > 0
