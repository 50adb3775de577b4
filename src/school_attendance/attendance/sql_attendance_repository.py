from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from ..core.enums import AttendanceStatus
from ..database.orm_base import session_scope
from ..database.tables import AttendanceRow, SessionRow, StudentRow
from ..sessions.sql_session_repository import to_class_session
from ..students.sql_student_repository import to_student
from .model import AttendanceRecord
from .repository import AttendanceRepository


def to_attendance(row: AttendanceRow) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row.id),
        status=AttendanceStatus(row.status),
        session=to_class_session(row.session),
        student=to_student(row.student),
    )


def _select_attendance():
    session_rel = joinedload(AttendanceRow.session)
    return select(AttendanceRow).options(
        session_rel.joinedload(SessionRow.class_entity),
        session_rel.joinedload(SessionRow.subject),
        session_rel.joinedload(SessionRow.teacher),
        joinedload(AttendanceRow.student).joinedload(StudentRow.class_entity),
    )


class SQLAttendanceRepository(AttendanceRepository):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with session_scope() as session:
            row = session.execute(
                _select_attendance().where(AttendanceRow.id == int(attendance_id))
            ).scalar_one_or_none()
            return to_attendance(row) if row else None

    def get_for_session_and_student(self, *, session_id: int, student_id: int) -> Optional[AttendanceRecord]:
        with session_scope() as session:
            row = session.execute(
                _select_attendance().where(
                    AttendanceRow.session_id == int(session_id),
                    AttendanceRow.student_id == int(student_id),
                )
            ).scalar_one_or_none()
            return to_attendance(row) if row else None

    def create(self, *, session_id: int, student_id: int, status: AttendanceStatus) -> Optional[int]:
        try:
            with session_scope() as session:
                row = AttendanceRow(session_id=int(session_id), student_id=int(student_id), status=status.value)
                session.add(row)
                session.flush()
                return int(row.id)
        except IntegrityError:
            # uq_attendance_session_student
            return None

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        with session_scope() as session:
            row = session.get(AttendanceRow, int(attendance_id))
            if not row:
                return False
            row.status = status.value
            return True

    def list_by_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        return self._list(AttendanceRow.session_id == int(session_id))

    def list_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._list(AttendanceRow.student_id == int(student_id))

    def list_by_class(self, class_id: int) -> Sequence[AttendanceRecord]:
        subquery = select(SessionRow.id).where(SessionRow.class_id == int(class_id))
        return self._list(AttendanceRow.session_id.in_(subquery))

    def _list(self, criterion) -> Sequence[AttendanceRecord]:
        with session_scope() as session:
            rows = session.execute(_select_attendance().where(criterion).order_by(AttendanceRow.id)).scalars().all()
            return [to_attendance(r) for r in rows]
