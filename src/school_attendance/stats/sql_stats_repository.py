from __future__ import annotations

from typing import Mapping

from sqlalchemy import func, select

from ..database.orm_base import session_scope
from ..database.tables import AttendanceRow, SessionRow
from .repository import StatsRepository


class SQLStatsRepository(StatsRepository):
    def count_by_status_for_student(self, student_id: int) -> Mapping[str, int]:
        stmt = (
            select(AttendanceRow.status, func.count(AttendanceRow.id))
            .where(AttendanceRow.student_id == int(student_id))
            .group_by(AttendanceRow.status)
        )
        return self._counts(stmt)

    def count_by_status_for_class(self, class_id: int) -> Mapping[str, int]:
        stmt = (
            select(AttendanceRow.status, func.count(AttendanceRow.id))
            .join(SessionRow, AttendanceRow.session_id == SessionRow.id)
            .where(SessionRow.class_id == int(class_id))
            .group_by(AttendanceRow.status)
        )
        return self._counts(stmt)

    @staticmethod
    def _counts(stmt) -> Mapping[str, int]:
        with session_scope() as session:
            return {status: int(total) for status, total in session.execute(stmt).all()}
