from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import parse_id
from ..core.enums import AttendanceStatus
from .model import AbsenceStats
from .repository import StatsRepository


class StatsService:
    def __init__(self, stats: StatsRepository):
        self._stats = stats

    def for_class(self, raw_id: Any) -> AbsenceStats:
        class_id = parse_id(raw_id, "Invalid class id", positive=True)
        return self._summarize("classId", class_id, self._stats.count_by_status_for_class(class_id))

    def for_student(self, raw_id: Any) -> AbsenceStats:
        student_id = parse_id(raw_id, "Invalid student id", positive=True)
        return self._summarize("studentId", student_id, self._stats.count_by_status_for_student(student_id))

    @staticmethod
    def _summarize(scope_key: str, scope_id: int, counts: Mapping[str, int]) -> AbsenceStats:
        return AbsenceStats(
            scope_key=scope_key,
            scope_id=scope_id,
            absences=counts.get(AttendanceStatus.ABSENT.value, 0),
            late=counts.get(AttendanceStatus.LATE.value, 0),
        )
