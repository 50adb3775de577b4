from __future__ import annotations

from typing import Mapping, Protocol


class StatsRepository(Protocol):
    """Status counts keyed by status value; missing statuses count as zero."""

    def count_by_status_for_student(self, student_id: int) -> Mapping[str, int]:
        raise NotImplementedError

    def count_by_status_for_class(self, class_id: int) -> Mapping[str, int]:
        raise NotImplementedError
