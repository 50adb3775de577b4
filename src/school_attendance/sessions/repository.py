from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ClassSession


class SessionRepository(Protocol):
    def list_all(self) -> Sequence[ClassSession]:
        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[ClassSession]:
        raise NotImplementedError

    def find_for_class_and_date(self, *, class_id: int, session_date: date) -> Optional[ClassSession]:
        """First session (lowest id) of the class on that date.

        Nothing prevents several sessions for the same class and date.
        """

        raise NotImplementedError

    def create(self, *, session_date: date, class_id: int, subject_id: int, teacher_id: Optional[int]) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        session_id: int,
        session_date: date,
        class_id: int,
        subject_id: int,
        teacher_id: Optional[int],
    ) -> bool:
        raise NotImplementedError

    def delete(self, *, session_id: int) -> bool:
        raise NotImplementedError
