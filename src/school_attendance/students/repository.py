from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError

    def find_by_name_and_email(self, *, name: str, email: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, class_id: int) -> Optional[int]:
        """Returns None when the email is already taken."""

        raise NotImplementedError

    def update(self, *, student_id: int, name: str, email: str, class_id: int) -> Optional[bool]:
        """False when the student is gone, None when the email is already taken."""

        raise NotImplementedError

    def delete(self, *, student_id: int) -> bool:
        raise NotImplementedError
