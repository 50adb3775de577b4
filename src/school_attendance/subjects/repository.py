from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Subject]:
        raise NotImplementedError

    def create(self, *, name: str) -> Optional[int]:
        """Returns None when the name is already taken."""

        raise NotImplementedError

    def update(self, *, subject_id: int, name: str) -> Optional[bool]:
        """False when the subject is gone, None when the name is already taken."""

        raise NotImplementedError

    def delete(self, *, subject_id: int) -> bool:
        raise NotImplementedError
