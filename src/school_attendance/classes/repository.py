from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassDetail, SchoolClass


class ClassRepository(Protocol):
    def list_detailed(self) -> Sequence[ClassDetail]:
        raise NotImplementedError

    def get_detail(self, class_id: int) -> Optional[ClassDetail]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[SchoolClass]:
        """Exact-match lookup; the first class by id wins when names repeat."""

        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError

    def update(self, *, class_id: int, name: str) -> bool:
        raise NotImplementedError

    def delete(self, *, class_id: int) -> bool:
        raise NotImplementedError
