from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class SchoolClass:
    """Domain entity: a class (group of students)."""

    class_id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.class_id, "name": self.name}


@dataclass(frozen=True)
class ClassMember:
    student_id: int
    name: str
    email: str


@dataclass(frozen=True)
class ClassMeeting:
    session_id: int
    date: date


@dataclass(frozen=True)
class ClassDetail:
    """Read-model: a class with its students and sessions."""

    class_id: int
    name: str
    students: tuple[ClassMember, ...] = field(default_factory=tuple)
    sessions: tuple[ClassMeeting, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.class_id,
            "name": self.name,
            "students": [{"id": s.student_id, "name": s.name, "email": s.email} for s in self.students],
            "sessions": [{"id": s.session_id, "date": format_iso_date(s.date)} for s in self.sessions],
        }
