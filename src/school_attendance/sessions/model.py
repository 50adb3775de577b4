from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import Role


@dataclass(frozen=True)
class TeacherRef:
    user_id: int
    name: str
    email: str
    role: Role

    def to_dict(self) -> dict:
        return {"id": self.user_id, "name": self.name, "email": self.email, "role": self.role.value}


@dataclass(frozen=True)
class ClassSession:
    """Domain entity: one meeting of a class in a subject on a date."""

    session_id: int
    date: date
    class_id: int
    class_name: str
    subject_id: int
    subject_name: str
    teacher: Optional[TeacherRef] = None

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "date": format_iso_date(self.date),
            "classEntity": {"id": self.class_id, "name": self.class_name},
            "subject": {"id": self.subject_id, "name": self.subject_name},
            "teacher": self.teacher.to_dict() if self.teacher else None,
        }
