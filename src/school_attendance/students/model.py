from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in exactly one class."""

    student_id: int
    name: str
    email: str
    class_id: int
    class_name: str

    def to_summary(self) -> dict:
        return {"id": self.student_id, "name": self.name, "email": self.email}

    def to_dict(self) -> dict:
        return {
            **self.to_summary(),
            "classEntity": {"id": self.class_id, "name": self.class_name},
        }
