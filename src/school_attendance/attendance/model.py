from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus
from ..sessions.model import ClassSession
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the status of one student in one session."""

    attendance_id: int
    status: AttendanceStatus
    session: ClassSession
    student: Student

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "status": self.status.value,
            "session": self.session.to_dict(),
            "student": self.student.to_summary(),
        }
