from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AbsenceStats:
    """Read-model: absent and late counts for one class or student."""

    scope_key: str  # "classId" / "studentId"
    scope_id: int
    absences: int
    late: int

    def to_dict(self) -> dict:
        return {"id": self.scope_id, self.scope_key: self.scope_id, "absences": self.absences, "late": self.late}

    def to_rows(self) -> list[dict]:
        return [
            {"metric": "absent", "count": self.absences},
            {"metric": "late", "count": self.late},
        ]
