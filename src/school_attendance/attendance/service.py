from __future__ import annotations

from typing import Any, Sequence

from ..app_logger import get_logger
from ..classes.repository import ClassRepository
from ..common.validators import is_email, parse_id, require_iso_date, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = get_logger(__name__)

ALREADY_RECORDED = "Attendance already recorded for this student and session"
STATUS_MESSAGE = "status must be one of: " + ", ".join(AttendanceStatus.values())


def parse_status(value: Any) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(STATUS_MESSAGE)


class AttendanceService:
    """Records attendance by class name, date and student identity."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        classes: ClassRepository,
        sessions: SessionRepository,
        students: StudentRepository,
    ):
        self._attendance = attendance
        self._classes = classes
        self._sessions = sessions
        self._students = students

    def record(
        self,
        *,
        class_name: Any,
        date: Any,
        student_name: Any,
        student_email: Any,
        status: Any,
    ) -> AttendanceRecord:
        class_name = require_non_empty(class_name, "className is required")
        session_date = require_iso_date(date)
        student_name = require_non_empty(student_name, "studentName is required")
        student_email = require_non_empty(student_email, "studentEmail is required")
        if not is_email(student_email):
            raise ValidationError("studentEmail must be a valid email")
        parsed_status = parse_status(status)

        school_class = self._classes.get_by_name(class_name)
        if not school_class:
            raise NotFoundError("Class not found")

        session = self._sessions.find_for_class_and_date(class_id=school_class.class_id, session_date=session_date)
        if not session:
            raise NotFoundError("Session not found for the given class and date")

        student = self._students.find_by_name_and_email(name=student_name, email=student_email)
        if not student:
            raise NotFoundError("Student not found with provided name and email")

        if self._attendance.get_for_session_and_student(session_id=session.session_id, student_id=student.student_id):
            raise ConflictError(ALREADY_RECORDED)

        attendance_id = self._attendance.create(
            session_id=session.session_id,
            student_id=student.student_id,
            status=parsed_status,
        )
        if attendance_id is None:
            raise ConflictError(ALREADY_RECORDED)

        logger.info(
            "Attendance %s recorded: session=%s student=%s status=%s",
            attendance_id,
            session.session_id,
            student.student_id,
            parsed_status.value,
        )
        return self._load(attendance_id)

    def update_status(self, raw_id: Any, *, status: Any) -> AttendanceRecord:
        attendance_id = parse_id(raw_id, "Invalid attendance id", positive=True)
        parsed_status = parse_status(status)

        if not self._attendance.update_status(attendance_id=attendance_id, status=parsed_status):
            raise NotFoundError("Attendance record not found")

        logger.info("Attendance %s updated to %s", attendance_id, parsed_status.value)
        return self._load(attendance_id)

    def for_session(self, raw_id: Any) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_session(parse_id(raw_id, "Invalid session id", positive=True))

    def for_student(self, raw_id: Any) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_student(parse_id(raw_id, "Invalid student id", positive=True))

    def for_class(self, raw_id: Any) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_class(parse_id(raw_id, "Invalid class id", positive=True))

    def _load(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record
