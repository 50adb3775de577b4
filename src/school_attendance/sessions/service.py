from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from ..classes.repository import ClassRepository
from ..common.validators import is_blank, parse_id, require_iso_date, require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..security.guards import Identity
from ..subjects.repository import SubjectRepository
from ..users.repository import UserRepository
from .model import ClassSession
from .repository import SessionRepository


@dataclass(frozen=True)
class _ResolvedSession:
    session_date: date
    class_id: int
    subject_id: int
    teacher_id: Optional[int]


class SessionService:
    def __init__(
        self,
        sessions: SessionRepository,
        classes: ClassRepository,
        subjects: SubjectRepository,
        users: UserRepository,
    ):
        self._sessions = sessions
        self._classes = classes
        self._subjects = subjects
        self._users = users

    def list_sessions(self) -> Sequence[ClassSession]:
        return self._sessions.list_all()

    def get_session(self, raw_id: Any) -> ClassSession:
        session = self._sessions.get_by_id(parse_id(raw_id))
        if not session:
            raise NotFoundError("Session not found")
        return session

    def create_session(
        self,
        *,
        requester: Identity,
        date: Any,
        class_name: Any,
        subject_name: Any,
        teacher_name: Any = None,
    ) -> ClassSession:
        fields = self._validate(date, class_name, subject_name)
        resolved = self._resolve(requester, *fields, teacher_name)

        session_id = self._sessions.create(
            session_date=resolved.session_date,
            class_id=resolved.class_id,
            subject_id=resolved.subject_id,
            teacher_id=resolved.teacher_id,
        )
        return self.get_session(session_id)

    def update_session(
        self,
        raw_id: Any,
        *,
        requester: Identity,
        date: Any,
        class_name: Any,
        subject_name: Any,
        teacher_name: Any = None,
    ) -> ClassSession:
        session_id = parse_id(raw_id)
        fields = self._validate(date, class_name, subject_name)

        if not self._sessions.get_by_id(session_id):
            raise NotFoundError("Session not found")

        resolved = self._resolve(requester, *fields, teacher_name)
        self._sessions.update(
            session_id=session_id,
            session_date=resolved.session_date,
            class_id=resolved.class_id,
            subject_id=resolved.subject_id,
            teacher_id=resolved.teacher_id,
        )
        return self.get_session(session_id)

    def delete_session(self, raw_id: Any) -> None:
        if not self._sessions.delete(session_id=parse_id(raw_id)):
            raise NotFoundError("Session not found")

    @staticmethod
    def _validate(date_value: Any, class_name: Any, subject_name: Any) -> tuple[date, str, str]:
        session_date = require_iso_date(date_value)
        class_name = require_non_empty(class_name, "className is required")
        subject_name = require_non_empty(subject_name, "subjectName is required")
        return session_date, class_name, subject_name

    def _resolve(
        self,
        requester: Identity,
        session_date: date,
        class_name: str,
        subject_name: str,
        teacher_name: Any,
    ) -> _ResolvedSession:
        school_class = self._classes.get_by_name(class_name)
        if not school_class:
            raise ValidationError("Invalid className")

        subject = self._subjects.get_by_name(subject_name)
        if not subject:
            raise ValidationError("Invalid subjectName")

        # explicit teacherName > requesting teacher > unassigned
        teacher_id: Optional[int] = None
        if not is_blank(teacher_name):
            teacher = self._users.get_by_name(teacher_name.strip())
            if not teacher:
                raise ValidationError("Invalid teacherName")
            teacher_id = teacher.user_id
        elif requester.role == Role.TEACHER:
            teacher_id = requester.user_id

        return _ResolvedSession(
            session_date=session_date,
            class_id=school_class.class_id,
            subject_id=subject.subject_id,
            teacher_id=teacher_id,
        )
