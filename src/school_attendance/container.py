from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.sql_attendance_repository import SQLAttendanceRepository
from .classes.service import ClassService
from .classes.sql_class_repository import SQLClassRepository
from .security.guards import Guards
from .security.tokens import TokenService
from .sessions.service import SessionService
from .sessions.sql_session_repository import SQLSessionRepository
from .stats.service import StatsService
from .stats.sql_stats_repository import SQLStatsRepository
from .students.service import StudentService
from .students.sql_student_repository import SQLStudentRepository
from .subjects.service import SubjectService
from .subjects.sql_subject_repository import SQLSubjectRepository
from .users.service import AuthService
from .users.sql_user_repository import SQLUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: SQLUserRepository
    classes_repo: SQLClassRepository
    subjects_repo: SQLSubjectRepository
    students_repo: SQLStudentRepository
    sessions_repo: SQLSessionRepository
    attendance_repo: SQLAttendanceRepository
    stats_repo: SQLStatsRepository

    token_service: TokenService
    auth_service: AuthService
    guards: Guards
    class_service: ClassService
    subject_service: SubjectService
    student_service: StudentService
    session_service: SessionService
    attendance_service: AttendanceService
    stats_service: StatsService


def build_container(*, jwt_secret: Optional[str], jwt_expires_days: int) -> Container:
    users_repo = SQLUserRepository()
    classes_repo = SQLClassRepository()
    subjects_repo = SQLSubjectRepository()
    students_repo = SQLStudentRepository()
    sessions_repo = SQLSessionRepository()
    attendance_repo = SQLAttendanceRepository()
    stats_repo = SQLStatsRepository()

    token_service = TokenService(jwt_secret, expires_days=jwt_expires_days)
    auth_service = AuthService(users_repo, token_service)

    return Container(
        users_repo=users_repo,
        classes_repo=classes_repo,
        subjects_repo=subjects_repo,
        students_repo=students_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        stats_repo=stats_repo,
        token_service=token_service,
        auth_service=auth_service,
        guards=Guards(auth_service),
        class_service=ClassService(classes_repo),
        subject_service=SubjectService(subjects_repo),
        student_service=StudentService(students_repo, classes_repo),
        session_service=SessionService(sessions_repo, classes_repo, subjects_repo, users_repo),
        attendance_service=AttendanceService(attendance_repo, classes_repo, sessions_repo, students_repo),
        stats_service=StatsService(stats_repo),
    )
