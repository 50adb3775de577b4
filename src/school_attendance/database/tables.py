"""ORM table definitions.

Repositories map these rows into the frozen dataclasses of each feature
module; nothing outside ``sql_*_repository`` modules touches them.
"""

from __future__ import annotations

from .connection import db


class UserRow(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="student")  # admin / teacher / student

    sessions = db.relationship("SessionRow", back_populates="teacher", passive_deletes=True)


class ClassRow(db.Model):
    __tablename__ = "classes"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    students = db.relationship(
        "StudentRow", back_populates="class_entity", passive_deletes=True, order_by="StudentRow.id"
    )
    sessions = db.relationship(
        "SessionRow", back_populates="class_entity", passive_deletes=True, order_by="SessionRow.id"
    )


class SubjectRow(db.Model):
    __tablename__ = "subjects"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)

    sessions = db.relationship("SessionRow", back_populates="subject", passive_deletes=True)


class StudentRow(db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    class_id = db.Column(db.Integer, db.ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)

    class_entity = db.relationship("ClassRow", back_populates="students")
    attendances = db.relationship("AttendanceRow", back_populates="student", passive_deletes=True)


class SessionRow(db.Model):
    __tablename__ = "sessions"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    class_id = db.Column(db.Integer, db.ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    subject_id = db.Column(db.Integer, db.ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False)
    # Null = no teacher assigned yet
    teacher_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    class_entity = db.relationship("ClassRow", back_populates="sessions")
    subject = db.relationship("SubjectRow", back_populates="sessions")
    teacher = db.relationship("UserRow", back_populates="sessions")
    attendances = db.relationship("AttendanceRow", back_populates="session", passive_deletes=True)


class AttendanceRow(db.Model):
    __tablename__ = "attendance"
    __table_args__ = (
        db.UniqueConstraint("session_id", "student_id", name="uq_attendance_session_student"),
    )

    id = db.Column(db.Integer, primary_key=True)
    status = db.Column(db.String(20), nullable=False)  # present / absent / late / excused
    session_id = db.Column(db.Integer, db.ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = db.Column(db.Integer, db.ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)

    session = db.relationship("SessionRow", back_populates="attendances")
    student = db.relationship("StudentRow", back_populates="attendances")
