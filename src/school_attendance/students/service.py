from __future__ import annotations

from typing import Any, Sequence

from ..classes.model import SchoolClass
from ..classes.repository import ClassRepository
from ..common.validators import parse_id, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository


class StudentService:
    def __init__(self, students: StudentRepository, classes: ClassRepository):
        self._students = students
        self._classes = classes

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, raw_id: Any) -> Student:
        student = self._students.get_by_id(parse_id(raw_id))
        if not student:
            raise NotFoundError("Student not found")
        return student

    def create_student(self, *, name: Any, email: Any, class_name: Any) -> Student:
        name = require_non_empty(name, "Name is required")
        email = require_non_empty(email, "Email is required")
        school_class = self._resolve_class(class_name)

        if self._students.get_by_email(email):
            raise ValidationError("Email already in use")

        student_id = self._students.create(name=name, email=email, class_id=school_class.class_id)
        if student_id is None:
            raise ValidationError("Email already in use")
        return Student(
            student_id=student_id,
            name=name,
            email=email,
            class_id=school_class.class_id,
            class_name=school_class.name,
        )

    def update_student(self, raw_id: Any, *, name: Any, email: Any, class_name: Any) -> Student:
        student_id = parse_id(raw_id)
        name = require_non_empty(name, "Name is required")
        email = require_non_empty(email, "Email is required")

        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        school_class = self._resolve_class(class_name)

        other = self._students.get_by_email(email)
        if other and other.student_id != student_id:
            raise ValidationError("Email already in use")

        updated = self._students.update(student_id=student_id, name=name, email=email, class_id=school_class.class_id)
        if updated is None:
            raise ValidationError("Email already in use")
        if not updated:
            raise NotFoundError("Student not found")
        return Student(
            student_id=student_id,
            name=name,
            email=email,
            class_id=school_class.class_id,
            class_name=school_class.name,
        )

    def delete_student(self, raw_id: Any) -> None:
        if not self._students.delete(student_id=parse_id(raw_id)):
            raise NotFoundError("Student not found")

    def _resolve_class(self, class_name: Any) -> SchoolClass:
        class_name = require_non_empty(class_name, "className is required")
        school_class = self._classes.get_by_name(class_name)
        if not school_class:
            raise ValidationError("Invalid className")
        return school_class
