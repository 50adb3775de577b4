from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import parse_id, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Subject
from .repository import SubjectRepository


class SubjectService:
    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def list_subjects(self) -> Sequence[Subject]:
        return self._subjects.list_all()

    def get_subject(self, raw_id: Any) -> Subject:
        subject = self._subjects.get_by_id(parse_id(raw_id))
        if not subject:
            raise NotFoundError("Subject not found")
        return subject

    def create_subject(self, *, name: Any) -> Subject:
        name = require_non_empty(name, "Name is required")
        if self._subjects.get_by_name(name):
            raise ValidationError("Subject already exists")

        subject_id = self._subjects.create(name=name)
        if subject_id is None:
            raise ValidationError("Subject already exists")
        return Subject(subject_id=subject_id, name=name)

    def update_subject(self, raw_id: Any, *, name: Any) -> Subject:
        subject_id = parse_id(raw_id)
        name = require_non_empty(name, "Name is required")

        if not self._subjects.get_by_id(subject_id):
            raise NotFoundError("Subject not found")

        other = self._subjects.get_by_name(name)
        if other and other.subject_id != subject_id:
            raise ValidationError("Subject name already in use")

        updated = self._subjects.update(subject_id=subject_id, name=name)
        if updated is None:
            raise ValidationError("Subject name already in use")
        if not updated:
            raise NotFoundError("Subject not found")
        return Subject(subject_id=subject_id, name=name)

    def delete_subject(self, raw_id: Any) -> None:
        if not self._subjects.delete(subject_id=parse_id(raw_id)):
            raise NotFoundError("Subject not found")
