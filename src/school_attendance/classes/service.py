from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import parse_id, require_non_empty
from ..core.exceptions import NotFoundError
from .model import ClassDetail, SchoolClass
from .repository import ClassRepository


class ClassService:
    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_classes(self) -> Sequence[ClassDetail]:
        return self._classes.list_detailed()

    def get_class(self, raw_id: Any) -> ClassDetail:
        class_id = parse_id(raw_id)
        detail = self._classes.get_detail(class_id)
        if not detail:
            raise NotFoundError("Class not found")
        return detail

    def create_class(self, *, name: Any) -> SchoolClass:
        name = require_non_empty(name, "Name is required")
        class_id = self._classes.create(name=name)
        return SchoolClass(class_id=class_id, name=name)

    def update_class(self, raw_id: Any, *, name: Any) -> SchoolClass:
        class_id = parse_id(raw_id)
        name = require_non_empty(name, "Name is required")
        if not self._classes.update(class_id=class_id, name=name):
            raise NotFoundError("Class not found")
        return SchoolClass(class_id=class_id, name=name)

    def delete_class(self, raw_id: Any) -> None:
        class_id = parse_id(raw_id)
        if not self._classes.delete(class_id=class_id):
            raise NotFoundError("Class not found")
