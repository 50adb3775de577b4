from __future__ import annotations

import re
from datetime import date
from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# largest value a BIGINT / SQLite INTEGER column can hold
MAX_ID = 2**63 - 1


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def require_non_empty(value: Any, message: str) -> str:
    if is_blank(value):
        raise ValidationError(message)
    return value.strip()


def require_min_length(value: str, message: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(message)
    return value


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value.strip()))


def require_iso_date(value: Any, message: str = "date is required in YYYY-MM-DD format") -> date:
    """Accept only zero-padded YYYY-MM-DD strings that name a real day."""
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise ValidationError(message)
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(message)


def parse_id(value: Any, message: str = "Invalid id parameter", *, positive: bool = False) -> int:
    try:
        parsed = int(str(value))
    except (TypeError, ValueError):
        raise ValidationError(message)
    if positive and parsed <= 0:
        raise ValidationError(message)
    if abs(parsed) > MAX_ID:
        raise ValidationError(message)
    return parsed
