from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value, field_name: str):
    """Reject missing or empty input (None, "", 0, false).

    The value is returned untouched, neither stripped nor converted: roll
    numbers are compared with sheet cells by exact equality, so a JSON number
    never matches a text cell.
    """
    if not value:
        raise ValidationError(f"Missing required field: {field_name}")
    return value


def is_valid_email(value: str) -> bool:
    return bool(value) and _EMAIL_RE.match(value) is not None
