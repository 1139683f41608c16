"""
Ptero-Admin Validation
Small argument checks shared by the endpoint wrappers. All of them raise
ValidationError before anything is sent to the panel.
"""

from typing import Any, Optional
from .errors import ValidationError


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_dict(value: Any) -> bool:
    return isinstance(value, dict)


def is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def require_id(value: Any, message: str) -> int:
    """Accepts an int or a string of digits and returns it as an int."""
    if is_int(value):
        return value
    if isinstance(value, str):
        digits = value.strip()
        # ASCII digits only, int() rejects characters like "²"
        if digits.isascii() and digits.isdigit():
            return int(digits)
    raise ValidationError(message)


def require_type(value: Any, check, message: str) -> Any:
    if not check(value):
        raise ValidationError(message)
    return value


def require_str(value: Any, message: str) -> str:
    """Non-empty string."""
    if not isinstance(value, str) or not value:
        raise ValidationError(message)
    return value


def require_page(value: Optional[Any], name: str) -> Optional[int]:
    if value is None:
        return None
    if not is_int(value) or value < 1:
        raise ValidationError(f"{name} must be a positive integer")
    return value
