from __future__ import annotations

from ..core.exceptions import InvalidInputError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise InvalidInputError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{field_name} must be an integer")
    if value < 0:
        raise InvalidInputError(f"{field_name} must not be negative")
    return value


def parse_count(raw: str, field_name: str) -> int:
    """Parse user/file text into a non-negative integer count."""
    try:
        value = int(raw.strip())
    except (AttributeError, ValueError):
        raise InvalidInputError(f"{field_name} must be a whole number, got {raw!r}") from None
    return require_non_negative(value, field_name)
