from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Self-declared role chosen at the start of each shell pass."""

    ADMIN = "admin"
    STUDENT = "student"

    @classmethod
    def parse(cls, value: str) -> Optional["Role"]:
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
