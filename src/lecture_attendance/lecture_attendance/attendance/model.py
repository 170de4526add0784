from __future__ import annotations

import math
from dataclasses import dataclass

from ..common.validators import require_non_negative
from ..core.constants import DEFAULTER_THRESHOLD
from ..core.exceptions import InvalidInputError


@dataclass
class AttendanceRecord:
    """Domain entity: attended/missed lecture counts for one subject."""

    subject_number: int
    attended: int = 0
    missed: int = 0

    @classmethod
    def create(cls, subject_number: int) -> AttendanceRecord:
        if isinstance(subject_number, bool) or not isinstance(subject_number, int) or subject_number < 1:
            raise InvalidInputError(f"subject number must be a positive integer, got {subject_number!r}")
        return cls(subject_number=subject_number)

    def set_attendance(self, attended: int, missed: int) -> None:
        attended = require_non_negative(attended, "attended")
        missed = require_non_negative(missed, "missed")
        self.attended, self.missed = attended, missed

    @property
    def total_lectures(self) -> int:
        return self.attended + self.missed

    def percentage(self) -> float:
        """Attended share in percent; NaN when no lectures were recorded."""
        total = self.total_lectures
        if total == 0:
            return math.nan
        return 100 * self.attended / total

    def is_below_threshold(self) -> bool:
        # NaN < threshold is False, so an empty record is never a defaulter.
        return self.percentage() < DEFAULTER_THRESHOLD
