from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.validators import require_non_empty
from ..students.model import StudentProfile
from .model import Roster
from .repository import RosterRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: register students and look them up in persisted storage."""

    def __init__(self, repository: RosterRepository):
        self._repository = repository

    def build_student(self, name: str, counts: Iterable[tuple[int, int]]) -> StudentProfile:
        """Create a profile whose subjects are numbered 1..n in ``counts`` order."""

        student = StudentProfile(name=require_non_empty(name, "student name"))
        for subject_number, (attended, missed) in enumerate(counts, start=1):
            record = AttendanceRecord.create(subject_number)
            record.set_attendance(attended, missed)
            student.add_record(record)
        return student

    def publish(self, roster: Roster) -> None:
        self._repository.save(roster)
        logger.info("Published roster with %d student(s)", len(roster))

    def lookup(self, name: str) -> Optional[StudentProfile]:
        roster = self._repository.load()
        student = roster.find_by_name(name)
        if student is None:
            logger.info("No student named %r in persisted roster", name)
        return student
