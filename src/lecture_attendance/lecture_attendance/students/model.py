from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from ..attendance.model import AttendanceRecord
from ..reporting.summary import profile_summary_lines


@dataclass
class StudentProfile:
    """Domain entity: a student name and the attendance records it owns.

    Note: Names are the lookup key inside a roster but uniqueness is not enforced.
    """

    name: str
    records: list[AttendanceRecord] = field(default_factory=list)

    def add_record(self, record: AttendanceRecord) -> None:
        self.records.append(record)

    def summary(self) -> Iterator[str]:
        return profile_summary_lines(self)
