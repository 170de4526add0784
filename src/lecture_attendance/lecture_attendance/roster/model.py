from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..reporting.summary import roster_summary_lines
from ..students.model import StudentProfile


@dataclass
class Roster:
    """Ordered collection of student profiles; insertion order kept, no dedup."""

    students: list[StudentProfile] = field(default_factory=list)

    def add_student(self, profile: StudentProfile) -> None:
        self.students.append(profile)

    def exists(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def find_by_name(self, name: str) -> Optional[StudentProfile]:
        for student in self.students:
            if student.name == name:
                return student
        return None

    def clear(self) -> None:
        self.students.clear()

    def summary(self) -> Iterator[str]:
        return roster_summary_lines(self)

    def __iter__(self) -> Iterator[StudentProfile]:
        return iter(self.students)

    def __len__(self) -> int:
        return len(self.students)
