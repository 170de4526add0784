from __future__ import annotations

import pytest

from src.lecture_attendance.lecture_attendance.core.exceptions import InvalidInputError
from src.lecture_attendance.lecture_attendance.roster.model import Roster
from src.lecture_attendance.lecture_attendance.roster.service import RosterService


class InMemoryRosterRepo:
    def __init__(self, roster: Roster | None = None):
        self._stored = roster if roster is not None else Roster()
        self.saved: list[Roster] = []

    def save(self, roster: Roster) -> None:
        self.saved.append(roster)
        self._stored = roster

    def load(self) -> Roster:
        return Roster(students=list(self._stored.students))


class FailingRosterRepo:
    def save(self, roster: Roster) -> None:
        raise PermissionError("read-only")

    def load(self) -> Roster:
        raise FileNotFoundError("students.txt")


def test_build_student_numbers_subjects_from_one():
    svc = RosterService(InMemoryRosterRepo())

    student = svc.build_student("  Alice ", [(8, 2), (7, 3)])

    assert student.name == "Alice"
    assert [r.subject_number for r in student.records] == [1, 2]
    assert [r.is_below_threshold() for r in student.records] == [False, True]


def test_build_student_rejects_blank_name():
    svc = RosterService(InMemoryRosterRepo())

    with pytest.raises(InvalidInputError):
        svc.build_student("   ", [])


def test_publish_then_lookup():
    repo = InMemoryRosterRepo()
    svc = RosterService(repo)
    roster = Roster()
    roster.add_student(svc.build_student("Bob", [(4, 1)]))

    svc.publish(roster)

    assert repo.saved == [roster]
    assert svc.lookup("Bob").records[0].attended == 4
    assert svc.lookup("bob") is None


def test_io_errors_propagate():
    svc = RosterService(FailingRosterRepo())

    with pytest.raises(OSError):
        svc.publish(Roster())
    with pytest.raises(OSError):
        svc.lookup("Bob")
