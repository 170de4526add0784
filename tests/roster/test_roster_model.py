from src.lecture_attendance.lecture_attendance.attendance.model import AttendanceRecord
from src.lecture_attendance.lecture_attendance.roster.model import Roster
from src.lecture_attendance.lecture_attendance.students.model import StudentProfile


def _student(name, *counts):
    student = StudentProfile(name=name)
    for subject_number, (attended, missed) in enumerate(counts, start=1):
        record = AttendanceRecord.create(subject_number)
        record.set_attendance(attended, missed)
        student.add_record(record)
    return student


def test_exists_is_case_sensitive():
    roster = Roster()
    roster.add_student(_student("Bob"))

    assert roster.exists("Bob") is True
    assert roster.exists("bob") is False


def test_find_by_name_returns_none_when_missing():
    assert Roster().find_by_name("Alice") is None

    roster = Roster()
    roster.add_student(_student("Bob"))
    assert roster.find_by_name("Alice") is None


def test_find_by_name_returns_first_match_on_duplicates():
    first = _student("Bob", (1, 1))
    second = _student("Bob", (5, 0))
    roster = Roster()
    roster.add_student(first)
    roster.add_student(second)

    assert roster.find_by_name("Bob") is first
    assert len(roster) == 2


def test_roster_summary_concatenates_profiles_in_order():
    alice = _student("Alice", (9, 1))
    bob = _student("Bob", (1, 9))
    roster = Roster()
    roster.add_student(alice)
    roster.add_student(bob)

    assert list(roster.summary()) == list(alice.summary()) + list(bob.summary())


def test_profile_summary_is_recomputed_each_call():
    student = _student("Alice", (9, 1))
    first = list(student.summary())

    extra = AttendanceRecord.create(2)
    extra.set_attendance(1, 1)
    student.add_record(extra)

    assert len(list(student.summary())) > len(first)
    assert list(student.summary()) == list(student.summary())


def test_clear_empties_roster():
    roster = Roster()
    roster.add_student(_student("Alice"))
    roster.clear()

    assert len(roster) == 0
    assert list(roster) == []
