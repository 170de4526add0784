"""Line codec for the flat roster file.

Layout, one block per student::

    <name>
    <subject_number>,<attended>,<missed>
    ---

Names are written unescaped, so a name containing a comma cannot be read back.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.validators import parse_count
from ..core.constants import FIELD_SEPARATOR, RECORD_SEPARATOR
from ..core.exceptions import InvalidInputError
from ..students.model import StudentProfile
from .model import Roster


def dump_lines(roster: Roster) -> Iterator[str]:
    for student in roster:
        yield student.name
        for record in student.records:
            yield FIELD_SEPARATOR.join(
                (str(record.subject_number), str(record.attended), str(record.missed))
            )
        yield RECORD_SEPARATOR


def _build_record(fields: Sequence[str], line_no: int) -> AttendanceRecord:
    try:
        subject_number = parse_count(fields[0], "subject number")
        attended = parse_count(fields[1], "attended")
        missed = parse_count(fields[2], "missed")
        record = AttendanceRecord.create(subject_number)
    except InvalidInputError as e:
        raise InvalidInputError(f"line {line_no}: {e}") from e
    record.set_attendance(attended, missed)
    return record


def parse_split_lines(lines: Iterable[str], *, into: Optional[Roster] = None) -> Roster:
    """Rebuild a roster where every line becomes its own student.

    A record line is never attached to the name line above it: it creates a new
    profile named after the text before its first comma. Three fields are read
    as ``subject,attended,missed``; four as ``name,subject,attended,missed``.
    """

    roster = into if into is not None else Roster()
    roster.clear()

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line == RECORD_SEPARATOR or not line.strip():
            continue

        if FIELD_SEPARATOR not in line:
            roster.add_student(StudentProfile(name=line))
            continue

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) == 3:
            record = _build_record(fields, line_no)
        elif len(fields) == 4:
            record = _build_record(fields[1:], line_no)
        else:
            raise InvalidInputError(f"line {line_no}: expected 3 or 4 fields, got {len(fields)}")

        student = StudentProfile(name=fields[0])
        student.add_record(record)
        roster.add_student(student)

    return roster


def parse_grouped_lines(lines: Iterable[str], *, into: Optional[Roster] = None) -> Roster:
    """Rebuild a roster with record lines attached to the preceding name line."""

    roster = into if into is not None else Roster()
    roster.clear()
    current: Optional[StudentProfile] = None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        if line == RECORD_SEPARATOR:
            current = None
            continue

        if FIELD_SEPARATOR not in line:
            current = StudentProfile(name=line)
            roster.add_student(current)
            continue

        if current is None:
            raise InvalidInputError(f"line {line_no}: record line without a student name")

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != 3:
            raise InvalidInputError(f"line {line_no}: expected 3 fields, got {len(fields)}")
        current.add_record(_build_record(fields, line_no))

    return roster
