"""Text rendering of attendance summaries.

Pure functions only: they build lines and leave printing to the caller.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from ..attendance.model import AttendanceRecord
    from ..roster.model import Roster
    from ..students.model import StudentProfile

DEFAULTER_NOTICE = "This student is a defaulter in this subject."


def format_percentage(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return repr(float(value))


def record_summary_lines(name: str, record: AttendanceRecord) -> Iterator[str]:
    yield f"Attendance Summary for {name} in Subject {record.subject_number}:"
    yield f"Total Lectures Attended: {record.attended}"
    yield f"Total Lectures Missed: {record.missed}"
    yield f"Attendance Percentage: {format_percentage(record.percentage())}%"
    if record.is_below_threshold():
        yield DEFAULTER_NOTICE


def profile_summary_lines(profile: StudentProfile) -> Iterator[str]:
    for record in profile.records:
        yield from record_summary_lines(profile.name, record)


def roster_summary_lines(roster: Roster) -> Iterator[str]:
    for profile in roster:
        yield from profile_summary_lines(profile)


def defaulters(roster: Roster) -> list[tuple[str, int]]:
    """(name, subject_number) pairs strictly below the threshold, in roster order."""
    return [
        (profile.name, record.subject_number)
        for profile in roster
        for record in profile.records
        if record.is_below_threshold()
    ]
