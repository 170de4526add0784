from __future__ import annotations

import sys
from typing import Callable, Iterable

from ..core.enums import Role
from ..core.exceptions import InvalidInputError
from ..common.validators import parse_count
from ..roster.model import Roster
from ..roster.service import RosterService

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _stderr(message: str) -> None:
    print(message, file=sys.stderr)


class AttendanceShell:
    """Interactive session: thin layer, the work happens in RosterService."""

    def __init__(
        self,
        service: RosterService,
        *,
        reader: Reader = input,
        writer: Writer = print,
        error_writer: Writer = _stderr,
    ):
        self._service = service
        self._read = reader
        self._write = writer
        self._error = error_writer
        self._admin_name = ""
        self._session_roster = Roster()

    @property
    def session_roster(self) -> Roster:
        return self._session_roster

    def run(self) -> None:
        self._write("Welcome to Attendance Management System")
        try:
            self._loop()
            if self._admin_name:
                self._write("\nAdmin View:")
                self._write_lines(self._session_roster.summary())
                self._write("\nStudent View:")
                self._student_lookup()
        except EOFError:
            pass
        self._write("Thank you for using the Attendance Management System.")

    def _loop(self) -> None:
        while True:
            role = self._ask_role()
            if role == Role.ADMIN:
                self._admin_entry()
            else:
                self._student_lookup()

            answer = self._read("Do you want to continue? (Enter 'yes' or 'no'): ")
            if answer.strip().lower() != "yes":
                return

    def _ask_role(self) -> Role:
        while True:
            role = Role.parse(self._read("Are you an Admin or a Student? (Enter 'admin' or 'student'): "))
            if role is not None:
                return role
            self._write("Invalid user type. Please enter 'admin' or 'student'.")

    def _ask_count(self, prompt: str, field_name: str) -> int:
        while True:
            try:
                return parse_count(self._read(prompt), field_name)
            except InvalidInputError as e:
                self._write(f"Invalid input: {e}")

    def _ask_name(self, prompt: str) -> str:
        while True:
            name = self._read(prompt).strip()
            if name:
                return name
            self._write("Name must not be empty.")

    def _admin_entry(self) -> None:
        if not self._admin_name:
            self._admin_name = self._ask_name("Enter Admin name: ")

        roster = Roster()
        total_students = self._ask_count("Enter the number of students: ", "number of students")
        for i in range(1, total_students + 1):
            name = self._ask_name(f"Enter student {i}'s name: ")
            total_subjects = self._ask_count(f"Enter total number of subjects for {name}: ", "number of subjects")
            counts = []
            for subject_number in range(1, total_subjects + 1):
                attended = self._ask_count(
                    f"Enter number of lectures attended for Subject {subject_number}: ", "attended"
                )
                missed = self._ask_count(
                    f"Enter number of lectures missed for Subject {subject_number}: ", "missed"
                )
                counts.append((attended, missed))
            roster.add_student(self._service.build_student(name, counts))

        self._session_roster = roster

        self._write("\nAdmin View:")
        self._write_lines(roster.summary())

        try:
            self._service.publish(roster)
        except OSError as e:
            self._error(f"Error writing to file: {e}")

    def _student_lookup(self) -> None:
        name = self._read("Enter Student name: ")
        try:
            student = self._service.lookup(name)
        except OSError as e:
            self._error(f"Error reading from file: {e}")
            student = None

        if student is None:
            self._write("Student name not found. Please enter a valid name.")
            return
        self._write_lines(student.summary())

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._write(line)
