"""Example: use the service layer directly (no interactive shell).

The shell is only a thin layer; registration and lookup live in RosterService.
"""

import importlib

from config import get_settings_module

from src.lecture_attendance.lecture_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        data_file=settings.DATA_FILE,
        group_records=getattr(settings, "GROUP_RECORDS_ON_LOAD", False),
    )
    student = container.roster_service.lookup("Alice")
    if student is None:
        print("Alice not found; run scripts/seed_data.py first.")
        return
    for line in student.summary():
        print(line)


if __name__ == "__main__":
    main()
