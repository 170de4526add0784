from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.lecture_attendance.lecture_attendance.container import build_container
from src.lecture_attendance.lecture_attendance.reporting.summary import defaulters
from src.lecture_attendance.lecture_attendance.roster.model import Roster

DEMO_STUDENTS = {
    "Alice": [(18, 2), (12, 8)],
    "Bob": [(8, 2)],
    "Carol": [(5, 5), (0, 0)],
}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    roster = Roster()
    for name, counts in DEMO_STUDENTS.items():
        roster.add_student(container.roster_service.build_student(name, counts))
    container.roster_service.publish(roster)

    print(f"OK: Seeded {len(roster)} students -> {container.roster_repo.path}")
    for name, subject_number in defaulters(roster):
        print(f"  defaulter: {name} in Subject {subject_number}")


if __name__ == "__main__":
    main()
