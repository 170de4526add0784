from __future__ import annotations

from dataclasses import dataclass

from .roster.flat_file_repository import FlatFileRosterRepository
from .roster.service import RosterService


@dataclass(frozen=True)
class Container:
    roster_repo: FlatFileRosterRepository
    roster_service: RosterService


def build_container(*, data_file: str, group_records: bool = False) -> Container:
    roster_repo = FlatFileRosterRepository(data_file, group_records=group_records)
    roster_service = RosterService(roster_repo)

    return Container(
        roster_repo=roster_repo,
        roster_service=roster_service,
    )
