from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .model import Roster
from .repository import RosterRepository
from .text_format import dump_lines, parse_grouped_lines, parse_split_lines

logger = logging.getLogger(__name__)


class FlatFileRosterRepository(RosterRepository):
    """Roster storage in a newline-delimited text file.

    By default reloading keeps the historical line-per-student reading (see
    ``parse_split_lines``); ``group_records=True`` attaches record lines to the
    name above them instead.

    OSError from opening, reading or writing the file is not caught here.
    """

    def __init__(self, path: Union[str, Path], *, group_records: bool = False):
        self._path = Path(path)
        self._group_records = bool(group_records)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, roster: Roster) -> None:
        with self._path.open("w", newline="\n") as f:
            for line in dump_lines(roster):
                f.write(line + "\n")
        logger.debug("Saved %d student(s) to %s", len(roster), self._path)

    def load(self) -> Roster:
        parse = parse_grouped_lines if self._group_records else parse_split_lines
        with self._path.open("r") as f:
            roster = parse(f)
        logger.debug("Loaded %d student(s) from %s", len(roster), self._path)
        return roster
