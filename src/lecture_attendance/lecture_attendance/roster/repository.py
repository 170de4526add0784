from __future__ import annotations

from typing import Protocol

from .model import Roster


class RosterRepository(Protocol):
    def save(self, roster: Roster) -> None:
        raise NotImplementedError

    def load(self) -> Roster:
        """Rebuild a roster from storage; always returns a fresh instance."""

        raise NotImplementedError
