"""Ports (interfaces) of the screens that consume tasks.

Screens are owned by the host; the task model only needs to start the next
screen and to close the current one.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from apptask.models.containers import Intent

GROUP_SCREEN = "GroupActivity"
SHARE_URL_RESULTS_SCREEN = "ShareUrlResults"


@runtime_checkable
class ScreenContext(Protocol):
    def start_screen(self, intent: Intent) -> None:
        raise NotImplementedError

    def finish(self) -> None:
        raise NotImplementedError


class UnlockScreen(ScreenContext, Protocol):
    """Screen that unlocks the database and then calls `after_unlock_database`."""


class EntryEditScreen(ScreenContext, Protocol):
    """Screen that commits a new entry and then calls `after_add_new_entry`."""
