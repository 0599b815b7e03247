from __future__ import annotations

import pytest

from apptask.core.settings import get_settings
from apptask.models.containers import Intent


class DummyScreen:
    """Records what a task asked the host to do."""

    def __init__(self) -> None:
        self.started: list[Intent] = []
        self.finished = False

    def start_screen(self, intent: Intent) -> None:
        self.started.append(intent)

    def finish(self) -> None:
        self.finished = True


@pytest.fixture
def screen() -> DummyScreen:
    return DummyScreen()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
