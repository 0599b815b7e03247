"""Helpers that start a screen and hand the current task over to it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from apptask.models.containers import Intent
from apptask.screens.ports import GROUP_SCREEN, SHARE_URL_RESULTS_SCREEN, ScreenContext

if TYPE_CHECKING:
    from apptask.tasks.base import AppTask

log = structlog.get_logger(__name__)


def launch(screen: ScreenContext, target: str, task: AppTask) -> Intent:
    """Start `target` from `screen` with `task` serialized into the intent."""
    intent = Intent(target)
    task.to_intent(intent)
    screen.start_screen(intent)
    log.info("screen_launched", target=target, task=task.kind)
    return intent


def launch_group_browser(screen: ScreenContext, task: AppTask) -> Intent:
    return launch(screen, GROUP_SCREEN, task)


def launch_share_url_results(screen: ScreenContext, task: AppTask) -> Intent:
    return launch(screen, SHARE_URL_RESULTS_SCREEN, task)
