"""Per-screen holder of the current task across host recreation."""

from __future__ import annotations

import structlog

from apptask.models.containers import Bundle, Intent
from apptask.screens.ports import EntryEditScreen, UnlockScreen
from apptask.tasks.base import AppTask
from apptask.tasks.registry import TaskRegistry, get_default_registry
from apptask.tasks.variants import NullTask

log = structlog.get_logger(__name__)


class TaskScreenState:
    """Owns the one current task of a screen.

    The host may destroy the screen at any time; only what
    `on_save_instance_state()` wrote into the bundle survives.
    """

    def __init__(self, registry: TaskRegistry | None = None) -> None:
        self._registry = registry or get_default_registry()
        self._task: AppTask = NullTask()

    @property
    def task(self) -> AppTask:
        return self._task

    def on_create(self, saved_state: Bundle | None, intent: Intent | None) -> AppTask:
        self._task = self._registry.load_on_create(saved_state, intent)
        return self._task

    def on_save_instance_state(self, out_state: Bundle) -> None:
        self._registry.store(self._task, out_state)

    def replace(self, task: AppTask) -> None:
        """Supersede the current task with a different intent."""
        log.info("task_replaced", previous=self._task.kind, current=task.kind)
        self._task = task

    def on_unlocked(self, screen: UnlockScreen) -> None:
        self._task.after_unlock_database(screen)

    def on_entry_created(self, screen: EntryEditScreen) -> bool:
        """Run the post-create hook and close the screen if the task asks for it."""
        self._task.after_add_new_entry(screen)
        if self._task.close_entry_activity_after_create:
            log.info("entry_screen_closing", task=self._task.kind)
            screen.finish()
            return True
        return False
