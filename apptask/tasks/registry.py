"""Task registry: rebuilds tasks from containers and writes them back.

Loading is total. A missing container, a missing or empty kind tag, an
unknown kind tag and a failing `setup()` all resolve to `NullTask`, so a
corrupt or foreign payload can never break navigation.
"""

from __future__ import annotations

from functools import lru_cache

import structlog

from apptask.models.containers import Bundle, Container, Intent
from apptask.tasks.base import TASK_TYPE_KEY, AppTask
from apptask.tasks.variants import (
    CreateEntryThenCloseTask,
    NullTask,
    SearchUrlTask,
    SelectEntryTask,
)

log = structlog.get_logger(__name__)


class TaskRegistry:
    """Explicit kind tag -> task class mapping."""

    def __init__(self) -> None:
        self._tasks: dict[str, type[AppTask]] = {}

    def register(self, task_cls: type[AppTask]) -> None:
        """Register a task class under its kind tag.

        Raises:
            ValueError: blank kind, kind already bound to another class, or a
                field key that collides with the kind tag key or repeats.
        """
        kind = task_cls.kind
        if not kind or not kind.strip():
            raise ValueError(f"{task_cls.__name__} has a blank kind tag")
        existing = self._tasks.get(kind)
        if existing is not None and existing is not task_cls:
            raise ValueError(f"kind tag {kind!r} already registered for {existing.__name__}")

        keys = [extra.key for extra in task_cls().extras()]
        if TASK_TYPE_KEY in keys:
            raise ValueError(f"{task_cls.__name__} uses reserved key {TASK_TYPE_KEY!r}")
        if len(keys) != len(set(keys)):
            raise ValueError(f"{task_cls.__name__} declares duplicate field keys: {keys}")

        self._tasks[kind] = task_cls
        log.debug("task_registered", kind=kind, fields=keys)

    def unregister(self, kind: str) -> bool:
        """Remove a kind tag. Returns False if it was not registered."""
        if kind in self._tasks:
            del self._tasks[kind]
            log.debug("task_unregistered", kind=kind)
            return True
        return False

    def get(self, kind: str) -> type[AppTask] | None:
        return self._tasks.get(kind)

    def kinds(self) -> list[str]:
        return sorted(self._tasks)

    def load(self, container: Container | None) -> AppTask:
        """Create the task described by `container`, or `NullTask`."""
        if container is None:
            log.debug("task_type_missing", reason="no_container")
            return NullTask()

        kind = container.get_string(TASK_TYPE_KEY)
        if not kind:
            log.debug("task_type_missing", reason="no_kind_tag")
            return NullTask()

        task_cls = self._tasks.get(kind)
        if task_cls is None:
            # Could be a renamed variant orphaning an older payload; keep it visible
            log.warning("unknown_task_type", kind=kind, known=self.kinds())
            return NullTask()

        task = task_cls()
        try:
            task.setup(container)
        except Exception:
            log.warning("task_setup_failed", kind=kind, exc_info=True)
            return NullTask()

        log.debug("task_loaded", kind=kind)
        return task

    def load_from_intent(self, intent: Intent | None) -> AppTask:
        return self.load(intent.extras if intent is not None else None)

    def load_on_create(self, saved_state: Bundle | None, intent: Intent | None) -> AppTask:
        """Resolve the task of a screen that is being created.

        Saved state wins: a recreated screen must resume the flow it was in,
        even though its launching intent is still around.
        """
        if saved_state is not None:
            return self.load(saved_state)
        return self.load_from_intent(intent)

    def store(self, task: AppTask, container: Container) -> None:
        """Write the kind tag, then every task field, into `container`."""
        task.type_extra().write(container)
        for extra in task.extras():
            extra.write(container)
        if task.kind not in self._tasks:
            log.warning("unregistered_task_stored", kind=task.kind)


def create_default_registry() -> TaskRegistry:
    """Create a registry with the shipped task variants."""
    registry = TaskRegistry()
    registry.register(NullTask)
    registry.register(SearchUrlTask)
    registry.register(SelectEntryTask)
    registry.register(CreateEntryThenCloseTask)
    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> TaskRegistry:
    """Return the cached registry used by the module-level helpers."""
    return create_default_registry()


def load(container: Container | None) -> AppTask:
    return get_default_registry().load(container)


def load_from_intent(intent: Intent | None) -> AppTask:
    return get_default_registry().load_from_intent(intent)


def load_on_create(saved_state: Bundle | None, intent: Intent | None) -> AppTask:
    return get_default_registry().load_on_create(saved_state, intent)


def store(task: AppTask, container: Container) -> None:
    get_default_registry().store(task, container)
