"""Base class for tasks: things the user wants to do that span several screens."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from apptask.models.containers import Bundle, Container, Intent
from apptask.models.extras import StringExtra
from apptask.screens.launch import launch_group_browser
from apptask.screens.ports import EntryEditScreen, UnlockScreen

TASK_TYPE_KEY = "KP2A_APP_TASK_TYPE"


class AppTask(BaseModel):
    """Base interface for all tasks.

    A task never crosses a screen boundary by reference: it is written into a
    bundle or intent with `to_bundle()` / `to_intent()` and rebuilt on the other
    side by the task registry.
    """

    model_config = ConfigDict(extra="forbid")

    # Kind tag, also the registry lookup key; defaults to the class name
    kind: ClassVar[str] = "AppTask"
    # Read by the entry edit screen right after an entry was created or selected
    close_entry_activity_after_create: ClassVar[bool] = False

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        # Subclasses never inherit their parent's tag
        if "kind" not in cls.__dict__:
            cls.kind = cls.__name__

    def setup(self, container: Container) -> None:
        """Load the task parameters from `container`."""

    def extras(self) -> list[StringExtra]:
        """Return the task parameters for storage in a bundle or intent."""
        return []

    def after_unlock_database(self, screen: UnlockScreen) -> None:
        launch_group_browser(screen, self)

    def after_add_new_entry(self, screen: EntryEditScreen) -> None:
        pass

    @classmethod
    def type_extra(cls) -> StringExtra:
        """Extra that describes the task kind; always written before the task fields."""
        return StringExtra(key=TASK_TYPE_KEY, value=cls.kind)

    def to_bundle(self, bundle: Bundle) -> None:
        self._store(bundle)

    def to_intent(self, intent: Intent) -> None:
        self._store(intent)

    def _store(self, container: Container) -> None:
        # Deferred: the registry module imports the task variants
        from apptask.tasks.registry import store

        store(self, container)
