"""Pydantic models for task fields stored as container extras."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from apptask.models.containers import Bundle, Container, Intent


class StringExtra(BaseModel):
    """One named string field of a task."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    value: str | None = None

    def write(self, container: Container) -> None:
        """Store the value under `key`, overwriting whatever was there."""
        container.put_string(self.key, self.value)

    def to_bundle(self, bundle: Bundle) -> None:
        bundle.put_string(self.key, self.value)

    def to_intent(self, intent: Intent) -> None:
        intent.put_extra(self.key, self.value)
