"""Shipped task variants."""

from __future__ import annotations

from typing import ClassVar

from apptask.models.containers import Container
from apptask.models.extras import StringExtra
from apptask.screens.launch import launch_share_url_results
from apptask.screens.ports import UnlockScreen
from apptask.tasks.base import AppTask


class NullTask(AppTask):
    """No task currently active (null object)."""

    kind: ClassVar[str] = "NullTask"


class SearchUrlTask(AppTask):
    """User is about to search an entry for a given URL."""

    URL_TO_SEARCH_KEY: ClassVar[str] = "UrlToSearch"

    kind: ClassVar[str] = "SearchUrlTask"
    close_entry_activity_after_create: ClassVar[bool] = True

    url_to_search_for: str | None = None

    def setup(self, container: Container) -> None:
        self.url_to_search_for = container.get_string(self.URL_TO_SEARCH_KEY)

    def extras(self) -> list[StringExtra]:
        return [StringExtra(key=self.URL_TO_SEARCH_KEY, value=self.url_to_search_for)]

    def after_unlock_database(self, screen: UnlockScreen) -> None:
        launch_share_url_results(screen, self)


class SelectEntryTask(AppTask):
    """User is about to select an entry for use in another app."""

    kind: ClassVar[str] = "SelectEntryTask"
    # Selecting the entry finishes the job: close the app
    close_entry_activity_after_create: ClassVar[bool] = True


class CreateEntryThenCloseTask(AppTask):
    """User is about to create a new entry.

    The task might already know some of the contents, e.g. the URL of the page
    the user came from.
    """

    URL_KEY: ClassVar[str] = "CreateEntry_Url"

    kind: ClassVar[str] = "CreateEntryThenCloseTask"
    # The user may still select an entry after creating one, so keep the app open
    close_entry_activity_after_create: ClassVar[bool] = False

    url: str | None = None

    def setup(self, container: Container) -> None:
        self.url = container.get_string(self.URL_KEY)

    def extras(self) -> list[StringExtra]:
        return [StringExtra(key=self.URL_KEY, value=self.url)]
