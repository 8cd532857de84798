"""Collaborator contracts for the update checker and the About window.

Core code depends on these protocols only; Qt implementations live in
``refshelf.ui.services``.
"""

from typing import Protocol, runtime_checkable

from refshelf.core.models import UpdateChoice
from refshelf.core.version import Version


@runtime_checkable
class DialogService(Protocol):
    """User-facing notification surface. Called on the GUI thread only."""

    def notify(self, message: str) -> None:
        """Show a transient status message."""
        ...

    def show_update_dialog(self, installed: Version,
                           available: Version) -> UpdateChoice | None:
        """Offer ``available``. None means closed without an explicit choice."""
        ...

    def show_error(self, title: str, message: str, cause: BaseException | None) -> None:
        ...


@runtime_checkable
class Browser(Protocol):

    def open(self, url: str) -> None:
        """Open ``url`` in the system browser; raises OSError on failure."""
        ...


@runtime_checkable
class Clipboard(Protocol):

    def set_text(self, text: str) -> None:
        ...


@runtime_checkable
class VersionPreferences(Protocol):
    """Persisted update-check preferences (see AppSettings)."""

    version_check_enabled: bool

    def get_ignored_version(self) -> Version | None:
        ...

    def set_ignored_version(self, version: Version) -> None:
        ...
