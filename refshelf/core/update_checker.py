"""Version update checker — fetch, decide, notify.

Architecture:
  UpdateChecker — entry points (manual / background), one per application
  UpdateCheck   — state machine for a single invocation, never reused

Pure Python (no Qt dependency). Threading is delegated to a TaskScheduler
whose dispatch hook puts the reporting callbacks on the GUI thread.
"""

import logging

from refshelf.core.catalog import VersionCatalogFetcher
from refshelf.core.decision import decide
from refshelf.core.interfaces import DialogService, VersionPreferences
from refshelf.core.models import CheckInvocation, CheckMode, CheckState, UpdateChoice
from refshelf.core.scheduler import TaskScheduler
from refshelf.core.version import Version

logger = logging.getLogger(__name__)

# Passive check performed once after startup
BACKGROUND_CHECK_DELAY = 30

UP_TO_DATE_MESSAGE = "RefShelf is up-to-date."
CONNECTION_ERROR_TITLE = "Error"
CONNECTION_ERROR_MESSAGE = (
    "Could not connect to the update server.\n"
    "Please try again later and/or check your network connection."
)


class UpdateCheck:
    """One run of the fetch+decide pipeline: IDLE → FETCHING → SUCCEEDED/FAILED → REPORTED."""

    def __init__(self, mode: CheckMode, installed: Version, fetcher: VersionCatalogFetcher,
                 dialogs: DialogService, preferences: VersionPreferences):
        self.invocation = CheckInvocation(mode)
        self._installed = installed
        self._fetcher = fetcher
        self._dialogs = dialogs
        self._preferences = preferences
        self._started = False

    @property
    def state(self) -> CheckState:
        return self.invocation.state

    def start(self, scheduler: TaskScheduler, delay: float | None = None):
        """Hand the pipeline to ``scheduler``, now or after ``delay`` seconds."""
        if self._started:
            raise RuntimeError(f"Update check already started ({self.state.value})")
        self._started = True
        if delay is None:
            scheduler.submit(self._work, self._on_success, self._on_failure)
        else:
            scheduler.submit_after(delay, self._work, self._on_success, self._on_failure)

    # ── Worker side ──────────────────────────────────────────────────

    def _work(self) -> Version | None:
        self.invocation.state = CheckState.FETCHING
        logger.info("Checking for updates (%s)", self.invocation.mode.value)
        catalog = self._fetcher.fetch()
        return decide(self._installed, catalog)

    # ── Reporting side (GUI thread) ──────────────────────────────────

    def _on_success(self, newer: Version | None):
        self.invocation.state = CheckState.SUCCEEDED
        self.invocation.result = newer
        try:
            self._show_update_info(newer)
        finally:
            self.invocation.state = CheckState.REPORTED

    def _on_failure(self, error: Exception):
        self.invocation.state = CheckState.FAILED
        self.invocation.error = error
        try:
            if self.invocation.manual:
                self._dialogs.show_error(CONNECTION_ERROR_TITLE, CONNECTION_ERROR_MESSAGE, error)
            logger.debug("Could not connect to the update server.", exc_info=error)
        finally:
            self.invocation.state = CheckState.REPORTED

    def _show_update_info(self, newer: Version | None):
        manual = self.invocation.manual
        ignored = self._preferences.get_ignored_version()

        # The ignored version only silences automatic checks
        if newer is None or (newer == ignored and not manual):
            logger.info("No update to offer (installed %s, latest %s)", self._installed, newer)
            if manual:
                self._dialogs.notify(UP_TO_DATE_MESSAGE)
            return

        logger.info("Update available: %s -> %s", self._installed, newer)
        choice = self._dialogs.show_update_dialog(self._installed, newer)
        if choice is None:
            choice = UpdateChoice.DISMISS_AND_REMEMBER
        if choice is UpdateChoice.DISMISS_AND_REMEMBER:
            self._preferences.set_ignored_version(newer)
            logger.info("Ignoring version %s from now on", newer)


class UpdateChecker:
    """Entry points for manual and background update checks.

    Both are no-ops while version checking is disabled in the preferences.
    Nothing raised by the fetch or the decision escapes to the caller.
    """

    def __init__(self, installed: Version, fetcher: VersionCatalogFetcher,
                 scheduler: TaskScheduler, dialogs: DialogService,
                 preferences: VersionPreferences):
        self.installed = installed
        self._fetcher = fetcher
        self._scheduler = scheduler
        self._dialogs = dialogs
        self._preferences = preferences

    def check_now(self) -> UpdateCheck | None:
        """User-initiated check; always produces visible feedback."""
        return self._start(CheckMode.MANUAL, None)

    def check_after_delay(self, delay: float = BACKGROUND_CHECK_DELAY) -> UpdateCheck | None:
        """Silent-unless-actionable check, run once ``delay`` seconds from now."""
        return self._start(CheckMode.BACKGROUND, delay)

    def _start(self, mode: CheckMode, delay: float | None) -> UpdateCheck | None:
        if not self._preferences.version_check_enabled:
            logger.debug("Version check disabled, skipping %s check", mode.value)
            return None
        check = UpdateCheck(mode, self.installed, self._fetcher, self._dialogs,
                            self._preferences)
        check.start(self._scheduler, delay)
        return check
