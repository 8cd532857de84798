import pytest

from refshelf.core.models import UpdateChoice
from refshelf.core.version import Version


class SyncScheduler:
    """Runs work inline; records how it was submitted."""

    def __init__(self, fire_delayed=True):
        self.fire_delayed = fire_delayed
        self.submitted = []     # delay or None per submission
        self.pending = []

    def submit(self, work, on_success, on_failure):
        self.submitted.append(None)
        self._run(work, on_success, on_failure)

    def submit_after(self, delay, work, on_success, on_failure):
        self.submitted.append(delay)
        if self.fire_delayed:
            self._run(work, on_success, on_failure)
        else:
            self.pending.append((work, on_success, on_failure))

    def fire_pending(self):
        pending, self.pending = self.pending, []
        for args in pending:
            self._run(*args)

    @staticmethod
    def _run(work, on_success, on_failure):
        try:
            result = work()
        except Exception as e:
            on_failure(e)
        else:
            on_success(result)


class RecordingDialogs:
    def __init__(self, choice=UpdateChoice.DISMISS_ONLY):
        self.choice = choice
        self.notifications = []
        self.update_dialogs = []
        self.errors = []

    def notify(self, message):
        self.notifications.append(message)

    def show_update_dialog(self, installed, available):
        self.update_dialogs.append((installed, available))
        return self.choice

    def show_error(self, title, message, cause):
        self.errors.append((title, message, cause))


class MemoryPreferences:
    def __init__(self, enabled=True, ignored=None):
        self.version_check_enabled = enabled
        self.ignored = Version.parse(ignored) if ignored else None
        self.reads = 0
        self.writes = []

    def get_ignored_version(self):
        self.reads += 1
        return self.ignored

    def set_ignored_version(self, version):
        self.writes.append(version)
        self.ignored = version


class StaticFetcher:
    def __init__(self, *versions, error=None):
        self.versions = [Version.parse(v) for v in versions]
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.versions)


@pytest.fixture
def scheduler():
    return SyncScheduler()


@pytest.fixture
def dialogs():
    return RecordingDialogs()


@pytest.fixture
def preferences():
    return MemoryPreferences()
