from refshelf.core.about import AboutInfo, open_website
from refshelf.core.version import Version

from conftest import RecordingDialogs


class FakeClipboard:
    def __init__(self):
        self.text = None

    def set_text(self, text):
        self.text = text


class FakeBrowser:
    def __init__(self, error=None):
        self.error = error
        self.opened = []

    def open(self, url):
        if self.error is not None:
            raise self.error
        self.opened.append(url)


def test_release_info():
    info = AboutInfo.from_version(Version.parse("5.1"), qt_version="6.7.0")
    assert info.heading == "RefShelf 5.1"
    assert not info.is_development_version
    assert info.development_version == ""
    lines = info.version_info.splitlines()
    assert lines[0] == "RefShelf 5.1"
    assert lines[-1] == "Qt 6.7.0"
    assert lines[2].startswith("Python ")


def test_development_info():
    info = AboutInfo.from_version(Version.parse("5.2--2020-12-01--abcdef0"))
    assert info.heading == "RefShelf 5.2"
    assert info.is_development_version
    assert info.development_version == "2020-12-01--abcdef0"


def test_copy_version_to_clipboard():
    info = AboutInfo.from_version(Version.parse("5.1"))
    clipboard, dialogs = FakeClipboard(), RecordingDialogs()
    info.copy_version_to_clipboard(clipboard, dialogs)
    assert clipboard.text == info.version_info
    assert dialogs.notifications == ["Copied version to clipboard"]


def test_open_changelog():
    info = AboutInfo.from_version(Version.parse("5.1"))
    browser, dialogs = FakeBrowser(), RecordingDialogs()
    info.open_changelog(browser, dialogs)
    assert browser.opened == [Version.parse("5.1").changelog_url]
    assert dialogs.errors == []


def test_browser_failure_is_reported():
    error = OSError("no browser")
    dialogs = RecordingDialogs()
    open_website("https://www.refshelf.org", FakeBrowser(error), dialogs)
    assert dialogs.errors == [("Could not open website.", "no browser", error)]
