"""About window view model — plain values plus clipboard/browser actions."""

import logging
import platform
from dataclasses import dataclass

from refshelf.branding import AppBranding
from refshelf.core.interfaces import Browser, Clipboard, DialogService
from refshelf.core.version import Version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AboutInfo:
    heading: str
    maintainers: str
    is_development_version: bool
    development_version: str    # build suffix, empty for releases
    changelog_url: str
    version_info: str           # multi-line text copied to the clipboard

    @classmethod
    def from_version(cls, version: Version, maintainers: str = AppBranding.MAINTAINERS,
                     qt_version: str = "unknown") -> 'AboutInfo':
        version_info = (
            f"{AppBranding.APP_NAME} {version}\n"
            f"{platform.system()} {platform.release()} {platform.machine()}\n"
            f"Python {platform.python_version()}\n"
            f"Qt {qt_version}"
        )
        return cls(
            heading=f"{AppBranding.APP_NAME} {version.base}",
            maintainers=maintainers,
            is_development_version=not version.is_stable,
            development_version=version.suffix,
            changelog_url=version.changelog_url,
            version_info=version_info,
        )

    def copy_version_to_clipboard(self, clipboard: Clipboard, dialogs: DialogService):
        clipboard.set_text(self.version_info)
        dialogs.notify("Copied version to clipboard")

    def open_changelog(self, browser: Browser, dialogs: DialogService):
        open_website(self.changelog_url, browser, dialogs)


def open_website(url: str, browser: Browser, dialogs: DialogService):
    """Open ``url``; a browser failure is shown to the user, not raised."""
    try:
        browser.open(url)
    except OSError as e:
        logger.error("Could not open default browser for %s: %s", url, e)
        dialogs.show_error("Could not open website.", str(e), e)
