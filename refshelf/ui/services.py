"""Qt implementations of the dialog, browser and clipboard collaborators."""

import logging
import traceback

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import QApplication, QMainWindow, QMessageBox

from refshelf.core.models import UpdateChoice
from refshelf.core.version import Version
from refshelf.ui.new_version_dialog import NewVersionDialog

logger = logging.getLogger(__name__)

# Status bar messages disappear after this many milliseconds
NOTIFY_TIMEOUT_MS = 5000


class QtBrowser:
    def open(self, url: str):
        if not QDesktopServices.openUrl(QUrl(url)):
            raise OSError(f"No application could open {url}")


class QtClipboard:
    def set_text(self, text: str):
        QApplication.clipboard().setText(text)


class QtDialogService:
    """Dialogs and status messages parented to the main window."""

    def __init__(self, window: QMainWindow, browser: QtBrowser | None = None):
        self._window = window
        self._browser = browser or QtBrowser()

    def notify(self, message: str):
        logger.info("Notify: %s", message)
        self._window.statusBar().showMessage(message, NOTIFY_TIMEOUT_MS)

    def show_update_dialog(self, installed: Version,
                           available: Version) -> UpdateChoice | None:
        dialog = NewVersionDialog(installed, available, self._browser, self, self._window)
        dialog.exec()
        return dialog.choice

    def show_error(self, title: str, message: str, cause: BaseException | None):
        box = QMessageBox(QMessageBox.Icon.Critical, title, message,
                          QMessageBox.StandardButton.Ok, self._window)
        if cause is not None:
            box.setDetailedText(''.join(
                traceback.format_exception(type(cause), cause, cause.__traceback__)
            ))
        box.exec()
