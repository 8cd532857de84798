"""Main application window."""

import logging

from PyQt6.QtCore import QT_VERSION_STR
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QLabel, QStatusBar, QApplication

from refshelf.branding import AppBranding
from refshelf.config.settings import AppSettings
from refshelf.core.about import AboutInfo
from refshelf.core.catalog import VersionCatalogFetcher
from refshelf.core.scheduler import TaskScheduler
from refshelf.core.update_checker import UpdateChecker
from refshelf.core.version import Version
from refshelf.ui.about_dialog import AboutDialog
from refshelf.ui.services import QtBrowser, QtClipboard, QtDialogService
from refshelf.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """RefShelf main window."""

    def __init__(self, settings: AppSettings, scheduler: TaskScheduler,
                 installed: Version, fetcher: VersionCatalogFetcher | None = None):
        super().__init__()
        self._settings = settings
        self._installed = installed
        self._browser = QtBrowser()
        self._clipboard = QtClipboard()
        self._dialogs = QtDialogService(self, self._browser)
        self._checker = UpdateChecker(
            installed, fetcher or VersionCatalogFetcher(), scheduler,
            self._dialogs, settings,
        )

        self._setup_ui()

    def _setup_ui(self):
        self.setWindowTitle(AppBranding.window_title())
        self.setMinimumSize(900, 600)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._status_bar.addWidget(QLabel("Ready"), 1)

        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        settings_action = QAction("&Settings...", self)
        settings_action.triggered.connect(self._on_settings)
        file_menu.addAction(settings_action)
        file_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.triggered.connect(QApplication.quit)
        file_menu.addAction(quit_action)

        help_menu = menu_bar.addMenu("&Help")
        check_action = QAction("Check for &updates", self)
        check_action.triggered.connect(self._on_check_updates)
        help_menu.addAction(check_action)
        about_action = QAction(f"&About {AppBranding.APP_NAME}", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    # --- Updates ---

    def start_background_check(self):
        """Passive check, once per application start."""
        self._checker.check_after_delay()

    def _on_check_updates(self):
        if self._checker.check_now() is None:
            self._dialogs.notify("Version check is disabled in the settings.")

    # --- Dialogs ---

    def _on_settings(self):
        dialog = SettingsDialog(self, self._settings)
        if dialog.exec():
            self._settings = dialog.get_settings()
            self._settings.save()

    def _on_about(self):
        info = AboutInfo.from_version(self._installed, qt_version=QT_VERSION_STR)
        AboutDialog(info, self._browser, self._clipboard, self._dialogs, self).exec()
