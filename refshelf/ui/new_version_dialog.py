"""Update-available dialog."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from refshelf.branding import AppBranding
from refshelf.core.about import open_website
from refshelf.core.interfaces import Browser, DialogService
from refshelf.core.models import UpdateChoice
from refshelf.core.version import Version


class NewVersionDialog(QDialog):
    """Offers ``latest`` over ``current``.

    ``choice`` stays None when the dialog is closed without pressing a button.
    """

    def __init__(self, current: Version, latest: Version, browser: Browser,
                 dialogs: DialogService, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New version available")
        self.setMinimumWidth(420)
        self.choice: UpdateChoice | None = None
        self._latest = latest
        self._browser = browser
        self._dialogs = dialogs

        layout = QVBoxLayout(self)

        title = QLabel(f"A new version of {AppBranding.APP_NAME} has been released.")
        title.setStyleSheet("font-weight: bold; font-size: 14px;")
        layout.addWidget(title)
        layout.addWidget(QLabel(f"Installed version: {current}"))
        layout.addWidget(QLabel(f"Latest version: {latest}"))

        changelog = QLabel(
            f'To see what is new view the <a href="{latest.changelog_url}">changelog</a>.'
        )
        changelog.setTextFormat(Qt.TextFormat.RichText)
        changelog.setOpenExternalLinks(True)
        layout.addWidget(changelog)

        buttons = QHBoxLayout()
        ignore_btn = QPushButton("Ignore this update")
        ignore_btn.clicked.connect(
            lambda: self._finish(UpdateChoice.DISMISS_AND_REMEMBER))
        buttons.addWidget(ignore_btn)

        later_btn = QPushButton("Remind me later")
        later_btn.clicked.connect(lambda: self._finish(UpdateChoice.DISMISS_ONLY))
        buttons.addWidget(later_btn)

        download_btn = QPushButton("Download update")
        download_btn.setDefault(True)
        download_btn.clicked.connect(self._on_download)
        buttons.addWidget(download_btn)
        layout.addLayout(buttons)

    def _on_download(self):
        open_website(AppBranding.DOWNLOAD_URL, self._browser, self._dialogs)
        self._finish(UpdateChoice.DISMISS_ONLY)

    def _finish(self, choice: UpdateChoice):
        self.choice = choice
        self.accept()
