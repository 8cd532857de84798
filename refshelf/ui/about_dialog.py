"""About dialog — renders AboutInfo, delegates actions to it."""

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QPlainTextEdit,
    QDialogButtonBox,
)

from refshelf.branding import AppBranding
from refshelf.core.about import AboutInfo, open_website
from refshelf.core.interfaces import Browser, Clipboard, DialogService


class AboutDialog(QDialog):

    def __init__(self, info: AboutInfo, browser: Browser, clipboard: Clipboard,
                 dialogs: DialogService, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"About {AppBranding.APP_NAME}")
        self.setMinimumWidth(460)
        self._info = info
        self._browser = browser
        self._clipboard = clipboard
        self._dialogs = dialogs

        layout = QVBoxLayout(self)

        heading = QLabel(info.heading)
        heading.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(heading)
        if info.is_development_version:
            dev = QLabel(f"Development version: {info.development_version}")
            dev.setStyleSheet("color: #F59E0B;")
            layout.addWidget(dev)
        layout.addWidget(QLabel(f"Maintainers: {info.maintainers}"))

        details = QPlainTextEdit(info.version_info)
        details.setReadOnly(True)
        details.setFixedHeight(90)
        layout.addWidget(details)

        links = QHBoxLayout()
        for text, url in (
            ("Homepage", AppBranding.HOMEPAGE_URL),
            ("GitHub", AppBranding.GITHUB_URL),
            ("License", AppBranding.LICENSE_URL),
            ("Contributors", AppBranding.CONTRIBUTORS_URL),
            ("Libraries", AppBranding.LIBRARIES_URL),
            ("Privacy", AppBranding.PRIVACY_POLICY_URL),
            ("Donate", AppBranding.DONATION_URL),
        ):
            btn = QPushButton(text)
            btn.clicked.connect(lambda _checked, u=url: self._open(u))
            links.addWidget(btn)
        layout.addLayout(links)

        actions = QHBoxLayout()
        copy_btn = QPushButton("Copy version")
        copy_btn.clicked.connect(
            lambda: info.copy_version_to_clipboard(self._clipboard, self._dialogs))
        actions.addWidget(copy_btn)
        changelog_btn = QPushButton("Changelog")
        changelog_btn.clicked.connect(
            lambda: info.open_changelog(self._browser, self._dialogs))
        actions.addWidget(changelog_btn)
        actions.addStretch(1)
        layout.addLayout(actions)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _open(self, url: str):
        open_website(url, self._browser, self._dialogs)
