"""Settings dialog."""

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QCheckBox, QPushButton,
    QDialogButtonBox, QFormLayout,
)

from refshelf.config.settings import AppSettings


class SettingsDialog(QDialog):
    """Update-check preferences."""

    def __init__(self, parent=None, settings: AppSettings = None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(400)
        self._settings = settings or AppSettings()
        self._ignored = self._settings.ignored_version

        layout = QVBoxLayout(self)
        form = QFormLayout()

        self._check_updates = QCheckBox("Check for new versions at startup")
        self._check_updates.setChecked(self._settings.version_check_enabled)
        form.addRow(self._check_updates)

        ignored_layout = QHBoxLayout()
        self._ignored_label = QLabel(self._ignored or "None")
        ignored_layout.addWidget(self._ignored_label, 1)
        self._reset_btn = QPushButton("Reset")
        self._reset_btn.setEnabled(bool(self._ignored))
        self._reset_btn.clicked.connect(self._reset_ignored)
        ignored_layout.addWidget(self._reset_btn)
        form.addRow("Ignored version:", ignored_layout)
        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _reset_ignored(self):
        self._ignored = ""
        self._ignored_label.setText("None")
        self._reset_btn.setEnabled(False)

    def get_settings(self) -> AppSettings:
        """Return updated settings."""
        self._settings.version_check_enabled = self._check_updates.isChecked()
        self._settings.ignored_version = self._ignored
        return self._settings
