"""Application settings — persistence via JSON."""

import json
import logging
import os
from dataclasses import dataclass, asdict

from refshelf.core.version import ParseError, Version

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.join(os.environ.get('LOCALAPPDATA', '.'), 'RefShelf')


@dataclass
class AppSettings:
    """Persistent application settings."""
    data_dir: str = ""

    # Updates
    version_check_enabled: bool = True
    ignored_version: str = ""           # str(Version), '' when unset

    def __post_init__(self):
        if not self.data_dir:
            self.data_dir = DEFAULT_DATA_DIR

    @staticmethod
    def load(path: str | None = None) -> 'AppSettings':
        """Load settings from JSON. Returns defaults if file doesn't exist."""
        if path is None:
            path = os.path.join(DEFAULT_DATA_DIR, 'settings.json')

        if not os.path.isfile(path):
            logger.info("No settings file, using defaults")
            return AppSettings()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            settings = AppSettings(**{k: v for k, v in data.items()
                                      if k in AppSettings.__dataclass_fields__})
            logger.info("Loaded settings from %s", path)
            return settings
        except Exception as e:
            logger.warning("Failed to load settings: %s", e)
            return AppSettings()

    def save(self, path: str | None = None):
        """Save settings to JSON."""
        if path is None:
            path = os.path.join(self.data_dir, 'settings.json')

        os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self), f, indent=2)
            logger.info("Saved settings to %s", path)
        except Exception as e:
            logger.warning("Failed to save settings: %s", e)

    def ensure_dirs(self):
        """Create data directories if they don't exist."""
        os.makedirs(self.data_dir, exist_ok=True)

    # ── Ignored version ──────────────────────────────────────────────

    def get_ignored_version(self) -> Version | None:
        if not self.ignored_version:
            return None
        try:
            return Version.parse(self.ignored_version)
        except ParseError:
            logger.warning("Ignoring unparsable ignored_version %r", self.ignored_version)
            return None

    def set_ignored_version(self, version: Version):
        """Remember ``version`` as dismissed and persist immediately."""
        self.ignored_version = str(version)
        self.save()
