"""Published-version catalog — GitHub Releases listing.

Blocking; meant to run on a scheduler worker, never on the GUI thread.
"""

import json
import logging
from http.client import HTTPException
from urllib.request import Request, urlopen
from urllib.error import URLError

from refshelf.branding import AppBranding
from refshelf.core.version import ParseError, Version

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """The remote release listing could not be fetched or read."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class VersionCatalogFetcher:
    """Retrieves the versions currently published on GitHub Releases.

    No retries: a failed fetch raises NetworkError once and the caller decides
    what to do about it.
    """

    def __init__(self, releases_url: str = AppBranding.RELEASES_URL, timeout: float = 30):
        self.releases_url = releases_url
        self.timeout = timeout

    def fetch(self) -> list[Version]:
        """Return every parsable, non-draft release as a Version."""
        req = Request(self.releases_url, headers={
            'User-Agent': AppBranding.user_agent(),
            'Accept': 'application/vnd.github+json',
        })

        try:
            with urlopen(req, timeout=self.timeout) as resp:
                releases = json.loads(resp.read().decode('utf-8'))
        except (URLError, OSError, HTTPException, UnicodeDecodeError,
                json.JSONDecodeError) as e:
            raise NetworkError(f"Failed to fetch releases from {self.releases_url}: {e}", e) from e

        if not isinstance(releases, list):
            raise NetworkError(
                f"Unexpected release listing (expected a list, got {type(releases).__name__})"
            )

        versions = []
        for r in releases:
            if not isinstance(r, dict) or r.get('draft'):
                continue
            tag = r.get('tag_name') or ''
            try:
                versions.append(Version.parse(str(tag).lstrip('vV')))
            except ParseError:
                logger.debug("Skipping release with unparsable tag %r", tag)

        logger.info("Fetched %d published versions", len(versions))
        return versions
