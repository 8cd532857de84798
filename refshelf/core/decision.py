"""Upgrade decision — pure, synchronous, no I/O."""

from typing import Iterable

from refshelf.core.version import Version


def decide(installed: Version, catalog: Iterable[Version]) -> Version | None:
    """Return the version ``installed`` should be updated to, or None.

    Only versions strictly newer than ``installed`` are candidates. Users on a
    stable release are offered stable releases only; users on a pre-release
    keep receiving pre-releases.
    """
    candidates = [v for v in catalog if v > installed]
    if installed.is_stable:
        candidates = [v for v in candidates if v.is_stable]
    if not candidates:
        return None
    return max(candidates)
