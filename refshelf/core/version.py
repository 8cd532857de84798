"""Release identifiers — parsing, ordering and stability.

A release identifier is a dotted run of numeric segments, optionally followed
by a pre-release/build suffix separated by a double hyphen::

    5.1
    5.2--beta
    5.3--2021-03-07--e3f1a5c

Numeric precedence is compared with ``packaging`` release tuples, so trailing
zero segments are insignificant (``5.0 == 5.0.0``).
"""

import functools
import re

from packaging.version import InvalidVersion, Version as ReleaseNumber

_VERSION_RE = re.compile(r'^(?P<base>[0-9]+(?:\.[0-9]+)*)(?:--(?P<suffix>\S+))?$')

CHANGELOG_URL = "https://github.com/refshelf/refshelf/blob/{ref}/CHANGELOG.md"


class ParseError(ValueError):
    """Text does not match the release-identifier grammar."""


@functools.total_ordering
class Version:
    """Immutable, totally ordered release identifier."""

    __slots__ = ('_text', '_base', '_suffix', '_key')

    def __init__(self, base: str, suffix: str = ""):
        object.__setattr__(self, '_base', base)
        object.__setattr__(self, '_suffix', suffix)
        object.__setattr__(self, '_text', f"{base}--{suffix}" if suffix else base)
        # stable > unstable at equal numeric precedence, then suffix text
        object.__setattr__(self, '_key', (ReleaseNumber(base), not suffix, suffix))

    @classmethod
    def parse(cls, text: str) -> 'Version':
        """Parse ``text``; raises ParseError if it is not a release identifier."""
        if not isinstance(text, str):
            raise ParseError(f"Expected a string, got {type(text).__name__}")
        match = _VERSION_RE.match(text.strip())
        if match is None:
            raise ParseError(f"Invalid version: {text!r}")
        try:
            return cls(match.group('base'), match.group('suffix') or "")
        except InvalidVersion as e:
            raise ParseError(f"Invalid version: {text!r}") from e

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── Properties ───────────────────────────────────────────────────

    @property
    def base(self) -> str:
        return self._base

    @property
    def suffix(self) -> str:
        return self._suffix

    @property
    def is_stable(self) -> bool:
        """True iff no pre-release/build suffix is present."""
        return not self._suffix

    @property
    def changelog_url(self) -> str:
        if self.is_stable:
            return CHANGELOG_URL.format(ref=f"v{self._base}")
        return CHANGELOG_URL.format(ref="main")

    # ── Ordering ─────────────────────────────────────────────────────

    def compare_to(self, other: 'Version') -> int:
        """Return -1, 0 or 1 as this version is less than, equal to or greater than ``other``."""
        if self._key < other._key:
            return -1
        if self._key > other._key:
            return 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._key < other._key

    def __hash__(self):
        return hash(self._key)

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"Version({self._text!r})"
