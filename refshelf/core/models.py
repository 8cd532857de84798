"""Update check data models."""

from dataclasses import dataclass
from enum import Enum

from refshelf.core.version import Version


class CheckMode(Enum):
    MANUAL = "manual"           # user-initiated, always gives feedback
    BACKGROUND = "background"   # startup check, silent unless actionable


class CheckState(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REPORTED = "reported"


class UpdateChoice(Enum):
    """User's answer to the update-available dialog."""
    DISMISS_AND_REMEMBER = "dismiss_and_remember"   # don't show this version again
    DISMISS_ONLY = "dismiss_only"                   # remind me later


@dataclass
class CheckInvocation:
    """Transient record of one check run."""

    mode: CheckMode
    state: CheckState = CheckState.IDLE
    result: Version | None = None
    error: Exception | None = None

    @property
    def manual(self) -> bool:
        return self.mode is CheckMode.MANUAL
