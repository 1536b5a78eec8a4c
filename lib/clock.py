# =============================================================================
# lib/clock.py - Clock Capability
# =============================================================================
# Anything that stamps times (settings updated_at, image keys, footer year)
# asks an injected Clock instead of reading the process clock directly.
# =============================================================================

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Always returns the same instant. Naive datetimes are taken as UTC."""

    def __init__(self, at: datetime):
        if at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)
        self.at = at

    def now(self) -> datetime:
        return self.at


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return int(moment.timestamp() * 1000)


def to_iso(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
