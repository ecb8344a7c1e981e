"""
KCP Time — Explicit Clock Protocol
==================================
Filters that compare against "now" receive it from a Clock,
never from the system directly. Tests pin time with FixedClock.

Timestamps recorded by the API server may be uninitialized but
present. Such values carry the zero instant (0001-01-01T00:00:00Z)
and are treated as absent by every filter.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol


ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def is_zero_time(value: Optional[datetime]) -> bool:
    """True if value is None or the zero instant."""
    if value is None:
        return True
    if value.tzinfo is None:
        return value == ZERO_TIME.replace(tzinfo=None)
    return value == ZERO_TIME


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now_utc(self) -> datetime:
        """Return current UTC time."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Wall-clock time, used when no clock is injected."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Pinned time for deterministic rollout checks.

    advance() moves it so a test can watch an upgrade_after trigger pass.
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._fixed_dt = fixed_dt

    def now_utc(self) -> datetime:
        return self._fixed_dt

    def advance(self, seconds: float) -> None:
        """Move the fixed time forward (or back, for negative seconds)."""
        self._fixed_dt = self._fixed_dt + timedelta(seconds=seconds)


# ══════════════════════════════════════════════════════════════
# DEFAULT CLOCK
# ══════════════════════════════════════════════════════════════

_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    """Clock used by filters built without an explicit one."""
    return _default_clock
