"""
KCP Time — Public API
=====================
Injectable clock and zero-instant helpers.
Doctrine: NO datetime.now() inside filter logic.
"""

from controlplane.time.clock import (
    ZERO_TIME,
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    is_zero_time,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "ZERO_TIME",
    "is_zero_time",
]
