"""
KCP Machine Filters — Combinator Algebra
========================================
A MachineFilter is any callable taking a Machine (or None) and
returning a bool. Combinators build new filters from existing ones.

and_/or_ evaluate left to right and stop at the first deciding
result, so filters that perform lookups should be listed last.

Identities:
    and_()  → always True
    or_()   → always False
"""

from __future__ import annotations

from typing import Callable, Optional

from controlplane.machines.models import Machine


MachineFilter = Callable[[Optional[Machine]], bool]


def not_(mf: MachineFilter) -> MachineFilter:
    """Negate a filter."""

    def _not(machine: Optional[Machine]) -> bool:
        return not mf(machine)

    return _not


def and_(*filters: MachineFilter) -> MachineFilter:
    """True iff every filter is True."""

    def _and(machine: Optional[Machine]) -> bool:
        for mf in filters:
            if not mf(machine):
                return False
        return True

    return _and


def or_(*filters: MachineFilter) -> MachineFilter:
    """True iff at least one filter is True."""

    def _or(machine: Optional[Machine]) -> bool:
        for mf in filters:
            if mf(machine):
                return True
        return False

    return _or
