"""
KCP Machines — Machine Collection
=================================
Immutable, name-keyed set of machines that filters are applied to.

The collection classifies; it does not rank. Choosing which machine
to act on first is the reconciler's decision.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from controlplane.machines.models import Machine


class MachineCollection:
    """
    Usage:
        machines = MachineCollection(listed_machines)
        stale = machines.filter(
            not_(has_deletion_timestamp),
            should_rollout_after(kcp.upgrade_after),
        )
    """

    def __init__(self, machines: Iterable[Machine] | None = None):
        self._machines: dict[str, Machine] = {}
        for machine in machines or ():
            if machine is None:
                continue
            self._machines[machine.name] = machine

    def filter(
        self, *filters: Callable[[Optional[Machine]], bool]
    ) -> MachineCollection:
        """Machines for which every filter is True."""
        return MachineCollection(
            machine
            for machine in self._machines.values()
            if all(mf(machine) for mf in filters)
        )

    def any_match(self, *filters: Callable[[Optional[Machine]], bool]) -> bool:
        return any(
            all(mf(machine) for mf in filters)
            for machine in self._machines.values()
        )

    def insert(self, *machines: Machine) -> MachineCollection:
        return MachineCollection((*self._machines.values(), *machines))

    def union(self, other: MachineCollection) -> MachineCollection:
        return MachineCollection((*self._machines.values(), *other))

    def difference(self, other: MachineCollection) -> MachineCollection:
        return MachineCollection(
            machine
            for name, machine in self._machines.items()
            if not other.has(name)
        )

    def has(self, name: str) -> bool:
        return name in self._machines

    def get(self, name: str) -> Optional[Machine]:
        return self._machines.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._machines))

    def __contains__(self, machine: object) -> bool:
        return isinstance(machine, Machine) and self.has(machine.name)

    def __iter__(self) -> Iterator[Machine]:
        return iter(self._machines.values())

    def __len__(self) -> int:
        return len(self._machines)

    def __repr__(self) -> str:
        return f"MachineCollection({list(self.names())!r})"
