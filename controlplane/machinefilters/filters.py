"""
KCP Machine Filters — Stateless Filter Library
==============================================
Filters that read only the machine they are given.

Every filter:
- Accepts None and answers False for it
- Never raises once built (factories reject bad arguments up front)
- Never mutates the machine
- Is safe to call concurrently

Some entries are filters themselves (has_deletion_timestamp); the
rest are factories returning a filter (has_annotation_key(key)).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from controlplane.annotations import CLUSTER_NAME_LABEL, MACHINE_CONTROL_PLANE_LABEL
from controlplane.machinefilters.combinators import MachineFilter, and_, not_
from controlplane.machines.models import ControlPlane, Machine
from controlplane.machines.references import split_api_version
from controlplane.machines.selectors import LabelSelector
from controlplane.time.clock import Clock, get_default_clock, is_zero_time


# ══════════════════════════════════════════════════════════════
# LIFECYCLE
# ══════════════════════════════════════════════════════════════

def has_deletion_timestamp(machine: Optional[Machine]) -> bool:
    """True once deletion of the machine has started."""
    if machine is None:
        return False
    return not is_zero_time(machine.deletion_timestamp)


def should_rollout_after(
    upgrade_after: Optional[datetime],
    clock: Optional[Clock] = None,
) -> MachineFilter:
    """
    Machines created before a rollout trigger that has already passed.

    - No trigger → False
    - Trigger still in the future → False
    - Otherwise True iff the machine was created strictly before it
    """
    if upgrade_after is not None and upgrade_after.tzinfo is None:
        raise ValueError("upgrade_after must be a timezone-aware datetime.")

    def _should_rollout_after(machine: Optional[Machine]) -> bool:
        if machine is None or upgrade_after is None:
            return False
        now = (clock or get_default_clock()).now_utc()
        if upgrade_after > now:
            return False
        return machine.creation_timestamp < upgrade_after

    return _should_rollout_after


# ══════════════════════════════════════════════════════════════
# METADATA
# ══════════════════════════════════════════════════════════════

def has_annotation_key(key: str) -> MachineFilter:
    """Annotation present, whatever its value (empty included)."""

    def _has_annotation_key(machine: Optional[Machine]) -> bool:
        if machine is None:
            return False
        return key in machine.annotations

    return _has_annotation_key


def has_controller_ref(machine: Optional[Machine]) -> bool:
    if machine is None:
        return False
    return any(ref.controller for ref in machine.owner_references)


def owned_machines(owner: ControlPlane) -> MachineFilter:
    """
    Machines with an owner reference to owner (group, kind and name).

    When both sides carry a uid they must agree, so a reference left over
    from a deleted owner of the same name does not match.
    """
    owner_group = owner.group_version_kind().group

    def _owned_machines(machine: Optional[Machine]) -> bool:
        if machine is None:
            return False
        for ref in machine.owner_references:
            ref_group, _ = split_api_version(ref.api_version)
            if (
                ref_group == owner_group
                and ref.kind == owner.kind
                and ref.name == owner.name
                and (not ref.uid or not owner.uid or ref.uid == owner.uid)
            ):
                return True
        return False

    return _owned_machines


def control_plane_selector_for_cluster(cluster_name: str) -> LabelSelector:
    """Selects machines labelled as control-plane members of cluster_name."""
    return LabelSelector(
        match_labels=((CLUSTER_NAME_LABEL, cluster_name),),
        match_exists=(MACHINE_CONTROL_PLANE_LABEL,),
    )


def control_plane_machines(cluster_name: str) -> MachineFilter:
    selector = control_plane_selector_for_cluster(cluster_name)

    def _control_plane_machines(machine: Optional[Machine]) -> bool:
        if machine is None:
            return False
        return selector.matches(machine.labels)

    return _control_plane_machines


def adoptable_control_plane_machines(cluster_name: str) -> MachineFilter:
    """Control-plane machines of the cluster that no controller owns yet."""
    return and_(control_plane_machines(cluster_name), not_(has_controller_ref))


# ══════════════════════════════════════════════════════════════
# PLACEMENT & VERSION
# ══════════════════════════════════════════════════════════════

def in_failure_domains(*failure_domains: Optional[str]) -> MachineFilter:
    """
    Machines placed in one of the given failure domains.

    None is a member like any other and stands for "unset": passing
    None selects machines that declare no failure domain.
    """
    domains = frozenset(failure_domains)

    def _in_failure_domains(machine: Optional[Machine]) -> bool:
        if machine is None:
            return False
        return machine.failure_domain in domains

    return _in_failure_domains


def matches_kubernetes_version(version: str) -> MachineFilter:
    """Exact string match on the declared version. No semver ordering."""

    def _matches_kubernetes_version(machine: Optional[Machine]) -> bool:
        if machine is None or machine.version is None:
            return False
        return machine.version == version

    return _matches_kubernetes_version
