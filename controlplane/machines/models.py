"""
KCP Machines — Immutable Models
===============================
Read-only snapshots of control-plane members and their owner.

Machines are owned and mutated by the API server and the reconciler.
Filters only ever see these frozen snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional

from controlplane.machines.references import (
    GroupVersionKind,
    ObjectReference,
    OwnerReference,
)
from controlplane.time.clock import ZERO_TIME


def _freeze_mapping(obj, attr: str) -> None:
    value = getattr(obj, attr)
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{attr} must be a mapping of str to str.")
    object.__setattr__(obj, attr, MappingProxyType(dict(value)))


def _require_aware(value: Optional[datetime], attr: str) -> None:
    if value is not None and value.tzinfo is None:
        raise ValueError(f"{attr} must be a timezone-aware datetime.")


# ══════════════════════════════════════════════════════════════
# MACHINE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Machine:
    """
    One member of a managed control plane.

    Fields:
        name / namespace:     Object identity.
        creation_timestamp:   When the API server created the machine.
        deletion_timestamp:   Set once deletion started. May be ZERO_TIME
                              when present but uninitialized.
        annotations / labels: Read-only string maps.
        owner_references:     Owners, at most one with controller=True.
        version:              Declared Kubernetes version, if any.
        failure_domain:       Declared placement zone, if any.
        infrastructure_ref:   Infrastructure object provisioned for it.
    """

    name: str
    namespace: str = "default"
    creation_timestamp: datetime = ZERO_TIME
    deletion_timestamp: Optional[datetime] = None
    annotations: Mapping[str, str] = field(default_factory=dict)
    labels: Mapping[str, str] = field(default_factory=dict)
    owner_references: tuple[OwnerReference, ...] = ()
    version: Optional[str] = None
    failure_domain: Optional[str] = None
    infrastructure_ref: Optional[ObjectReference] = None

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        _require_aware(self.creation_timestamp, "creation_timestamp")
        _require_aware(self.deletion_timestamp, "deletion_timestamp")

        if not isinstance(self.owner_references, tuple):
            raise ValueError("owner_references must be a tuple.")

        _freeze_mapping(self, "annotations")
        _freeze_mapping(self, "labels")


# ══════════════════════════════════════════════════════════════
# CONTROL PLANE (expected state for provenance/version checks)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ControlPlane:
    """
    Desired state of a control plane.

    infrastructure_template is the template new machines are cloned
    from; provenance filters compare against its name and group/kind.
    upgrade_after is the rollout trigger. uid identifies this incarnation
    of the object for ownership checks; empty when unknown.
    """

    name: str
    namespace: str
    infrastructure_template: ObjectReference
    version: Optional[str] = None
    upgrade_after: Optional[datetime] = None
    api_version: str = "controlplane.cluster.x-k8s.io/v1alpha3"
    kind: str = "KubeadmControlPlane"
    uid: str = ""

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        if not isinstance(self.infrastructure_template, ObjectReference):
            raise ValueError("infrastructure_template must be an ObjectReference.")

        _require_aware(self.upgrade_after, "upgrade_after")

    def group_version_kind(self) -> GroupVersionKind:
        return GroupVersionKind.from_api_version(self.api_version, self.kind)
