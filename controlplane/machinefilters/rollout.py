"""
KCP Machine Filters — Rollout Policy
====================================
Composite filter classifying machines that must be replaced to bring
the control plane to its desired state.

A machine needs rollout when it is not already being deleted and:
- it predates a rollout trigger that has passed, or
- its declared version differs from the desired version, or
- its infrastructure was cloned from a different template.

The provenance check performs a lookup, so it runs last and only when
no cheaper check has decided.
"""

from __future__ import annotations

from typing import Optional

from controlplane.context.request_context import RequestContext
from controlplane.lookup.provider import ObjectLookup
from controlplane.machinefilters.combinators import MachineFilter, and_, not_, or_
from controlplane.machinefilters.filters import (
    has_deletion_timestamp,
    matches_kubernetes_version,
    should_rollout_after,
)
from controlplane.machinefilters.provenance import matches_template_cloned_from
from controlplane.machines.models import ControlPlane
from controlplane.time.clock import Clock


def needs_rollout(
    ctx: RequestContext,
    lookup: ObjectLookup,
    control_plane: ControlPlane,
    clock: Optional[Clock] = None,
) -> MachineFilter:
    reasons: list[MachineFilter] = [
        should_rollout_after(control_plane.upgrade_after, clock=clock),
    ]
    if control_plane.version is not None:
        reasons.append(not_(matches_kubernetes_version(control_plane.version)))
    reasons.append(not_(matches_template_cloned_from(ctx, lookup, control_plane)))

    return and_(not_(has_deletion_timestamp), or_(*reasons))
