"""
KCP Machine Filters — Public API
================================
Pure predicates over control-plane machines and the algebra that
combines them.

Filtering is classification, not scheduling.
A False verdict is an answer.
A raised MachineFilterError is not.
"""

from controlplane.machinefilters.combinators import MachineFilter, and_, not_, or_
from controlplane.machinefilters.exceptions import (
    ContextCancelledError,
    InfrastructureLookupError,
    MachineFilterError,
)
from controlplane.machinefilters.filters import (
    adoptable_control_plane_machines,
    control_plane_machines,
    control_plane_selector_for_cluster,
    has_annotation_key,
    has_controller_ref,
    has_deletion_timestamp,
    in_failure_domains,
    matches_kubernetes_version,
    owned_machines,
    should_rollout_after,
)
from controlplane.machinefilters.provenance import matches_template_cloned_from
from controlplane.machinefilters.rollout import needs_rollout

__all__ = [
    # ── Algebra ───────────────────────────────────────────────
    "MachineFilter",
    "not_",
    "and_",
    "or_",
    # ── Stateless filters ─────────────────────────────────────
    "has_deletion_timestamp",
    "should_rollout_after",
    "has_annotation_key",
    "has_controller_ref",
    "owned_machines",
    "control_plane_machines",
    "adoptable_control_plane_machines",
    "control_plane_selector_for_cluster",
    "in_failure_domains",
    "matches_kubernetes_version",
    # ── Lookup-backed filters ─────────────────────────────────
    "matches_template_cloned_from",
    "needs_rollout",
    # ── Exceptions ────────────────────────────────────────────
    "MachineFilterError",
    "InfrastructureLookupError",
    "ContextCancelledError",
]
