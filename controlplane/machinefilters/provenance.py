"""
KCP Machine Filters — Template Provenance
=========================================
Checks that a machine's infrastructure object was cloned from the
infrastructure template the control plane currently points at.

Fail-open on missing data:
- No infrastructure reference         → match
- Infrastructure object not found     → match
- No provenance annotations recorded  → match
- Annotations present, both equal     → match
- Anything else                       → no match

Fail-closed on errors:
- Lookup failure    → InfrastructureLookupError
- Context done      → ContextCancelledError
"""

from __future__ import annotations

import logging
from typing import Optional

from controlplane.annotations import (
    TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION,
    TEMPLATE_CLONED_FROM_NAME_ANNOTATION,
)
from controlplane.context.request_context import ContextCancelled, RequestContext
from controlplane.lookup.provider import ObjectLookup
from controlplane.machinefilters.combinators import MachineFilter
from controlplane.machinefilters.exceptions import (
    ContextCancelledError,
    InfrastructureLookupError,
)
from controlplane.machines.models import ControlPlane, Machine

logger = logging.getLogger("kcp.machinefilters")


def matches_template_cloned_from(
    ctx: RequestContext,
    lookup: Optional[ObjectLookup],
    control_plane: Optional[ControlPlane],
) -> MachineFilter:
    """
    Build a filter comparing cloned-from annotations on the machine's
    infrastructure object against control_plane.infrastructure_template.

    Performs one blocking lookup per evaluated machine.
    """

    def _matches_template_cloned_from(machine: Optional[Machine]) -> bool:
        if machine is None:
            return False

        if ctx is None or lookup is None or control_plane is None:
            raise ValueError(
                "matches_template_cloned_from requires a context, a lookup "
                "and a control plane."
            )

        if machine.infrastructure_ref is None:
            return True

        reason = ctx.error()
        if reason is not None:
            raise ContextCancelledError(reason)

        ref = machine.infrastructure_ref
        namespace = ref.resolve_namespace(control_plane.namespace)
        gvk = ref.group_version_kind()

        result = lookup.fetch(ctx, gvk, namespace, ref.name)

        if result.is_not_found:
            logger.debug(
                "Infrastructure object %s %s/%s for machine '%s' not found; "
                "treating as template match.",
                gvk.group_kind(), namespace, ref.name, machine.name,
            )
            return True

        if result.is_failed:
            if isinstance(result.error, ContextCancelled):
                raise ContextCancelledError(result.error.reason) from result.error
            logger.warning(
                "Lookup of infrastructure object %s %s/%s for machine '%s' "
                "failed: %s",
                gvk.group_kind(), namespace, ref.name, machine.name, result.error,
            )
            raise InfrastructureLookupError(
                ref, namespace, result.error
            ) from result.error

        annotations = result.obj.annotations
        cloned_from_name = annotations.get(TEMPLATE_CLONED_FROM_NAME_ANNOTATION)
        cloned_from_group_kind = annotations.get(
            TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION
        )

        if cloned_from_name is None and cloned_from_group_kind is None:
            return True

        template = control_plane.infrastructure_template
        return (
            cloned_from_name == template.name
            and cloned_from_group_kind == template.group_version_kind().group_kind()
        )

    return _matches_template_cloned_from
