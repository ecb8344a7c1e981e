"""
Tests for matches_template_cloned_from — provenance of infrastructure objects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from controlplane.annotations import (
    TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION,
    TEMPLATE_CLONED_FROM_NAME_ANNOTATION,
)
from controlplane.context import RequestContext
from controlplane.lookup import InfrastructureObject, InMemoryObjectLookup, LookupResult
from controlplane.machinefilters import (
    ContextCancelledError,
    InfrastructureLookupError,
    MachineFilterError,
    matches_template_cloned_from,
)
from controlplane.machines import ControlPlane, Machine, ObjectReference
from controlplane.time import FixedClock


INFRA_API_VERSION = "infrastructure.cluster.x-k8s.io/v1alpha3"

KCP = ControlPlane(
    name="kcp",
    namespace="default",
    infrastructure_template=ObjectReference(
        api_version="generic.io/v1",
        kind="GenericMachineTemplate",
        name="infra-foo",
        namespace="default",
    ),
)

MACHINE = Machine(
    name="machine-1",
    infrastructure_ref=ObjectReference(
        api_version=INFRA_API_VERSION,
        kind="InfrastructureMachine",
        name="infra-config1",
        namespace="default",
    ),
)


def _infra_object(annotations: dict) -> InfrastructureObject:
    return InfrastructureObject(
        api_version=INFRA_API_VERSION,
        kind="InfrastructureMachine",
        namespace="default",
        name="infra-config1",
        annotations=annotations,
    )


class RecordingLookup:
    """Lookup stub that records calls and returns a fixed result."""

    def __init__(self, result: LookupResult):
        self.result = result
        self.calls = []

    def fetch(self, ctx, gvk, namespace, name):
        self.calls.append((gvk, namespace, name))
        return self.result


def test_none_machine_returns_false():
    mf = matches_template_cloned_from(RequestContext.background(), None, None)
    assert mf(None) is False


def test_infrastructure_object_not_found_returns_true():
    mf = matches_template_cloned_from(
        RequestContext.background(), InMemoryObjectLookup(), KCP
    )
    assert mf(MACHINE) is True


def test_machine_without_infrastructure_ref_returns_true():
    lookup = RecordingLookup(LookupResult.not_found())
    mf = matches_template_cloned_from(RequestContext.background(), lookup, KCP)
    assert mf(Machine(name="bare")) is True
    assert lookup.calls == []


def test_missing_collaborators_is_a_programming_error():
    mf = matches_template_cloned_from(RequestContext.background(), None, None)
    with pytest.raises(ValueError, match="requires a context"):
        mf(MACHINE)


def test_missing_context_is_a_programming_error():
    lookup = RecordingLookup(LookupResult.not_found())
    mf = matches_template_cloned_from(None, lookup, KCP)
    with pytest.raises(ValueError, match="requires a context"):
        mf(MACHINE)
    assert lookup.calls == []


@pytest.mark.parametrize(
    "annotations, expect_match",
    [
        pytest.param({}, True, id="no-annotations"),
        pytest.param(
            {
                TEMPLATE_CLONED_FROM_NAME_ANNOTATION: "barfoo1",
                TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION: "barfoo2",
            },
            False,
            id="nothing-matches",
        ),
        pytest.param(
            {
                TEMPLATE_CLONED_FROM_NAME_ANNOTATION: "infra-foo",
                TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION: "barfoo2",
            },
            False,
            id="name-matches-group-kind-does-not",
        ),
        pytest.param(
            {
                TEMPLATE_CLONED_FROM_NAME_ANNOTATION: "infra-foo",
                TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION: "GenericMachineTemplate.generic.io",
            },
            True,
            id="both-match",
        ),
        pytest.param(
            {TEMPLATE_CLONED_FROM_NAME_ANNOTATION: "infra-foo"},
            False,
            id="group-kind-missing",
        ),
        pytest.param(
            {
                TEMPLATE_CLONED_FROM_NAME_ANNOTATION: "infra-foo",
                TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION: "GenericMachineTemplate.generic.io/v1",
            },
            False,
            id="group-kind-with-version",
        ),
        pytest.param(
            {"unrelated": "value"},
            True,
            id="unrelated-annotations-only",
        ),
    ],
)
def test_cloned_from_annotations(annotations, expect_match):
    lookup = InMemoryObjectLookup(objects=[_infra_object(annotations)])
    mf = matches_template_cloned_from(RequestContext.background(), lookup, KCP)
    assert mf(MACHINE) is expect_match


def test_lookup_uses_control_plane_namespace_when_ref_has_none():
    lookup = RecordingLookup(LookupResult.not_found())
    machine = Machine(
        name="machine-1",
        infrastructure_ref=ObjectReference(
            api_version=INFRA_API_VERSION,
            kind="InfrastructureMachine",
            name="infra-config1",
        ),
    )
    kcp = ControlPlane(
        name="kcp",
        namespace="team-a",
        infrastructure_template=KCP.infrastructure_template,
    )
    matches_template_cloned_from(RequestContext.background(), lookup, kcp)(machine)

    gvk, namespace, name = lookup.calls[0]
    assert (gvk.group, gvk.version, gvk.kind) == (
        "infrastructure.cluster.x-k8s.io",
        "v1alpha3",
        "InfrastructureMachine",
    )
    assert namespace == "team-a"
    assert name == "infra-config1"


def test_core_group_template_compares_kind_only():
    kcp = ControlPlane(
        name="kcp",
        namespace="default",
        infrastructure_template=ObjectReference(
            api_version="v1", kind="MachineTemplate", name="infra-foo"
        ),
    )
    lookup = InMemoryObjectLookup(
        objects=[
            _infra_object(
                {
                    TEMPLATE_CLONED_FROM_NAME_ANNOTATION: "infra-foo",
                    TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION: "MachineTemplate",
                }
            )
        ]
    )
    mf = matches_template_cloned_from(RequestContext.background(), lookup, kcp)
    assert mf(MACHINE) is True


# ── Failures ─────────────────────────────────────────────────

def test_lookup_failure_raises_instead_of_verdict():
    lookup = InMemoryObjectLookup()
    lookup.fail_on(
        MACHINE.infrastructure_ref.group_version_kind(),
        "default",
        "infra-config1",
        PermissionError("forbidden"),
    )
    mf = matches_template_cloned_from(RequestContext.background(), lookup, KCP)

    with pytest.raises(InfrastructureLookupError) as exc_info:
        mf(MACHINE)

    assert isinstance(exc_info.value, MachineFilterError)
    assert isinstance(exc_info.value.cause, PermissionError)
    assert exc_info.value.__cause__ is exc_info.value.cause
    assert exc_info.value.namespace == "default"
    assert "InfrastructureMachine.infrastructure.cluster.x-k8s.io" in str(exc_info.value)


def test_cancelled_context_raises_without_lookup():
    lookup = RecordingLookup(LookupResult.not_found())
    ctx = RequestContext.background()
    ctx.cancel()
    mf = matches_template_cloned_from(ctx, lookup, KCP)

    with pytest.raises(ContextCancelledError, match="context canceled"):
        mf(MACHINE)
    assert lookup.calls == []


def test_expired_deadline_raises():
    now = datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)
    clock = FixedClock(now)
    ctx = RequestContext(deadline=now + timedelta(seconds=5), clock=clock)
    lookup = InMemoryObjectLookup(objects=[_infra_object({})])
    mf = matches_template_cloned_from(ctx, lookup, KCP)

    assert mf(MACHINE) is True
    clock.advance(5)
    with pytest.raises(ContextCancelledError, match="deadline exceeded"):
        mf(MACHINE)


def test_cancellation_reported_by_lookup_raises_context_error():
    ctx = RequestContext.background()

    class CancellingLookup:
        def fetch(self, ctx, gvk, namespace, name):
            ctx.cancel()
            return InMemoryObjectLookup().fetch(ctx, gvk, namespace, name)

    mf = matches_template_cloned_from(ctx, CancellingLookup(), KCP)
    with pytest.raises(ContextCancelledError):
        mf(MACHINE)
