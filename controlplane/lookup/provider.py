"""
KCP Lookup — Provider Protocol and In-Memory Provider
=====================================================
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from controlplane.context.request_context import ContextCancelled, RequestContext
from controlplane.lookup.models import InfrastructureObject
from controlplane.lookup.results import LookupResult
from controlplane.machines.references import GroupVersionKind

logger = logging.getLogger("kcp.lookup")


class ObjectLookup(Protocol):
    def fetch(
        self,
        ctx: RequestContext,
        gvk: GroupVersionKind,
        namespace: str,
        name: str,
    ) -> LookupResult:
        ...


def _key(gvk: GroupVersionKind, namespace: str, name: str) -> tuple[str, str, str, str]:
    # Objects are addressed by group, not version: every served version
    # of a kind resolves to the same stored object.
    return (gvk.group, gvk.kind, namespace, name)


class InMemoryObjectLookup:
    """
    Deterministic in-memory provider used by tests/bootstrap.

    fail_on() registers an error to report as FAILED for one object,
    which is how tests simulate API errors.
    """

    def __init__(self, objects: Iterable[InfrastructureObject] | None = None):
        self._objects: dict[tuple[str, str, str, str], InfrastructureObject] = {}
        self._failures: dict[tuple[str, str, str, str], Exception] = {}

        for obj in objects or ():
            key = obj.lookup_key()
            if key in self._objects:
                raise ValueError(
                    "Duplicate infrastructure object "
                    f"(group_kind='{obj.group_version_kind().group_kind()}', "
                    f"namespace='{obj.namespace}', name='{obj.name}')."
                )
            self._objects[key] = obj

    def fail_on(
        self,
        gvk: GroupVersionKind,
        namespace: str,
        name: str,
        error: Exception,
    ) -> None:
        self._failures[_key(gvk, namespace, name)] = error

    def fetch(
        self,
        ctx: RequestContext,
        gvk: GroupVersionKind,
        namespace: str,
        name: str,
    ) -> LookupResult:
        try:
            ctx.raise_if_done()
        except ContextCancelled as exc:
            return LookupResult.failed(exc)

        key = _key(gvk, namespace, name)
        if key in self._failures:
            return LookupResult.failed(self._failures[key])

        obj = self._objects.get(key)
        if obj is None:
            logger.debug(
                "Infrastructure object %s %s/%s not found.",
                gvk.group_kind(), namespace, name,
            )
            return LookupResult.not_found()
        return LookupResult.found(obj)
