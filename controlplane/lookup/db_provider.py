"""
KCP Lookup - DB-backed Provider
===============================
Resolves infrastructure objects from the relational infrastructure store.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError

from controlplane.context.request_context import ContextCancelled, RequestContext
from controlplane.lookup.models import InfrastructureObject
from controlplane.lookup.results import LookupResult
from controlplane.machines.references import GroupVersionKind

logger = logging.getLogger("kcp.lookup")


class DbObjectLookup:
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

        from controlplane.infrastructure_store.models import InfrastructureObjectRecord

        try:
            record = InfrastructureObjectRecord.objects.filter(
                group=gvk.group,
                kind=gvk.kind,
                namespace=namespace,
                name=name,
            ).first()
        except DatabaseError as exc:
            logger.warning(
                "Failed to read infrastructure object %s %s/%s: %s",
                gvk.group_kind(), namespace, name, exc,
            )
            return LookupResult.failed(exc)

        if record is None:
            return LookupResult.not_found()

        annotations = record.annotations if isinstance(record.annotations, dict) else {}
        return LookupResult.found(
            InfrastructureObject(
                api_version=record.api_version,
                kind=record.kind,
                namespace=record.namespace,
                name=record.name,
                annotations={
                    key: value
                    for key, value in annotations.items()
                    if isinstance(key, str) and isinstance(value, str)
                },
            )
        )
