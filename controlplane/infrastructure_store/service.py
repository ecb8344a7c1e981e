"""
KCP Infrastructure Store - Service Layer
========================================
Writes used by bootstrap and tests. Filters never write.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from django.db import transaction

from controlplane.infrastructure_store.models import InfrastructureObjectRecord
from controlplane.machines.references import split_api_version

logger = logging.getLogger("kcp.infrastructure_store")


def _clean_string(value: Any, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a non-empty string.")
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{field_name} must be a non-empty string.")
    return cleaned


def _clean_annotations(annotations: Mapping[str, str] | None) -> dict[str, str]:
    if annotations is None:
        return {}
    if not isinstance(annotations, Mapping):
        raise ValueError("annotations must be a mapping of str to str.")
    cleaned: dict[str, str] = {}
    for key, value in annotations.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError("annotations must be a mapping of str to str.")
        cleaned[key] = value
    return cleaned


def record_infrastructure_object(
    *,
    api_version: str,
    kind: str,
    namespace: str,
    name: str,
    annotations: Mapping[str, str] | None = None,
) -> InfrastructureObjectRecord:
    """Create or replace the stored snapshot of one infrastructure object."""
    api_version = _clean_string(api_version, field_name="api_version")
    kind = _clean_string(kind, field_name="kind")
    namespace = _clean_string(namespace, field_name="namespace")
    name = _clean_string(name, field_name="name")
    group, _ = split_api_version(api_version)

    with transaction.atomic():
        record, created = InfrastructureObjectRecord.objects.update_or_create(
            group=group,
            kind=kind,
            namespace=namespace,
            name=name,
            defaults={
                "api_version": api_version,
                "annotations": _clean_annotations(annotations),
            },
        )

    logger.debug(
        "%s infrastructure object %s.",
        "Recorded" if created else "Updated",
        record,
    )
    return record


def remove_infrastructure_object(
    *,
    api_version: str,
    kind: str,
    namespace: str,
    name: str,
) -> bool:
    """Delete a stored object. Returns False if nothing was stored."""
    group, _ = split_api_version(api_version)
    deleted, _ = InfrastructureObjectRecord.objects.filter(
        group=group,
        kind=kind,
        namespace=namespace,
        name=name,
    ).delete()
    return deleted > 0
