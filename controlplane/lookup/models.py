"""
KCP Lookup — Infrastructure Object Snapshot
===========================================
Generic structured object returned by the lookup collaborator.
Only identity and annotations are modelled; filters read nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from controlplane.machines.references import GroupVersionKind


@dataclass(frozen=True)
class InfrastructureObject:
    api_version: str
    kind: str
    namespace: str
    name: str
    annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.kind or not isinstance(self.kind, str):
            raise ValueError("kind must be a non-empty string.")

        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        annotations = self.annotations or {}
        if not isinstance(annotations, Mapping):
            raise ValueError("annotations must be a mapping of str to str.")
        object.__setattr__(
            self, "annotations", MappingProxyType(dict(annotations))
        )

    def group_version_kind(self) -> GroupVersionKind:
        return GroupVersionKind.from_api_version(self.api_version, self.kind)

    def lookup_key(self) -> tuple[str, str, str, str]:
        gvk = self.group_version_kind()
        return (gvk.group, gvk.kind, self.namespace, self.name)
