"""
KCP Machines — Object References
================================
Identifiers resolvable through the lookup collaborator.

apiVersion strings follow the Kubernetes convention:
    "generic.io/v1"  → group "generic.io", version "v1"
    "v1"             → core group "", version "v1"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GroupVersionKind:
    group: str
    version: str
    kind: str

    def __post_init__(self):
        if not self.kind or not isinstance(self.kind, str):
            raise ValueError("kind must be a non-empty string.")

    @classmethod
    def from_api_version(cls, api_version: str, kind: str) -> GroupVersionKind:
        group, version = split_api_version(api_version)
        return cls(group=group, version=version, kind=kind)

    @property
    def api_version(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def group_kind(self) -> str:
        """
        Render as "Kind.group", or just "Kind" for the core group.

        The version is deliberately excluded: a template keeps its
        identity when re-served under a new API version.
        """
        if not self.group:
            return self.kind
        return f"{self.kind}.{self.group}"


def split_api_version(api_version: str) -> tuple[str, str]:
    """Split an apiVersion into (group, version)."""
    if not api_version:
        return "", ""
    if "/" not in api_version:
        return "", api_version
    group, _, version = api_version.partition("/")
    return group, version


@dataclass(frozen=True)
class ObjectReference:
    """
    Reference to a namespaced object.

    namespace may be empty; callers resolve it against the owning
    control plane's namespace.
    """

    api_version: str
    kind: str
    name: str
    namespace: str = ""

    def __post_init__(self):
        if not self.kind or not isinstance(self.kind, str):
            raise ValueError("kind must be a non-empty string.")

        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

    def group_version_kind(self) -> GroupVersionKind:
        return GroupVersionKind.from_api_version(self.api_version, self.kind)

    def resolve_namespace(self, default: Optional[str]) -> str:
        return self.namespace or (default or "")


@dataclass(frozen=True)
class OwnerReference:
    api_version: str
    kind: str
    name: str
    uid: str = ""
    controller: bool = False
