"""
KCP Machines — Public API
=========================
Read-only models of control-plane machines, their owner and the
objects they reference.
"""

from controlplane.machines.collection import MachineCollection
from controlplane.machines.models import ControlPlane, Machine
from controlplane.machines.references import (
    GroupVersionKind,
    ObjectReference,
    OwnerReference,
    split_api_version,
)
from controlplane.machines.selectors import LabelSelector

__all__ = [
    "Machine",
    "ControlPlane",
    "MachineCollection",
    "GroupVersionKind",
    "ObjectReference",
    "OwnerReference",
    "LabelSelector",
    "split_api_version",
]
