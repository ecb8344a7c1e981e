"""
KCP Machine Filters — Exceptions
================================
Raised when a filter could not be evaluated at all.

These are evaluation failures, NOT verdicts. A filter that returns
False has decided; a filter that raises has not. Callers must not
treat one as the other.
"""

from __future__ import annotations

from typing import Optional

from controlplane.machines.references import ObjectReference


class MachineFilterError(Exception):
    """Base error for machine filter evaluation."""
    pass


class InfrastructureLookupError(MachineFilterError):
    """Fetching a machine's infrastructure object failed."""

    def __init__(
        self,
        reference: ObjectReference,
        namespace: str,
        cause: Optional[BaseException],
    ):
        self.reference = reference
        self.namespace = namespace
        self.cause = cause
        super().__init__(
            f"Failed to get {reference.group_version_kind().group_kind()} "
            f"'{namespace}/{reference.name}': "
            f"{type(cause).__name__}: {cause}"
        )


class ContextCancelledError(MachineFilterError):
    """The request context was done before the filter could decide."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Machine filter aborted: {reason}.")
