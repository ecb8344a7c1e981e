"""
KCP Context — Public API
========================
Cancellable, deadline-aware request scope passed to filters that
perform lookups.
"""

from controlplane.context.request_context import (
    DEADLINE_EXCEEDED,
    REQUEST_CANCELLED,
    ContextCancelled,
    RequestContext,
)

__all__ = [
    "RequestContext",
    "ContextCancelled",
    "REQUEST_CANCELLED",
    "DEADLINE_EXCEEDED",
]
