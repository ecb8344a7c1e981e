"""
KCP Context — RequestContext
============================
Scope of a single reconcile request.

A context is done once it has been cancelled explicitly, once its
deadline has passed, or once its parent is done. Work that blocks on
an external lookup checks the context first and aborts instead of
guessing a result.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Optional

from controlplane.time.clock import Clock, get_default_clock


REQUEST_CANCELLED = "context canceled"
DEADLINE_EXCEEDED = "context deadline exceeded"


class ContextCancelled(Exception):
    """Raised when work is attempted on a done context."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class RequestContext:
    """
    Cancellable request scope.

    Thread-safe: cancel() may be called from any thread while another
    thread is evaluating filters.

    Usage:
        ctx = RequestContext.background().with_timeout(10)
        ...
        ctx.cancel()
    """

    def __init__(
        self,
        deadline: Optional[datetime] = None,
        parent: Optional[RequestContext] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if deadline is not None and deadline.tzinfo is None:
            raise ValueError("deadline must be a timezone-aware datetime.")
        self._deadline = deadline
        self._parent = parent
        self._clock = clock
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> RequestContext:
        """Root context: never done unless cancelled."""
        return cls()

    def with_timeout(self, seconds: float) -> RequestContext:
        now = self._now()
        return self.with_deadline(now + timedelta(seconds=seconds))

    def with_deadline(self, deadline: datetime) -> RequestContext:
        parent_deadline = self.deadline
        if parent_deadline is not None and parent_deadline < deadline:
            deadline = parent_deadline
        return RequestContext(deadline=deadline, parent=self, clock=self._clock)

    @property
    def deadline(self) -> Optional[datetime]:
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    def error(self) -> Optional[str]:
        """Reason the context is done, or None while it is live."""
        if self._cancelled.is_set():
            return REQUEST_CANCELLED
        if self._parent is not None:
            parent_error = self._parent.error()
            if parent_error is not None:
                return parent_error
        if self._deadline is not None and self._now() >= self._deadline:
            return DEADLINE_EXCEEDED
        return None

    def is_done(self) -> bool:
        return self.error() is not None

    def raise_if_done(self) -> None:
        reason = self.error()
        if reason is not None:
            raise ContextCancelled(reason)

    def _now(self) -> datetime:
        clock = self._clock or get_default_clock()
        return clock.now_utc()
