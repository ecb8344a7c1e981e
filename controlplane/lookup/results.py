"""
KCP Lookup — Three-Way Lookup Result
====================================
A lookup either FOUND the object, reports it NOT_FOUND, or FAILED.

NOT_FOUND is an answer, not an error. Keeping it apart from FAILED
lets callers fail open on missing objects while still surfacing
network, permission and decode failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from controlplane.lookup.models import InfrastructureObject


class LookupStatus(Enum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    FAILED = "FAILED"


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus
    obj: Optional[InfrastructureObject] = None
    error: Optional[BaseException] = None

    def __post_init__(self):
        if not isinstance(self.status, LookupStatus):
            raise ValueError("status must be a LookupStatus.")

        if self.status == LookupStatus.FOUND and self.obj is None:
            raise ValueError("FOUND result requires an object.")

        if self.status == LookupStatus.FAILED and self.error is None:
            raise ValueError("FAILED result requires an error.")

        if self.status != LookupStatus.FOUND and self.obj is not None:
            raise ValueError(f"{self.status.value} result cannot carry an object.")

    @classmethod
    def found(cls, obj: InfrastructureObject) -> LookupResult:
        return cls(status=LookupStatus.FOUND, obj=obj)

    @classmethod
    def not_found(cls) -> LookupResult:
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: BaseException) -> LookupResult:
        return cls(status=LookupStatus.FAILED, error=error)

    @property
    def is_found(self) -> bool:
        return self.status == LookupStatus.FOUND

    @property
    def is_not_found(self) -> bool:
        return self.status == LookupStatus.NOT_FOUND

    @property
    def is_failed(self) -> bool:
        return self.status == LookupStatus.FAILED
