"""
KCP Lookup - Public API
=======================
Narrow lookup interface for infrastructure objects referenced by machines.
DbObjectLookup is imported from controlplane.lookup.db_provider directly
so this package stays importable without Django configured.
"""

from controlplane.lookup.models import InfrastructureObject
from controlplane.lookup.provider import InMemoryObjectLookup, ObjectLookup
from controlplane.lookup.results import LookupResult, LookupStatus

__all__ = [
    "InfrastructureObject",
    "ObjectLookup",
    "InMemoryObjectLookup",
    "LookupResult",
    "LookupStatus",
]
