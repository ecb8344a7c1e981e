"""
KCP Machines — Label Selectors
==============================
Equality and existence requirements over a label map, the subset of
Kubernetes label selectors used to pick control-plane machines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class LabelSelector:
    match_labels: tuple[tuple[str, str], ...] = ()
    match_exists: tuple[str, ...] = ()

    def matches(self, labels: Mapping[str, str] | None) -> bool:
        labels = labels or {}
        for key, value in self.match_labels:
            if labels.get(key) != value:
                return False
        for key in self.match_exists:
            if key not in labels:
                return False
        return True

    def as_query(self) -> dict[str, object]:
        """Serialize for list calls against the API server."""
        return {
            "matchLabels": dict(self.match_labels),
            "matchExpressions": [
                {"key": key, "operator": "Exists"} for key in self.match_exists
            ],
        }
