"""
KCP Infrastructure Store - Relational Infrastructure Objects
============================================================
One row per infrastructure object, addressed by group, kind,
namespace and name. The served version is kept for display only.
"""

from __future__ import annotations

from django.db import models


class InfrastructureObjectRecord(models.Model):
    api_version = models.CharField(max_length=255)
    group = models.CharField(max_length=253, blank=True, default="")
    kind = models.CharField(max_length=63)
    namespace = models.CharField(max_length=63)
    name = models.CharField(max_length=253)
    annotations = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "kcp_infrastructure_objects"
        ordering = ["group", "kind", "namespace", "name", "id"]
        indexes = [
            models.Index(fields=["namespace", "name"], name="idx_infra_ns_name"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["group", "kind", "namespace", "name"],
                name="uq_infra_object_identity",
            ),
        ]

    def __str__(self) -> str:
        if self.group:
            return f"{self.kind}.{self.group} {self.namespace}/{self.name}"
        return f"{self.kind} {self.namespace}/{self.name}"
