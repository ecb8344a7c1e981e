"""
KCP Infrastructure Store - App Configuration
============================================
Persistent infrastructure objects cloned from machine templates.
"""

from django.apps import AppConfig


class InfrastructureStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "controlplane.infrastructure_store"
    label = "kcp_infrastructure_store"
    verbose_name = "KCP Infrastructure Store"
