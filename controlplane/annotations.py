"""
KCP — Well-Known Annotation and Label Keys
==========================================
Keys written by the cluster API machinery and read by machine filters.
"""

from __future__ import annotations


# ══════════════════════════════════════════════════════════════
# PROVENANCE ANNOTATIONS (set on cloned infrastructure objects)
# ══════════════════════════════════════════════════════════════

TEMPLATE_CLONED_FROM_NAME_ANNOTATION = "cluster.x-k8s.io/cloned-from-name"
TEMPLATE_CLONED_FROM_GROUP_KIND_ANNOTATION = "cluster.x-k8s.io/cloned-from-groupkind"


# ══════════════════════════════════════════════════════════════
# MACHINE LABELS
# ══════════════════════════════════════════════════════════════

CLUSTER_NAME_LABEL = "cluster.x-k8s.io/cluster-name"
MACHINE_CONTROL_PLANE_LABEL = "cluster.x-k8s.io/control-plane"
