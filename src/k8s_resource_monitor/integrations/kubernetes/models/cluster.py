"""Kubernetes cluster-level resource display models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from k8s_resource_monitor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)

ROLE_LABEL = "kubernetes.io/role"
MASTER_ROLE_LABEL = "node-role.kubernetes.io/master"
CONTROL_PLANE_ROLE_LABEL = "node-role.kubernetes.io/control-plane"
NO_ROLES = "<none>"


def _node_status(conditions: list[Any]) -> str:
    """Derive node readiness from the first ``Ready`` condition.

    A node that reports no ``Ready`` condition at all is shown as Ready.
    """
    for cond in conditions:
        if getattr(cond, "type", None) == "Ready":
            return "Ready" if getattr(cond, "status", None) == "True" else "NotReady"
    return "Ready"


def _node_roles(labels: dict[str, str]) -> str:
    """Resolve the display role; the explicit role label wins."""
    if ROLE_LABEL in labels:
        return labels[ROLE_LABEL]
    if labels.get(MASTER_ROLE_LABEL) == "true":
        return "master"
    if labels.get(CONTROL_PLANE_ROLE_LABEL) == "true":
        return "control-plane"
    return NO_ROLES


class NodeSummary(K8sEntityBase):
    """Node display model."""

    _entity_name: ClassVar[str] = "node"

    status: str = Field(default="Ready", description="Node status")
    roles: str = Field(default=NO_ROLES, description="Node role")
    version: str = Field(default="", description="Kubelet version")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> NodeSummary:
        """Create from a kubernetes V1Node object."""
        labels = _safe_get(obj, "metadata", "labels") or {}
        conditions = _safe_get(obj, "status", "conditions") or []

        return cls(
            **_metadata_fields(obj),
            status=_node_status(conditions),
            roles=_node_roles(dict(labels)),
            version=_safe_get(obj, "status", "node_info", "kubelet_version", default=""),
        )

    def to_row(self, now: datetime) -> list[str]:
        return [self.name, self.status, self.roles, self.version, self.age(now)]
