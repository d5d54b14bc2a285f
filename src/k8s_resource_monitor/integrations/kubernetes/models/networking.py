"""Kubernetes networking resource display models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from k8s_resource_monitor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)

NO_EXTERNAL_IP = "<none>"


def _external_address(lb_ingress: list[Any]) -> str:
    """Pick the first load-balancer ingress IP, then its hostname."""
    if not lb_ingress:
        return NO_EXTERNAL_IP
    first = lb_ingress[0]
    return getattr(first, "ip", None) or getattr(first, "hostname", None) or NO_EXTERNAL_IP


class ServiceSummary(K8sEntityBase):
    """Service display model."""

    _entity_name: ClassVar[str] = "service"

    type: str = Field(default="", description="Service type")
    cluster_ip: str = Field(default="", description="Cluster IP")
    external_ip: str = Field(default=NO_EXTERNAL_IP, description="External IP or hostname")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ServiceSummary:
        """Create from a kubernetes V1Service object."""
        lb_ingress = _safe_get(obj, "status", "load_balancer", "ingress") or []

        return cls(
            **_metadata_fields(obj),
            type=_safe_get(obj, "spec", "type", default=""),
            cluster_ip=_safe_get(obj, "spec", "cluster_ip", default=""),
            external_ip=_external_address(lb_ingress),
        )

    def to_row(self, now: datetime) -> list[str]:
        return [self.name, self.type, self.cluster_ip, self.external_ip, self.age(now)]
