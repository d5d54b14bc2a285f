"""Kubernetes workload resource display models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from k8s_resource_monitor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)


class ContainerStatus(K8sEntityBase):
    """Container status within a pod."""

    _entity_name: ClassVar[str] = "container"

    ready: bool = Field(default=False, description="Whether container is ready")
    restart_count: int = Field(default=0, description="Number of restarts")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ContainerStatus:
        """Create from a kubernetes V1ContainerStatus object."""
        return cls(
            name=getattr(obj, "name", "") or "",
            ready=getattr(obj, "ready", False) is True,
            restart_count=getattr(obj, "restart_count", 0) or 0,
        )


class PodSummary(K8sEntityBase):
    """Pod display model."""

    _entity_name: ClassVar[str] = "pod"

    phase: str = Field(default="", description="Pod phase")
    restarts: int = Field(default=0, description="Total container restarts")
    ready_count: int = Field(default=0, description="Number of ready containers")
    total_count: int = Field(default=0, description="Total number of containers")
    containers: list[ContainerStatus] = Field(
        default_factory=list, description="Container statuses"
    )

    @classmethod
    def from_k8s_object(cls, obj: Any) -> PodSummary:
        """Create from a kubernetes V1Pod object."""
        container_statuses = _safe_get(obj, "status", "container_statuses") or []
        containers = [ContainerStatus.from_k8s_object(cs) for cs in container_statuses]

        # Total comes from the spec; statuses may lag behind for pending pods
        spec_containers = _safe_get(obj, "spec", "containers") or []

        return cls(
            **_metadata_fields(obj),
            phase=_safe_get(obj, "status", "phase", default=""),
            restarts=sum(c.restart_count for c in containers),
            ready_count=sum(1 for c in containers if c.ready),
            total_count=len(spec_containers),
            containers=containers,
        )

    @property
    def ready(self) -> str:
        """Ready containers over total containers, e.g. ``"1/2"``."""
        return f"{self.ready_count}/{self.total_count}"

    def to_row(self, now: datetime) -> list[str]:
        return [self.name, self.phase, self.ready, str(self.restarts), self.age(now)]


class DeploymentSummary(K8sEntityBase):
    """Deployment display model.

    ``replicas`` is required: the API server always defaults
    ``spec.replicas``, so a deployment without it is rejected.
    """

    _entity_name: ClassVar[str] = "deployment"

    replicas: int = Field(description="Desired replicas")
    ready_replicas: int = Field(default=0, description="Ready replicas")
    available_replicas: int = Field(default=0, description="Available replicas")
    updated_replicas: int = Field(default=0, description="Updated replicas")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> DeploymentSummary:
        """Create from a kubernetes V1Deployment object.

        Raises:
            ValueError: If ``spec.replicas`` is missing.
        """
        replicas = _safe_get(obj, "spec", "replicas")
        if replicas is None:
            name = _safe_get(obj, "metadata", "name", default="")
            raise ValueError(f"Deployment '{name}' has no spec.replicas")

        return cls(
            **_metadata_fields(obj),
            replicas=replicas,
            ready_replicas=_safe_get(obj, "status", "ready_replicas", default=0) or 0,
            available_replicas=_safe_get(obj, "status", "available_replicas", default=0) or 0,
            updated_replicas=_safe_get(obj, "status", "updated_replicas", default=0) or 0,
        )

    @property
    def ready(self) -> str:
        """Ready replicas over desired replicas, e.g. ``"2/3"``."""
        return f"{self.ready_replicas}/{self.replicas}"

    def to_row(self, now: datetime) -> list[str]:
        return [
            self.name,
            self.ready,
            str(self.updated_replicas),
            str(self.available_replicas),
            self.age(now),
        ]
