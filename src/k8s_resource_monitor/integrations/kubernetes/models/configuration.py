"""Kubernetes configuration resource display models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from k8s_resource_monitor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
)


class ConfigMapSummary(K8sEntityBase):
    """ConfigMap display model."""

    _entity_name: ClassVar[str] = "configmap"

    data_keys: list[str] = Field(default_factory=list, description="Data key names")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ConfigMapSummary:
        """Create from a kubernetes V1ConfigMap object."""
        data = getattr(obj, "data", None) or {}

        return cls(
            **_metadata_fields(obj),
            data_keys=sorted(data.keys()),
        )

    def to_row(self, now: datetime) -> list[str]:
        return [self.name, str(len(self.data_keys)), self.age(now)]


class SecretSummary(K8sEntityBase):
    """Secret display model.

    SECURITY: Never includes actual secret data values. Only key names are exposed.
    """

    _entity_name: ClassVar[str] = "secret"

    type: str = Field(default="", description="Secret type")
    data_keys: list[str] = Field(default_factory=list, description="Data key names (values hidden)")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> SecretSummary:
        """Create from a kubernetes V1Secret object.

        Only extracts key names - never includes secret values.
        """
        data = getattr(obj, "data", None) or {}

        return cls(
            **_metadata_fields(obj),
            type=getattr(obj, "type", "") or "",
            data_keys=sorted(data.keys()),
        )

    def to_row(self, now: datetime) -> list[str]:
        return [self.name, self.type, str(len(self.data_keys)), self.age(now)]
