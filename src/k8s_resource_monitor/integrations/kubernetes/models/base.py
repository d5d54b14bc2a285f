"""Base models for Kubernetes resource display."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from k8s_resource_monitor.core.age import format_age


class K8sEntityBase(BaseModel):
    """Base class for all Kubernetes display models.

    Subclasses implement ``from_k8s_object`` to pull what they need out of a
    kubernetes SDK object, and ``to_row`` to turn it into display cells.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    creation_timestamp: datetime | None = Field(default=None, description="Creation time")
    labels: dict[str, str] | None = Field(default=None, description="Resource labels")

    _entity_name: ClassVar[str] = "entity"

    @classmethod
    def from_k8s_object(cls, obj: Any) -> K8sEntityBase:
        """Create from a kubernetes SDK object."""
        raise NotImplementedError

    def age(self, now: datetime) -> str:
        """Human-readable age string relative to ``now``."""
        return format_age(self.creation_timestamp, now)

    def to_row(self, now: datetime) -> list[str]:
        """Project the resource into display cells matching its column headers."""
        raise NotImplementedError


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes on kubernetes SDK objects."""
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default


def _get_timestamp(obj: Any) -> datetime | None:
    """Extract a datetime from a datetime or an RFC 3339 string."""
    if obj is None:
        return None
    if isinstance(obj, datetime):
        return obj
    if isinstance(obj, str):
        try:
            return datetime.fromisoformat(obj.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _get_labels(obj: Any) -> dict[str, str] | None:
    """Extract labels dict, returning None if empty."""
    labels = _safe_get(obj, "metadata", "labels")
    return dict(labels) if labels else None


def _metadata_fields(obj: Any) -> dict[str, Any]:
    """Common metadata keyword arguments for summary constructors."""
    return {
        "name": _safe_get(obj, "metadata", "name", default=""),
        "namespace": _safe_get(obj, "metadata", "namespace"),
        "creation_timestamp": _get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
        "labels": _get_labels(obj),
    }
