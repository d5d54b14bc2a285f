"""Runtime configuration for the refresh loop."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from k8s_resource_monitor.core.resources import ResourceKind

DEFAULT_NAMESPACE = "default"
DEFAULT_RESOURCE = ResourceKind.DEPLOYMENTS
DEFAULT_INTERVAL_SECONDS = 5


class RefreshConfig(BaseModel):
    """Immutable settings for one monitor run.

    ``namespace`` is ignored for cluster-scoped kinds such as nodes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    resource: ResourceKind = DEFAULT_RESOURCE
    namespace: str = DEFAULT_NAMESPACE
    watch: bool = False
    interval: int = DEFAULT_INTERVAL_SECONDS
    output_format: Literal["table", "json", "yaml"] = "table"

    @field_validator("resource", mode="before")
    @classmethod
    def parse_resource(cls, v: object) -> object:
        """Accept plural or singular kind names."""
        if isinstance(v, str) and not isinstance(v, ResourceKind):
            return ResourceKind.parse(v)
        return v

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Fall back to the default namespace when blank."""
        return v.strip() or DEFAULT_NAMESPACE

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        """Validate interval is positive."""
        if v <= 0:
            raise ValueError("interval must be positive")
        return v
