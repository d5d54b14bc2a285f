"""Configuration management with Pydantic validation."""

from k8s_resource_monitor.core.config.models import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_NAMESPACE,
    DEFAULT_RESOURCE,
    RefreshConfig,
)

__all__ = [
    "DEFAULT_INTERVAL_SECONDS",
    "DEFAULT_NAMESPACE",
    "DEFAULT_RESOURCE",
    "RefreshConfig",
]
