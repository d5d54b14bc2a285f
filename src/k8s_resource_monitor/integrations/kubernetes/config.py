"""Kubernetes connection configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


def default_kubeconfig_path() -> str:
    """Return ``~/.kube/config`` when a home directory exists, else ``""``.

    An empty path makes the client fall back to in-cluster configuration.
    """
    home = os.environ.get("HOME") or os.environ.get("USERPROFILE")
    if not home:
        return ""
    return str(Path(home) / ".kube" / "config")


class KubernetesConnectionConfig(BaseModel):
    """Where and how to reach the cluster."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kubeconfig: str = ""
    context: str | None = None

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str) -> str:
        """Expand ~ in kubeconfig path."""
        if not v:
            return ""
        return str(Path(v).expanduser())

    @field_validator("context")
    @classmethod
    def validate_context(cls, v: str | None) -> str | None:
        """Treat a blank context as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_env(
        cls,
        kubeconfig: str | None = None,
        context: str | None = None,
    ) -> KubernetesConnectionConfig:
        """Create configuration with environment variable overrides.

        Explicit arguments take precedence over the environment, which takes
        precedence over the defaults.

        Supported environment variables:
            KMON_KUBECONFIG: Override kubeconfig path
            KMON_CONTEXT: Override kubeconfig context
        """
        if kubeconfig is None:
            kubeconfig = os.environ.get("KMON_KUBECONFIG") or default_kubeconfig_path()
        if context is None:
            context = os.environ.get("KMON_CONTEXT")
        return cls(kubeconfig=kubeconfig, context=context)
