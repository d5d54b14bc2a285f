"""Kubernetes integration - API client and configuration models."""

from k8s_resource_monitor.integrations.kubernetes.client import KubernetesClient
from k8s_resource_monitor.integrations.kubernetes.config import (
    KubernetesConnectionConfig,
    default_kubeconfig_path,
)
from k8s_resource_monitor.integrations.kubernetes.exceptions import (
    ErrorKind,
    KubernetesApiError,
    KubernetesConnectionError,
    KubernetesError,
)

__all__ = [
    "ErrorKind",
    "KubernetesApiError",
    "KubernetesClient",
    "KubernetesConnectionConfig",
    "KubernetesConnectionError",
    "KubernetesError",
    "default_kubeconfig_path",
]
