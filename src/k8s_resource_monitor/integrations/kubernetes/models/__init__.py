"""Kubernetes resource display models."""

from k8s_resource_monitor.integrations.kubernetes.models.base import K8sEntityBase
from k8s_resource_monitor.integrations.kubernetes.models.cluster import NodeSummary
from k8s_resource_monitor.integrations.kubernetes.models.configuration import (
    ConfigMapSummary,
    SecretSummary,
)
from k8s_resource_monitor.integrations.kubernetes.models.networking import ServiceSummary
from k8s_resource_monitor.integrations.kubernetes.models.workloads import (
    ContainerStatus,
    DeploymentSummary,
    PodSummary,
)

__all__ = [
    "ConfigMapSummary",
    "ContainerStatus",
    "DeploymentSummary",
    "K8sEntityBase",
    "NodeSummary",
    "PodSummary",
    "SecretSummary",
    "ServiceSummary",
]
