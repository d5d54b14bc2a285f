"""Supported resource kinds and their display schema.

Each ``ResourceKind`` maps to exactly one ``ResourceDefinition``: the list
call that fetches it, the summary model that projects it, and the fixed-width
columns it renders into.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, NamedTuple

from k8s_resource_monitor.integrations.kubernetes.models import (
    ConfigMapSummary,
    DeploymentSummary,
    K8sEntityBase,
    NodeSummary,
    PodSummary,
    SecretSummary,
    ServiceSummary,
)

if TYPE_CHECKING:
    from k8s_resource_monitor.integrations.kubernetes.client import KubernetesClient


class ResourceKind(StrEnum):
    """Resource kinds the monitor can list."""

    PODS = "pods"
    DEPLOYMENTS = "deployments"
    SERVICES = "services"
    CONFIGMAPS = "configmaps"
    SECRETS = "secrets"
    NODES = "nodes"

    @classmethod
    def parse(cls, value: str) -> ResourceKind:
        """Parse a plural or singular kind name, case-insensitively.

        Raises:
            ValueError: If the value names no supported kind.
        """
        normalized = value.strip().lower()
        for kind in cls:
            if normalized in (kind.value, kind.singular):
                return kind
        raise ValueError(f"Unsupported resource type: {value}")

    @property
    def singular(self) -> str:
        return self.value[:-1]


class Column(NamedTuple):
    """A table column header and its minimum display width."""

    header: str
    width: int


ListCall = Callable[["KubernetesClient", str], Any]


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything needed to fetch, project, and render one kind."""

    kind: ResourceKind
    resource_type: str
    columns: tuple[Column, ...]
    model: type[K8sEntityBase]
    list_items: ListCall
    namespaced: bool = True

    @property
    def plural(self) -> str:
        return self.kind.value

    @property
    def headers(self) -> list[str]:
        return [column.header for column in self.columns]


RESOURCE_DEFINITIONS: dict[ResourceKind, ResourceDefinition] = {
    ResourceKind.PODS: ResourceDefinition(
        kind=ResourceKind.PODS,
        resource_type="Pod",
        columns=(
            Column("NAME", 40),
            Column("STATUS", 20),
            Column("READY", 15),
            Column("RESTARTS", 10),
            Column("AGE", 10),
        ),
        model=PodSummary,
        list_items=lambda client, ns: client.core_v1.list_namespaced_pod(namespace=ns),
    ),
    ResourceKind.DEPLOYMENTS: ResourceDefinition(
        kind=ResourceKind.DEPLOYMENTS,
        resource_type="Deployment",
        columns=(
            Column("NAME", 40),
            Column("READY", 10),
            Column("UP-TO-DATE", 10),
            Column("AVAILABLE", 10),
            Column("AGE", 10),
        ),
        model=DeploymentSummary,
        list_items=lambda client, ns: client.apps_v1.list_namespaced_deployment(namespace=ns),
    ),
    ResourceKind.SERVICES: ResourceDefinition(
        kind=ResourceKind.SERVICES,
        resource_type="Service",
        columns=(
            Column("NAME", 40),
            Column("TYPE", 20),
            Column("CLUSTER-IP", 20),
            Column("EXTERNAL-IP", 15),
            Column("AGE", 10),
        ),
        model=ServiceSummary,
        list_items=lambda client, ns: client.core_v1.list_namespaced_service(namespace=ns),
    ),
    ResourceKind.CONFIGMAPS: ResourceDefinition(
        kind=ResourceKind.CONFIGMAPS,
        resource_type="ConfigMap",
        columns=(
            Column("NAME", 40),
            Column("DATA", 15),
            Column("AGE", 10),
        ),
        model=ConfigMapSummary,
        list_items=lambda client, ns: client.core_v1.list_namespaced_config_map(namespace=ns),
    ),
    ResourceKind.SECRETS: ResourceDefinition(
        kind=ResourceKind.SECRETS,
        resource_type="Secret",
        columns=(
            Column("NAME", 40),
            Column("TYPE", 15),
            Column("DATA", 15),
            Column("AGE", 10),
        ),
        model=SecretSummary,
        list_items=lambda client, ns: client.core_v1.list_namespaced_secret(namespace=ns),
    ),
    ResourceKind.NODES: ResourceDefinition(
        kind=ResourceKind.NODES,
        resource_type="Node",
        columns=(
            Column("NAME", 40),
            Column("STATUS", 15),
            Column("ROLES", 15),
            Column("VERSION", 20),
            Column("AGE", 10),
        ),
        model=NodeSummary,
        list_items=lambda client, _ns: client.core_v1.list_node(),
        namespaced=False,
    ),
}


def get_definition(kind: ResourceKind) -> ResourceDefinition:
    """Look up the definition for a kind."""
    return RESOURCE_DEFINITIONS[kind]
