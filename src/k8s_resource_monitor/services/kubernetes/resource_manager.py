"""Kubernetes resource listing manager.

Fetches the current items of one resource kind and projects them into
display summaries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import structlog

from k8s_resource_monitor.core.resources import ResourceKind, get_definition

if TYPE_CHECKING:
    from k8s_resource_monitor.integrations.kubernetes.client import KubernetesClient
    from k8s_resource_monitor.integrations.kubernetes.models import K8sEntityBase

logger = structlog.get_logger()


class ResourceManager:
    """Lists any supported resource kind through one cluster client."""

    def __init__(self, client: KubernetesClient) -> None:
        self._client = client
        self._log = logger.bind(entity="resource")

    def list_resources(self, kind: ResourceKind, namespace: str) -> list[K8sEntityBase]:
        """List resources of a kind.

        Args:
            kind: Resource kind to list.
            namespace: Target namespace, ignored for cluster-scoped kinds.

        Returns:
            List of resource summaries in API order.

        Raises:
            KubernetesError: If the list call fails.
        """
        definition = get_definition(kind)
        ns = namespace if definition.namespaced else None
        self._log.debug("listing_resources", kind=kind.value, namespace=ns)
        try:
            result = definition.list_items(self._client, namespace)
        except Exception as e:
            self._raise_translated(e, definition.resource_type, ns)

        items = [definition.model.from_k8s_object(item) for item in result.items or []]
        self._log.debug("listed_resources", kind=kind.value, count=len(items))
        return items

    def _raise_translated(
        self,
        e: Exception,
        resource_type: str,
        namespace: str | None,
    ) -> NoReturn:
        """Re-raise a failed list call as a KubernetesError subclass."""
        self._log.debug(
            "list_failed",
            resource_type=resource_type,
            namespace=namespace,
            error_type=type(e).__name__,
        )
        raise self._client.translate_api_exception(
            e,
            resource_type=resource_type,
            namespace=namespace,
        ) from e
