"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with explicit connection
ownership, lazy API group initialization, and consistent error translation.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog
import yaml

from k8s_resource_monitor.integrations.kubernetes.exceptions import (
    KubernetesApiError,
    KubernetesConnectionError,
    KubernetesError,
)

if TYPE_CHECKING:
    from kubernetes.client import ApiClient, AppsV1Api, CoreV1Api

    from k8s_resource_monitor.integrations.kubernetes.config import (
        KubernetesConnectionConfig,
    )

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client bound to one cluster connection.

    The connection is loaded into a private ``Configuration`` and ``ApiClient``
    instead of the library-wide default, so every API group built from this
    client talks to the same cluster.

    Example:
        ```python
        from k8s_resource_monitor.integrations.kubernetes import (
            KubernetesClient,
            KubernetesConnectionConfig,
        )

        with KubernetesClient(KubernetesConnectionConfig.from_env()) as client:
            nodes = client.core_v1.list_node()
            print(f"Cluster has {len(nodes.items)} nodes")
        ```
    """

    def __init__(self, connection_config: KubernetesConnectionConfig) -> None:
        """Initialize Kubernetes client from connection config.

        Args:
            connection_config: Kubeconfig path and context to load.

        Raises:
            KubernetesConnectionError: If no usable configuration is found.
        """
        self._config = connection_config
        self._current_context: str | None = None
        self._api_client: ApiClient | None = None

        # Lazy-loaded API group instances
        self._core_v1: CoreV1Api | None = None
        self._apps_v1: AppsV1Api | None = None

        self._load_config()

        logger.info(
            "Kubernetes client initialized",
            context=self._current_context,
            kubeconfig=self._config.kubeconfig or None,
        )

    def _load_config(self) -> None:
        """Load Kubernetes configuration from kubeconfig or in-cluster.

        In-cluster credentials are used only when no kubeconfig path is set.
        A kubeconfig that is given but unusable is a fatal error.
        """
        from kubernetes import config
        from kubernetes.client import ApiClient, Configuration
        from kubernetes.config import ConfigException

        configuration = Configuration()
        kubeconfig_path = self._config.kubeconfig

        if kubeconfig_path:
            try:
                config.load_kube_config(
                    config_file=kubeconfig_path,
                    context=self._config.context,
                    client_configuration=configuration,
                )
            except (ConfigException, OSError, yaml.YAMLError) as e:
                raise KubernetesConnectionError(
                    message=f"Cannot load kubeconfig {kubeconfig_path}",
                    original_error=e,
                ) from e
            self._current_context = self._config.context or "current-context"
            logger.debug(
                "loaded_kubeconfig",
                context=self._config.context,
                kubeconfig=kubeconfig_path,
            )
        else:
            try:
                config.load_incluster_config(client_configuration=configuration)
            except ConfigException as e:
                raise KubernetesConnectionError(
                    message="Cannot load Kubernetes configuration. "
                    "No kubeconfig path is set and not running inside a cluster.",
                    original_error=e,
                ) from e
            self._current_context = "in-cluster"
            logger.debug("loaded_incluster_config")

        self._invalidate_api_cache()
        self._api_client = ApiClient(configuration)

    def _invalidate_api_cache(self) -> None:
        """Clear cached API group instances."""
        self._core_v1 = None
        self._apps_v1 = None

    # =========================================================================
    # Lazy API Group Accessors
    # =========================================================================

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (pods, services, secrets, configmaps, nodes)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api(self._api_client)
        return self._core_v1

    @property
    def apps_v1(self) -> AppsV1Api:
        """Get AppsV1Api instance (deployments)."""
        if self._apps_v1 is None:
            from kubernetes.client import AppsV1Api

            self._apps_v1 = AppsV1Api(self._api_client)
        return self._apps_v1

    def get_current_context(self) -> str:
        """Get the current active context name.

        Returns:
            The context name, or 'in-cluster' if running inside a pod.
        """
        return self._current_context or "unknown"

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes exception to a custom exception.

        An ``ApiException`` whose body is a ``Status`` object becomes a
        ``KubernetesApiError`` carrying the server message. Everything else
        becomes a plain ``KubernetesError``.

        Args:
            e: The original exception.
            resource_type: Type of resource being operated on.
            namespace: Namespace of the resource.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e) or type(e).__name__,
                resource_type=resource_type,
                namespace=namespace,
            )

        status = _decode_status(e.body)
        if status is not None:
            return KubernetesApiError(
                status_message=str(status.get("message") or ""),
                status_code=e.status,
                reason=status.get("reason"),
                resource_type=resource_type,
                namespace=namespace,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {e.status}",
            status_code=e.status,
            resource_type=resource_type,
            namespace=namespace,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        self._invalidate_api_cache()
        if self._api_client is not None:
            self._api_client.close()
            self._api_client = None
        logger.debug("Kubernetes client closed")

    def __enter__(self) -> KubernetesClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()


def _decode_status(body: Any) -> dict[str, Any] | None:
    """Decode an ApiException body into a Status dict, if it is one."""
    if not body:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return None
    if isinstance(data, dict) and data.get("kind") == "Status":
        return data
    return None
