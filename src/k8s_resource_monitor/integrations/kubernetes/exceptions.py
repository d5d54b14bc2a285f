"""Kubernetes integration custom exceptions."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a failed Kubernetes call.

    API_STATUS means the API server answered with a structured ``Status``
    payload. OTHER covers transport failures and anything else.
    """

    API_STATUS = "api_status"
    OTHER = "other"


class KubernetesError(Exception):
    """Base exception for Kubernetes operations.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from Kubernetes API (if applicable).
        resource_type: Type of resource involved (e.g., "Pod", "Deployment").
        namespace: Namespace of the resource (if applicable).
        kind: Whether the error carries a server status payload.
    """

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesError.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code from Kubernetes API.
            resource_type: Type of resource involved.
            namespace: Namespace of the resource.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.namespace = namespace

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.resource_type:
            loc = f"[{self.resource_type}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)


class KubernetesApiError(KubernetesError):
    """Exception raised when the API server rejects a request with a Status.

    ``status_message`` is the server-supplied ``Status.message`` and is shown
    to the user verbatim.
    """

    kind = ErrorKind.API_STATUS

    def __init__(
        self,
        status_message: str,
        status_code: int | None = None,
        reason: str | None = None,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesApiError.

        Args:
            status_message: Message field of the server Status object.
            status_code: HTTP status code of the response.
            reason: Machine-readable Status reason (e.g., "Forbidden").
            resource_type: Type of resource involved.
            namespace: Namespace of the resource.
        """
        super().__init__(
            message=status_message or reason or "Kubernetes API error",
            status_code=status_code,
            resource_type=resource_type,
            namespace=namespace,
        )
        self.status_message = status_message
        self.reason = reason


class KubernetesConnectionError(KubernetesError):
    """Exception raised when connection to a Kubernetes cluster fails.

    This includes kubeconfig issues and missing in-cluster credentials.
    """

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize KubernetesConnectionError.

        Args:
            message: Human-readable error message.
            original_error: The original exception that caused this error.
        """
        super().__init__(message=message)
        self.original_error = original_error
