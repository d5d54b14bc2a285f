"""User-facing messages for failed fetches."""

from __future__ import annotations

from k8s_resource_monitor.integrations.kubernetes.exceptions import (
    ErrorKind,
    KubernetesError,
)


def classify_error(error: Exception) -> str:
    """Return the message to show for a failed fetch.

    A server Status payload wins and its message is returned verbatim.
    Any other failure falls back to its generic description.
    """
    if not isinstance(error, KubernetesError):
        return str(error) or type(error).__name__

    if error.kind is ErrorKind.API_STATUS:
        status_message = getattr(error, "status_message", "")
        if status_message:
            return status_message
    return error.message
