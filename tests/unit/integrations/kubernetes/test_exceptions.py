"""Unit tests for Kubernetes exceptions."""

from __future__ import annotations

import pytest

from k8s_resource_monitor.integrations.kubernetes import (
    ErrorKind,
    KubernetesApiError,
    KubernetesConnectionError,
    KubernetesError,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesError:
    """Tests for KubernetesError."""

    def test_str_with_location(self) -> None:
        error = KubernetesError(
            "Forbidden", status_code=403, resource_type="Pod", namespace="default"
        )

        assert str(error) == "Forbidden (status: 403) [Pod in default]"

    def test_str_message_only(self) -> None:
        assert str(KubernetesError("timed out")) == "timed out"

    def test_cluster_scoped_location(self) -> None:
        error = KubernetesError("Forbidden", resource_type="Node")

        assert str(error) == "Forbidden [Node]"

    def test_kind(self) -> None:
        assert KubernetesError("x").kind is ErrorKind.OTHER


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesApiError:
    """Tests for KubernetesApiError."""

    def test_message_is_status_message(self) -> None:
        error = KubernetesApiError(status_message="quota exceeded", reason="Forbidden")

        assert error.kind is ErrorKind.API_STATUS
        assert error.message == "quota exceeded"

    def test_message_falls_back_to_reason(self) -> None:
        error = KubernetesApiError(status_message="", reason="NotFound")

        assert error.message == "NotFound"
        assert error.status_message == ""

    def test_generic_message(self) -> None:
        assert KubernetesApiError(status_message="").message == "Kubernetes API error"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesConnectionError:
    """Tests for KubernetesConnectionError."""

    def test_defaults(self) -> None:
        error = KubernetesConnectionError()

        assert error.message == "Failed to connect to Kubernetes cluster"
        assert error.original_error is None
        assert isinstance(error, KubernetesError)

    def test_original_error(self) -> None:
        cause = OSError("missing")

        assert KubernetesConnectionError(original_error=cause).original_error is cause
