"""Unit tests for Kubernetes configuration resource models."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from k8s_resource_monitor.integrations.kubernetes.models.configuration import (
    ConfigMapSummary,
    SecretSummary,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestConfigMapSummary:
    """Test ConfigMapSummary model."""

    def test_data_count(self, k8s_object: Callable[..., MagicMock]) -> None:
        """DATA counts the key/value entries."""
        obj = k8s_object("app-config", creation_timestamp=NOW - timedelta(seconds=30))
        obj.data = {"b": "2", "a": "1", "c": "3"}

        cm = ConfigMapSummary.from_k8s_object(obj)

        assert cm.data_keys == ["a", "b", "c"]
        assert cm.to_row(NOW) == ["app-config", "3", "30s"]

    def test_no_data(self, k8s_object: Callable[..., MagicMock]) -> None:
        """A configmap without data shows zero entries."""
        obj = k8s_object("empty")
        obj.data = None

        assert ConfigMapSummary.from_k8s_object(obj).to_row(NOW)[1] == "0"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestSecretSummary:
    """Test SecretSummary model."""

    def test_type_and_data_count(self, k8s_object: Callable[..., MagicMock]) -> None:
        """TYPE is the secret type; DATA counts entries."""
        obj = k8s_object("tls-cert", creation_timestamp=NOW - timedelta(days=12))
        obj.type = "kubernetes.io/tls"
        obj.data = {"tls.crt": "Y2VydA==", "tls.key": "a2V5"}

        secret = SecretSummary.from_k8s_object(obj)

        assert secret.to_row(NOW) == ["tls-cert", "kubernetes.io/tls", "2", "12d"]

    def test_values_never_exposed(self, k8s_object: Callable[..., MagicMock]) -> None:
        """Only key names are kept on the model."""
        obj = k8s_object("db-password")
        obj.type = "Opaque"
        obj.data = {"password": "c2VjcmV0"}

        secret = SecretSummary.from_k8s_object(obj)

        assert "c2VjcmV0" not in secret.model_dump_json()
        assert secret.data_keys == ["password"]
