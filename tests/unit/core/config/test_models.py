"""Unit tests for refresh configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from k8s_resource_monitor.core.config import RefreshConfig
from k8s_resource_monitor.core.resources import ResourceKind


@pytest.mark.unit
class TestRefreshConfig:
    """Tests for RefreshConfig."""

    def test_defaults(self) -> None:
        config = RefreshConfig()

        assert config.resource is ResourceKind.DEPLOYMENTS
        assert config.namespace == "default"
        assert config.watch is False
        assert config.interval == 5
        assert config.output_format == "table"

    def test_resource_parsed_from_singular(self) -> None:
        assert RefreshConfig(resource="pod").resource is ResourceKind.PODS

    def test_unsupported_resource(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported resource type"):
            RefreshConfig(resource="ingresses")

    @pytest.mark.parametrize("interval", [0, -3])
    def test_interval_must_be_positive(self, interval: int) -> None:
        with pytest.raises(ValidationError, match="interval must be positive"):
            RefreshConfig(interval=interval)

    def test_blank_namespace_falls_back_to_default(self) -> None:
        assert RefreshConfig(namespace="  ").namespace == "default"

    def test_frozen(self) -> None:
        config = RefreshConfig()
        with pytest.raises(ValidationError):
            config.watch = True  # type: ignore[misc]

    def test_invalid_output_format(self) -> None:
        with pytest.raises(ValidationError):
            RefreshConfig(output_format="csv")  # type: ignore[arg-type]
