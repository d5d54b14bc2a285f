"""Shared pytest fixtures for k8s_resource_monitor tests."""

from __future__ import annotations

import os
from datetime import UTC, datetime
from io import StringIO
from typing import Any
from unittest.mock import MagicMock

import pytest
import typer
from rich.console import Console
from typer.testing import CliRunner

from k8s_resource_monitor.cli.main import app

# Fixed reference instant for age calculations
NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("KMON_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant."""
    return NOW


@pytest.fixture
def output() -> StringIO:
    """Buffer that captures console output."""
    return StringIO()


@pytest.fixture
def console(output: StringIO) -> Console:
    """Plain, wide console writing into the ``output`` buffer."""
    return Console(file=output, width=200, color_system=None, force_terminal=False)


def make_k8s_object(
    name: str,
    namespace: str | None = "default",
    creation_timestamp: Any = None,
    labels: dict[str, str] | None = None,
) -> MagicMock:
    """Create a MagicMock shaped like a kubernetes SDK object's metadata."""
    obj = MagicMock()
    obj.metadata.name = name
    obj.metadata.namespace = namespace
    obj.metadata.creation_timestamp = creation_timestamp
    obj.metadata.labels = labels
    return obj


@pytest.fixture
def k8s_object() -> Any:
    """Factory for MagicMock kubernetes SDK objects."""
    return make_k8s_object
