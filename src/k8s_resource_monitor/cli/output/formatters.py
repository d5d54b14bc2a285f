"""Output formatters for resource listings.

Implements the Strategy pattern for output formatting,
allowing the monitor to output rows in table, JSON, or YAML formats.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import yaml
from rich.console import Console
from rich.markup import escape

from k8s_resource_monitor.cli.output.table import render_table

if TYPE_CHECKING:
    from k8s_resource_monitor.core.resources import ResourceDefinition


class OutputFormat(StrEnum):
    """Supported output formats for CLI commands."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class ResourceFormatter(ABC):
    """Abstract base class for resource listing formatters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def format_rows(
        self,
        definition: ResourceDefinition,
        rows: Sequence[Sequence[str]],
    ) -> None:
        """Format and display projected rows of one resource kind."""

    def format_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, emoji=False)

    def _print_plain(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True, emoji=False)

    @staticmethod
    def _as_document(
        definition: ResourceDefinition,
        rows: Sequence[Sequence[str]],
    ) -> dict[str, Any]:
        headers = definition.headers
        items = [dict(zip(headers, row, strict=True)) for row in rows]
        return {"kind": definition.plural, "items": items, "total": len(items)}


class TableFormatter(ResourceFormatter):
    """Fixed-width text table formatter."""

    def format_rows(
        self,
        definition: ResourceDefinition,
        rows: Sequence[Sequence[str]],
    ) -> None:
        """Format rows as an aligned table followed by a total line."""
        self._print_plain(render_table(definition.columns, rows, definition.plural))


class JsonFormatter(ResourceFormatter):
    """JSON output formatter."""

    def format_rows(
        self,
        definition: ResourceDefinition,
        rows: Sequence[Sequence[str]],
    ) -> None:
        self._print_plain(json.dumps(self._as_document(definition, rows), indent=2))


class YamlFormatter(ResourceFormatter):
    """YAML output formatter."""

    def format_rows(
        self,
        definition: ResourceDefinition,
        rows: Sequence[Sequence[str]],
    ) -> None:
        document = self._as_document(definition, rows)
        self._print_plain(yaml.dump(document, default_flow_style=False, sort_keys=False))


def get_formatter(
    format_type: OutputFormat | str,
    console: Console | None = None,
) -> ResourceFormatter:
    """Factory function to get the appropriate formatter."""
    if console is None:
        console = Console()

    formatters: dict[str, type[ResourceFormatter]] = {
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.JSON: JsonFormatter,
        OutputFormat.YAML: YamlFormatter,
    }

    formatter_class = formatters.get(format_type, TableFormatter)
    return formatter_class(console)
