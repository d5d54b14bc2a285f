"""Centralized CLI output utilities.

This package provides consistent output formatting for resource listings.

Usage:
    from k8s_resource_monitor.cli.output import OutputFormat, get_formatter

    formatter = get_formatter(OutputFormat.TABLE, console)
    formatter.format_rows(definition, rows)
"""

from k8s_resource_monitor.cli.output.formatters import (
    JsonFormatter,
    OutputFormat,
    ResourceFormatter,
    TableFormatter,
    YamlFormatter,
    get_formatter,
)
from k8s_resource_monitor.cli.output.table import format_line, render_table

__all__ = [
    "JsonFormatter",
    "OutputFormat",
    "ResourceFormatter",
    "TableFormatter",
    "YamlFormatter",
    "format_line",
    "get_formatter",
    "render_table",
]
