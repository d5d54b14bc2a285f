"""Unit tests for fixed-width table rendering."""

from __future__ import annotations

import pytest

from k8s_resource_monitor.cli.output import format_line, render_table
from k8s_resource_monitor.core.resources import Column, ResourceKind, get_definition


@pytest.mark.unit
class TestFormatLine:
    """Tests for format_line."""

    def test_pads_to_width(self) -> None:
        columns = [Column("NAME", 6), Column("AGE", 4)]

        assert format_line(columns, ["web", "5m"]) == "web    5m  "

    def test_long_values_are_not_truncated(self) -> None:
        """Columns are minimum widths; longer cells push the line out."""
        columns = [Column("NAME", 4), Column("AGE", 4)]

        assert format_line(columns, ["very-long-name", "1d"]) == "very-long-name 1d  "

    def test_cell_count_must_match(self) -> None:
        with pytest.raises(ValueError):
            format_line([Column("NAME", 4)], ["a", "b"])


@pytest.mark.unit
class TestRenderTable:
    """Tests for render_table."""

    def test_empty_table(self) -> None:
        definition = get_definition(ResourceKind.PODS)

        lines = render_table(definition.columns, [], definition.plural).split("\n")

        assert lines[0] == ""
        assert lines[1].split() == ["NAME", "STATUS", "READY", "RESTARTS", "AGE"]
        assert lines[2] == ""
        assert lines[3] == "Total pods: 0"
        assert len(lines) == 4

    def test_rows_in_order(self) -> None:
        definition = get_definition(ResourceKind.CONFIGMAPS)
        rows = [["b-config", "1", "2d"], ["a-config", "0", "30s"]]

        lines = render_table(definition.columns, rows, definition.plural).split("\n")

        assert lines[2].startswith("b-config".ljust(40) + " ")
        assert lines[3].split() == ["a-config", "0", "30s"]
        assert lines[-1] == "Total configmaps: 2"

    def test_header_alignment(self) -> None:
        definition = get_definition(ResourceKind.DEPLOYMENTS)

        header = render_table(definition.columns, [], definition.plural).split("\n")[1]

        assert header == (
            "NAME".ljust(40)
            + " "
            + "READY".ljust(10)
            + " "
            + "UP-TO-DATE".ljust(10)
            + " "
            + "AVAILABLE".ljust(10)
            + " "
            + "AGE".ljust(10)
        )
