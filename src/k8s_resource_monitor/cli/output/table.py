"""Fixed-width table output for CLI commands.

Columns are minimum widths: cells are left-justified and padded to the
column width, and longer values run past it instead of being cut.
"""

from __future__ import annotations

from collections.abc import Sequence

from k8s_resource_monitor.core.resources import Column


def format_line(columns: Sequence[Column], cells: Sequence[str]) -> str:
    """Left-justify each cell to its column width and join with a space."""
    return " ".join(cell.ljust(column.width) for column, cell in zip(columns, cells, strict=True))


def render_table(
    columns: Sequence[Column],
    rows: Sequence[Sequence[str]],
    plural: str,
) -> str:
    """Render headers and rows followed by a total line.

    Args:
        columns: Column headers and widths.
        rows: Display rows, each with one cell per column.
        plural: Plural resource name for the total line, e.g. ``"pods"``.

    Returns:
        The table text, starting with a blank line and ending with
        ``"Total {plural}: {count}"``.
    """
    lines = ["", format_line(columns, [column.header for column in columns])]
    lines.extend(format_line(columns, row) for row in rows)
    lines.append("")
    lines.append(f"Total {plural}: {len(rows)}")
    return "\n".join(lines)
