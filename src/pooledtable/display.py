# -------------------------------------
# Column display
# -------------------------------------
"""
Render a column as text: a header, one value per line, then the levels.

Long columns show the head and the tail around a vertical ellipsis.
"""
from __future__ import annotations

from typing import Any

from . import config
from .column import PooledColumn


def _format_value(v: Any) -> str:
    """Format a value for column output (floats to 3 significant figures)."""
    if isinstance(v, float):
        if v == 0:
            return "0"
        return f"{v:.3g}"
    return str(v)


def _type_name(col: PooledColumn) -> str:
    if col.eltype is not None:
        return col.eltype.__name__
    kinds = {type(v).__name__ for v in col.pool}
    return kinds.pop() if len(kinds) == 1 else "Any"


def format_column(col: PooledColumn, max_lines: int | None = None) -> str:
    """
    Format a PooledColumn.

    Args:
        col: Column to format
        max_lines: Show at most this many value lines (None = all)

    Raises:
        ValueError: If col has more than MAX_FORMAT_ROWS elements
    """
    n = len(col)
    if n > config.MAX_FORMAT_ROWS:
        raise ValueError(f"Column has {n:,} rows, exceeds limit of {config.MAX_FORMAT_ROWS:,}")

    lines = [f"{n}-element {_type_name(col)} PooledColumn"]
    values = [_format_value(v) for v in col.values()]
    if max_lines is not None and n > max_lines:
        head = (max_lines + 1) // 2
        tail = max_lines - head
        lines.extend(" " + v for v in values[:head])
        lines.append(" ⋮")
        if tail:
            lines.extend(" " + v for v in values[n - tail:])
    else:
        lines.extend(" " + v for v in values)
    lines.append("levels: [" + ", ".join(_format_value(v) for v in col.levels()) + "]")
    return "\n".join(lines)


def print_column(col: PooledColumn, max_lines: int | None = None) -> None:
    """Print a PooledColumn to stdout."""
    print(format_column(col, max_lines))
