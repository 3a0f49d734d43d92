# -------------------------------------
# Table utilities - dict-based tables over pooled keys
# -------------------------------------
"""
Dict-based tables and key joins.

Tables are represented as dicts with 'columns', 'rows', and 'orientation' keys:
    Row-oriented: {"orientation": "row", "columns": ["col1", "col2"], "rows": [[val1, val2], ...]}
    Column-oriented: {"orientation": "column", "columns": ["col1", "col2"], "rows": [[col1_vals], [col2_vals]]}

Joins encode each key column pair with pooled_pair(), so matching is done
on integer refs rather than on values. A key that is None or NA never
matches anything.

This module provides functions for:
- Orientation conversion: table_to_columns, table_to_rows
- Column access: table_column, table_pool_column
- Joins: table_join (inner, left, right, outer, semi, anti, cross)
"""
from __future__ import annotations

import logging
from typing import Any, Literal

from .column import PooledColumn
from .dual import pooled_pair
from .missing import NA

logger = logging.getLogger(__name__)

JOIN_KINDS = ("inner", "left", "right", "outer", "semi", "anti", "cross")


# -------------------------------------
# Orientation helpers
# -------------------------------------

def _is_column_oriented(table: dict[str, Any]) -> bool:
    """Check if table is column-oriented."""
    return table.get("orientation") == "column"


def _transpose_rows_to_cols(rows: list[list], n_cols: int) -> list[list]:
    """Transpose row-oriented data to column-oriented without zip(*rows) splat."""
    cols = [[] for _ in range(n_cols)]
    for row in rows:
        for i, val in enumerate(row):
            cols[i].append(val)
    return cols


def _transpose_cols_to_rows(cols: list[list]) -> list[list]:
    """Transpose column-oriented data to row-oriented."""
    if not cols or not cols[0]:
        return []
    n_rows = len(cols[0])
    return [[col[i] for col in cols] for i in range(n_rows)]


def table_orientation(table: dict[str, Any]) -> Literal["row", "column"]:
    """
    Get the orientation of a table.

    Raises:
        ValueError: If orientation is not "row" or "column"
    """
    orientation = table.get("orientation", "row")
    if orientation not in ("row", "column"):
        raise ValueError(f"Unsupported orientation: {orientation}")
    return orientation


def table_nrows(table: dict[str, Any]) -> int:
    """Number of data rows in a table."""
    if table_orientation(table) == "row":
        return len(table["rows"])
    if not table["rows"]:
        return 0
    return len(table["rows"][0])


def table_to_columns(table: dict[str, Any]) -> dict[str, Any]:
    """Convert any table to column-oriented."""
    if table_orientation(table) == "column":
        return table
    cols = _transpose_rows_to_cols(table["rows"], len(table["columns"]))
    return {"orientation": "column", "columns": table["columns"][:], "rows": cols}


def table_to_rows(table: dict[str, Any]) -> dict[str, Any]:
    """Convert any table to row-oriented."""
    if table_orientation(table) == "row":
        return table
    rows = _transpose_cols_to_rows(table["rows"])
    return {"orientation": "row", "columns": table["columns"][:], "rows": rows}


def _resolve_column_index(table: dict[str, Any], column: str | int) -> int:
    """Convert column name or index to index, with validation.

    Raises:
        ValueError: If column not found or index out of range
    """
    if isinstance(column, int):
        if column < 0 or column >= len(table["columns"]):
            raise ValueError(f"Column index {column} out of range")
        return column
    try:
        return table["columns"].index(column)
    except ValueError:
        raise ValueError(f"Column '{column}' not found in table columns: {table['columns']}")


# -------------------------------------
# Column access
# -------------------------------------

def table_column(table: dict[str, Any], colname: str | int) -> list[Any]:
    """Extract a single column from a table as a list."""
    idx = _resolve_column_index(table, colname)
    return table_to_columns(table)["rows"][idx][:]


def _key_mask(values: list[Any]) -> list[bool]:
    return [v is None or v is NA for v in values]


def table_pool_column(table: dict[str, Any], colname: str | int, **kwargs) -> PooledColumn:
    """Encode one column as a PooledColumn; None and NA become missing."""
    values = table_column(table, colname)
    return PooledColumn.from_values(values, _key_mask(values), **kwargs)


# -------------------------------------
# Key-based joins
# -------------------------------------

def _key_codes(lcols, rcols, lkeys, rkeys) -> tuple[list, list]:
    """Per-row join keys (tuples of shared refs, None when any part is missing)."""
    n_left = len(lcols[0]) if lcols else 0
    n_right = len(rcols[0]) if rcols else 0
    lparts = []
    rparts = []
    for li, ri in zip(lkeys, rkeys):
        lvals, rvals = lcols[li], rcols[ri]
        a, b = pooled_pair(lvals, rvals, _key_mask(lvals), _key_mask(rvals), ref_dtype="uint64")
        lparts.append(a.refs.tolist())
        rparts.append(b.refs.tolist())

    def combine(parts, n):
        codes = []
        for i in range(n):
            code = tuple(p[i] for p in parts)
            codes.append(None if 0 in code else code)
        return codes

    return combine(lparts, n_left), combine(rparts, n_right)


def _index(codes: list) -> dict[tuple, list[int]]:
    index: dict[tuple, list[int]] = {}
    for i, code in enumerate(codes):
        if code is not None:
            index.setdefault(code, []).append(i)
    return index


def _output_columns(left_cols: list, right_cols: list, suffixes: tuple[str, str]) -> list:
    """Left columns then right columns, renaming overlaps with suffixes."""
    out_columns = list(left_cols)
    left_suffix, right_suffix = suffixes
    for rc in right_cols:
        if rc in out_columns:
            out_columns = [c + left_suffix if c == rc else c for c in out_columns]
            out_columns.append(rc + right_suffix)
        else:
            out_columns.append(rc)
    return out_columns


def _cross_join(left, right, lcols, rcols, suffixes) -> dict[str, Any]:
    out_columns = _output_columns(left["columns"], right["columns"], suffixes)
    n_left = len(lcols[0]) if lcols else 0
    n_right = len(rcols[0]) if rcols else 0
    pairs = [(i, j) for i in range(n_left) for j in range(n_right)]
    out_cols = [[col[i] for i, _ in pairs] for col in lcols]
    out_cols += [[col[j] for _, j in pairs] for col in rcols]
    return {"orientation": "column", "columns": out_columns, "rows": out_cols}


def table_join(
    left: dict[str, Any],
    right: dict[str, Any],
    on: str | int | list[str | int] | None = None,
    kind: str = "inner",
    right_on: str | int | list[str | int] | None = None,
    suffixes: tuple[str, str] = ("", "_right"),
    fill: Any = NA,
) -> dict[str, Any]:
    """
    Join two tables on key columns.

    Kinds:
        inner: matching pairs only
        left: every left row, right values filled where unmatched
        right: every right row, left values filled where unmatched
        outer: left join plus the unmatched right rows
        semi: left rows that have a match (left columns only)
        anti: left rows without a match (left columns only)
        cross: every left row with every right row (no keys)

    Output follows left row order (right row order for "right"); a left
    row matching several right rows yields them in right table order.
    Columns are the left columns followed by the right non-key columns.
    Key columns of rows that exist only on the right take the right
    side's key values.

    Args:
        left: Left table
        right: Right table
        on: Key column(s) in left (name or index, or a list of them)
        kind: One of JOIN_KINDS
        right_on: Key column(s) in right (defaults to on)
        suffixes: Suffixes for overlapping non-key column names
        fill: Value for cells of an absent side

    Returns:
        Column-oriented table if left is column-oriented, else row-oriented

    Raises:
        ValueError: If kind is unknown, keys are missing (or given for a
            cross join), or a key column is not found
    """
    if kind not in JOIN_KINDS:
        raise ValueError(f"Unknown join kind '{kind}', expected one of {JOIN_KINDS}")

    lcols = table_to_columns(left)["rows"]
    rcols = table_to_columns(right)["rows"]

    if kind == "cross":
        if on is not None or right_on is not None:
            raise ValueError("Cross joins don't take keys")
        result = _cross_join(left, right, lcols, rcols, suffixes)
        return result if _is_column_oriented(left) else table_to_rows(result)

    if on is None:
        raise ValueError(f"A {kind} join needs key columns (on=...)")

    on_list = on if isinstance(on, list) else [on]
    right_on_list = on_list if right_on is None else (right_on if isinstance(right_on, list) else [right_on])
    if not on_list:
        raise ValueError(f"A {kind} join needs key columns (on=...)")
    if len(on_list) != len(right_on_list):
        raise ValueError(f"Got {len(on_list)} left keys but {len(right_on_list)} right keys")

    lkeys = [_resolve_column_index(left, c) for c in on_list]
    rkeys = [_resolve_column_index(right, c) for c in right_on_list]
    lcodes, rcodes = _key_codes(lcols, rcols, lkeys, rkeys)
    n_left, n_right = len(lcodes), len(rcodes)

    # (left row or None, right row or None)
    pairs: list[tuple[int | None, int | None]] = []
    if kind == "right":
        lindex = _index(lcodes)
        for j, code in enumerate(rcodes):
            matches = lindex.get(code) if code is not None else None
            if matches:
                pairs.extend((i, j) for i in matches)
            else:
                pairs.append((None, j))
    else:
        rindex = _index(rcodes)
        matched_right: set[int] = set()
        for i, code in enumerate(lcodes):
            matches = rindex.get(code) if code is not None else None
            if kind == "semi":
                if matches:
                    pairs.append((i, None))
            elif kind == "anti":
                if not matches:
                    pairs.append((i, None))
            elif matches:
                pairs.extend((i, j) for j in matches)
                matched_right.update(matches)
            elif kind in ("left", "outer"):
                pairs.append((i, None))
        if kind == "outer":
            pairs.extend((None, j) for j in range(n_right) if j not in matched_right)

    logger.debug("%s join: %d x %d rows -> %d", kind, n_left, n_right, len(pairs))

    if kind in ("semi", "anti"):
        out_cols = [[col[i] for i, _ in pairs] for col in lcols]
        result = {"orientation": "column", "columns": left["columns"][:], "rows": out_cols}
        return result if _is_column_oriented(left) else table_to_rows(result)

    right_keep = [k for k in range(len(right["columns"])) if k not in rkeys]
    out_columns = _output_columns(left["columns"], [right["columns"][k] for k in right_keep], suffixes)
    key_source = dict(zip(lkeys, rkeys))

    out_cols = []
    for li, col in enumerate(lcols):
        rcol = rcols[key_source[li]] if li in key_source else None
        out = []
        for i, j in pairs:
            if i is not None:
                out.append(col[i])
            elif rcol is not None:
                out.append(rcol[j])
            else:
                out.append(fill)
        out_cols.append(out)
    for k in right_keep:
        col = rcols[k]
        out_cols.append([col[j] if j is not None else fill for _, j in pairs])

    result = {"orientation": "column", "columns": out_columns, "rows": out_cols}
    return result if _is_column_oriented(left) else table_to_rows(result)
