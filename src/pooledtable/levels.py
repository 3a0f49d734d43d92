# -------------------------------------
# Unique values and levels
# -------------------------------------
"""
Distinct-value views of a column.

For a PooledColumn the levels are the pool itself, in pool order, plus a
trailing NA when some element is missing. Unused pool slots (left behind
by replace) are still listed.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from .column import PooledColumn
from .dense import DenseColumn
from .missing import NA


def unique(col) -> list[Any]:
    """
    Distinct values of a column, with NA last if any element is missing.

    Args:
        col: PooledColumn or DenseColumn

    Returns:
        Plain list of values
    """
    if isinstance(col, PooledColumn):
        out = col.pool[:]
        if np.any(col.isna()):
            out.append(NA)
        return out

    if isinstance(col, DenseColumn):
        seen: dict[Any, None] = {}
        has_na = False
        for v in col:
            if v is NA:
                has_na = True
            else:
                seen.setdefault(v, None)
        out = list(seen)
        if has_na:
            out.append(NA)
        return out

    raise TypeError(f"unique() needs a PooledColumn or DenseColumn, got {type(col).__name__}")


levels = unique


def level_to_index(col: PooledColumn) -> dict[Any, int]:
    """Map each pool value to its reference."""
    return {v: i for i, v in enumerate(col.pool, 1)}


def index_to_level(col: PooledColumn) -> dict[int, Any]:
    """Map each reference to its pool value."""
    return {i: v for i, v in enumerate(col.pool, 1)}
