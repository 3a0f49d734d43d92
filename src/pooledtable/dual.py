# -------------------------------------
# Shared-pool construction for two columns
# -------------------------------------
"""
Build two PooledColumns over one shared, sorted pool.

Because both columns are ranked against the same pool, equal values get
equal refs in both. Key comparisons (joins, grouping) can then compare
integers instead of values:

    a, b = pooled_pair(["x", "y"], ["y", "z"])
    a.refs  -> [1, 2]
    b.refs  -> [2, 3]
    a.pool  -> ["x", "y", "z"]

Missing positions (mask or NA) are left out of the pool and map to 0 in
both outputs, as in the single-column builder.

Each column gets its own copy of the pool list, so later writes or
replace calls on one column never show up in the other.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from .column import PooledColumn
from .config import resolve_ref_dtype
from .pool import _as_list, _fill_refs, _rank, check_capacity, missing_mask

logger = logging.getLogger(__name__)


def _raw(v: Any, mask: Iterable[bool] | None) -> tuple[list[Any], list[bool]]:
    """Values and missingness of a raw sequence or a column."""
    if hasattr(v, "values") and hasattr(v, "isna") and hasattr(v, "decode"):
        values = v.values()
        missing = missing_mask(values, mask)
        return values, missing
    values = _as_list(v)
    return values, missing_mask(values, mask)


def pooled_pair(
    v1: Any,
    v2: Any,
    mask1: Iterable[bool] | None = None,
    mask2: Iterable[bool] | None = None,
    *,
    ref_dtype=None,
    eltype: type | None = None,
) -> tuple[PooledColumn, PooledColumn]:
    """
    Encode two sequences against one pool.

    Args:
        v1, v2: Raw sequences, DenseColumns or PooledColumns
        mask1, mask2: Optional missingness flags for v1 / v2
        ref_dtype: Unsigned reference dtype (default from config)
        eltype: Element type recorded on both columns

    Returns:
        (col1, col2) with equal pools

    Raises:
        PoolCapacityExceeded: If the union of values does not fit ref_dtype
    """
    dtype = resolve_ref_dtype(ref_dtype)
    values1, missing1 = _raw(v1, mask1)
    values2, missing2 = _raw(v2, mask2)

    distinct = {v for v, m in zip(values1, missing1) if not m}
    distinct.update(v for v, m in zip(values2, missing2) if not m)
    check_capacity(len(distinct), dtype)
    pool, poolref = _rank(distinct)

    refs1 = _fill_refs(values1, missing1, poolref, dtype)
    refs2 = _fill_refs(values2, missing2, poolref, dtype)
    logger.debug(
        "shared pool of %d built from %d + %d values", len(pool), len(values1), len(values2)
    )
    return (
        PooledColumn(refs1, pool[:], ref_dtype=dtype, eltype=eltype),
        PooledColumn(refs2, pool[:], ref_dtype=dtype, eltype=eltype),
    )
