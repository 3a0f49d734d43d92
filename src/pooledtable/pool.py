# -------------------------------------
# Pool builder
# -------------------------------------
"""
Encode a raw value sequence into (refs, pool).

The pool holds each distinct non-missing value once, sorted ascending.
Each element becomes its 1-based rank in that pool, or 0 when missing.
Values need equality, hashing and ordering; nothing else is assumed.

Missing positions are those flagged in the mask, plus any value that is
the NA marker itself.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

import numpy as np

from .config import resolve_ref_dtype
from .errors import PoolCapacityExceeded, ValueNotInPool
from .missing import NA

logger = logging.getLogger(__name__)


# -------------------------------------
# Capacity and lookups
# -------------------------------------

def capacity(ref_dtype=None) -> int:
    """Largest pool a reference dtype can address."""
    return int(np.iinfo(resolve_ref_dtype(ref_dtype)).max)


def check_capacity(size: int, ref_dtype=None) -> None:
    """
    Raises:
        PoolCapacityExceeded: If size pool entries do not fit ref_dtype
    """
    dtype = resolve_ref_dtype(ref_dtype)
    limit = capacity(dtype)
    if size > limit:
        raise PoolCapacityExceeded(size, limit, dtype)


def pool_index(pool: Sequence[Any], value: Any) -> int:
    """1-based position of value in pool by linear scan, 0 if absent."""
    if value is NA:
        return 0
    for i, p in enumerate(pool, 1):
        if p == value:
            return i
    return 0


def _as_list(values: Iterable[Any]) -> list[Any]:
    if isinstance(values, np.ndarray):
        return values.tolist()
    if isinstance(values, list):
        return values
    return list(values)


def missing_mask(values: Sequence[Any], mask: Iterable[bool] | None = None) -> list[bool]:
    """
    Combine a caller mask with NA markers found in values.

    Raises:
        ValueError: If mask length differs from values length
    """
    if mask is None:
        return [v is NA for v in values]
    mask = [bool(m) for m in mask]
    if len(mask) != len(values):
        raise ValueError(
            f"missingness mask has {len(mask)} entries, expected {len(values)}"
        )
    return [m or v is NA for v, m in zip(values, mask)]


def _rank(distinct: Iterable[Any]) -> tuple[list[Any], dict[Any, int]]:
    """Sort distinct values; map each to its 1-based rank."""
    pool = sorted(distinct)
    return pool, {v: i for i, v in enumerate(pool, 1)}


def _fill_refs(values: Sequence[Any], missing: Sequence[bool], poolref: dict[Any, int], dtype) -> np.ndarray:
    refs = [0 if m else poolref[v] for v, m in zip(values, missing)]
    return np.array(refs, dtype=dtype)


# -------------------------------------
# Encoders
# -------------------------------------

def encode(values: Iterable[Any], mask: Iterable[bool] | None = None, ref_dtype=None) -> tuple[np.ndarray, list[Any]]:
    """
    Encode values against a pool derived from the data.

    Args:
        values: Raw values
        mask: Optional missingness flags, same length as values
        ref_dtype: Unsigned reference dtype (default from config)

    Returns:
        (refs, pool)

    Raises:
        PoolCapacityExceeded: If the distinct values do not fit ref_dtype
    """
    dtype = resolve_ref_dtype(ref_dtype)
    values = _as_list(values)
    missing = missing_mask(values, mask)

    distinct = {v for v, m in zip(values, missing) if not m}
    check_capacity(len(distinct), dtype)
    pool, poolref = _rank(distinct)

    logger.debug("encoded %d values into a pool of %d (%s refs)", len(values), len(pool), dtype)
    return _fill_refs(values, missing, poolref, dtype), pool


def encode_with_pool(
    values: Iterable[Any],
    pool: Iterable[Any],
    mask: Iterable[bool] | None = None,
    ref_dtype=None,
) -> tuple[np.ndarray, list[Any]]:
    """
    Encode values against a fixed, caller-supplied pool.

    The pool actually used is the caller's pool deduplicated and sorted,
    not its original order.

    Raises:
        PoolCapacityExceeded: If the caller pool does not fit ref_dtype
        ValueNotInPool: If a non-missing value is absent from the pool
    """
    dtype = resolve_ref_dtype(ref_dtype)
    given = _as_list(pool)
    check_capacity(len(given), dtype)

    values = _as_list(values)
    missing = missing_mask(values, mask)
    pool, poolref = _rank({p for p in given if p is not NA})

    for v, m in zip(values, missing):
        if not m and v not in poolref:
            raise ValueNotInPool(v)

    logger.debug("encoded %d values against a fixed pool of %d", len(values), len(pool))
    return _fill_refs(values, missing, poolref, dtype), pool


# -------------------------------------
# Column builders
# -------------------------------------

def build_pool(values: Iterable[Any], mask: Iterable[bool] | None = None, *, ref_dtype=None, eltype=None):
    """Build a PooledColumn whose pool is derived from values."""
    from .column import PooledColumn
    refs, pool = encode(values, mask, ref_dtype)
    return PooledColumn(refs, pool, ref_dtype=refs.dtype, eltype=eltype)


def build_pool_with(
    values: Iterable[Any],
    pool: Iterable[Any],
    mask: Iterable[bool] | None = None,
    *,
    ref_dtype=None,
    eltype=None,
):
    """Build a PooledColumn against a fixed pool (see encode_with_pool)."""
    from .column import PooledColumn
    refs, pool = encode_with_pool(values, pool, mask, ref_dtype)
    return PooledColumn(refs, pool, ref_dtype=refs.dtype, eltype=eltype)
