# -------------------------------------
# multi-index resolution
# -------------------------------------
"""
Turn a multi-index key into an array of positions.

Accepted keys:
- slice
- boolean mask (list, tuple or numpy); NA entries count as False
- integer index list (list, tuple, range or numpy); NA entries are dropped
- a column (anything with values()), read as one of the above
"""
from __future__ import annotations

from typing import Any

import numpy as np

from .missing import NA


def _is_bool(v: Any) -> bool:
    return isinstance(v, (bool, np.bool_))


def _is_column(key: Any) -> bool:
    return hasattr(key, "values") and hasattr(key, "isna") and hasattr(key, "decode")


def _mask_positions(mask: np.ndarray, n: int) -> np.ndarray:
    if len(mask) != n:
        raise IndexError(f"boolean index has length {len(mask)}, expected {n}")
    return np.flatnonzero(mask)


def resolve_positions(key: Any, n: int) -> np.ndarray:
    """
    Resolve key against a column of length n.

    Returns:
        int64 array of positions (negative positions are left to numpy)

    Raises:
        IndexError: If a boolean mask has the wrong length
        TypeError: If key is not a supported index
    """
    if isinstance(key, slice):
        return np.arange(n, dtype=np.int64)[key]

    if _is_column(key):
        key = key.values()

    if isinstance(key, np.ndarray):
        if key.dtype == np.bool_:
            return _mask_positions(key, n)
        if key.dtype.kind in "iu":
            return key.astype(np.int64, copy=False)
        if key.dtype != object:
            raise TypeError(f"cannot index a column with a {key.dtype} array")
        key = key.tolist()

    if isinstance(key, (list, tuple, range)):
        items = [v for v in key]
        present = [v for v in items if v is not NA]
        if present and all(_is_bool(v) for v in present):
            mask = np.array([v is not NA and bool(v) for v in items], dtype=np.bool_)
            return _mask_positions(mask, n)
        if not all(isinstance(v, (int, np.integer)) for v in present):
            raise TypeError("index list must hold booleans or integers")
        return np.array(present, dtype=np.int64)

    raise TypeError(f"unsupported index type: {type(key).__name__}")


def is_scalar_index(key: Any) -> bool:
    """True for a single integer position (booleans excluded)."""
    return isinstance(key, (int, np.integer)) and not _is_bool(key)
