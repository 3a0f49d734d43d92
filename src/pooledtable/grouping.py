"""Group-sort indexing over pooled references.

Pooled refs are small non-negative integers, so a counting sort groups
them in O(n + ngroups). The indexer is stable: within a group, positions
keep their original order. Group 0 (missing) comes first.

Since data-built pools are sorted, ordering by refs orders by value for
such columns. Values appended later by writes sort after the original
pool regardless of their value.
"""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def _groupsort(codes, ngroups):
    n = codes.shape[0]
    counts = np.zeros(ngroups + 1, dtype=np.int64)
    for i in range(n):
        counts[codes[i]] += 1

    where = np.zeros(ngroups + 1, dtype=np.int64)
    for g in range(1, ngroups + 1):
        where[g] = where[g - 1] + counts[g - 1]

    indexer = np.empty(n, dtype=np.int64)
    for i in range(n):
        c = codes[i]
        indexer[where[c]] = i
        where[c] += 1
    return indexer, counts


def groupsort_indexer(refs, ngroups: int | None = None) -> tuple[np.ndarray, np.ndarray]:
    """Counting-sort permutation of integer codes.

    Args:
        refs: Integer codes in [0, ngroups]
        ngroups: Number of non-missing groups (default: max code)

    Returns:
        (indexer, counts): indexer is the stable sorting permutation,
        counts[g] is the number of elements with code g

    Raises:
        ValueError: If a code is negative or above ngroups
    """
    codes = np.asarray(refs, dtype=np.int64)
    if codes.ndim != 1:
        raise ValueError(f"codes must be one-dimensional, got shape {codes.shape}")
    top = int(codes.max()) if codes.size else 0
    if ngroups is None:
        ngroups = top
    if codes.size and (int(codes.min()) < 0 or top > ngroups):
        raise ValueError(f"codes must lie in [0, {ngroups}]")
    return _groupsort(codes, ngroups)


def order(col) -> np.ndarray:
    """Permutation that sorts a PooledColumn by reference."""
    indexer, _ = groupsort_indexer(col.refs, len(col.pool))
    return indexer


def sort(col):
    """New PooledColumn in reference order (missing first)."""
    return col[order(col)]
