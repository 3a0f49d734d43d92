# -------------------------------------
# Pooled column
# -------------------------------------
"""
PooledColumn: a dictionary-encoded column.

A PooledColumn is a pair {refs, pool}:
    refs: numpy array of unsigned ints, one per element
          0 means missing, r > 0 means pool[r - 1]
    pool: list of values, each stored once

Example:
    ["a", "b", "a", NA]  ->  refs [1, 2, 1, 0], pool ["a", "b"]

Pools built from data are sorted, so equal data always gets equal refs.
Writes may append to the pool; nothing ever removes from it.

The width of the refs dtype caps the pool size: a uint8 column holds at
most 255 distinct values.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np

from .config import resolve_ref_dtype
from .errors import ReferenceOutOfRange, UnsupportedElementKind
from .indexing import is_scalar_index, resolve_positions
from .missing import NA, NAType
from .pool import capacity, check_capacity, encode, encode_with_pool, pool_index


class PooledColumn:
    """Dictionary-encoded column of values with NA support."""

    def __init__(self, refs: Iterable[int], pool: Iterable[Any], *, ref_dtype=None, eltype: type | None = None):
        """
        Wrap an existing refs/pool pair. Takes ownership of both.

        Args:
            refs: Reference per element (0 = missing)
            pool: Pool values; refs index it 1-based
            ref_dtype: Unsigned dtype for refs (default: refs' own unsigned
                dtype, else the configured default)
            eltype: Type assigned values are converted to (None = no conversion)

        Raises:
            ReferenceOutOfRange: If a reference is negative or past the pool end
            PoolCapacityExceeded: If the pool does not fit ref_dtype
        """
        if ref_dtype is None and isinstance(refs, np.ndarray) and refs.dtype.kind == "u":
            ref_dtype = refs.dtype
        dtype = resolve_ref_dtype(ref_dtype)
        pool = pool if isinstance(pool, list) else list(pool)
        check_capacity(len(pool), dtype)

        arr = np.asarray(refs)
        if arr.ndim != 1:
            raise ValueError(f"refs must be one-dimensional, got shape {arr.shape}")
        if arr.size:
            if arr.dtype.kind not in "iu":
                raise TypeError(f"refs must be integers, got {arr.dtype}")
            lo, hi = int(arr.min()), int(arr.max())
            if lo < 0:
                raise ReferenceOutOfRange(lo, len(pool))
            if hi > len(pool):
                raise ReferenceOutOfRange(hi, len(pool))

        self._refs = arr.astype(dtype, copy=False)
        self._pool = pool
        self.eltype = eltype

    # -------------------------------------
    # Constructors
    # -------------------------------------

    @classmethod
    def from_values(
        cls,
        values: Iterable[Any],
        mask: Iterable[bool] | None = None,
        pool: Iterable[Any] | None = None,
        *,
        ref_dtype=None,
        eltype: type | None = None,
    ) -> "PooledColumn":
        """
        Encode raw values. NA values and mask-flagged positions are missing.

        With pool given, the pool is fixed and every non-missing value must
        be in it (ValueNotInPool otherwise).
        """
        if pool is None:
            refs, pool = encode(values, mask, ref_dtype)
        else:
            refs, pool = encode_with_pool(values, pool, mask, ref_dtype)
        return cls(refs, pool, ref_dtype=refs.dtype, eltype=eltype)

    @classmethod
    def from_dense(cls, dense, pool: Iterable[Any] | None = None, *, ref_dtype=None, eltype: type | None = None) -> "PooledColumn":
        """Encode a DenseColumn, keeping its missingness."""
        return cls.from_values(dense.data, dense.na, pool, ref_dtype=ref_dtype, eltype=eltype)

    @classmethod
    def missing(cls, n: int, *, ref_dtype=None, eltype: type | None = None) -> "PooledColumn":
        """An all-NA column of length n with an empty pool."""
        dtype = resolve_ref_dtype(ref_dtype)
        return cls(np.zeros(n, dtype=dtype), [], ref_dtype=dtype, eltype=eltype)

    # -------------------------------------
    # Properties
    # -------------------------------------

    @property
    def refs(self) -> np.ndarray:
        """Read-only view of the reference array."""
        view = self._refs.view()
        view.flags.writeable = False
        return view

    @property
    def pool(self) -> list[Any]:
        return self._pool

    @property
    def ref_dtype(self) -> np.dtype:
        return self._refs.dtype

    @property
    def capacity(self) -> int:
        return capacity(self._refs.dtype)

    def __len__(self) -> int:
        return len(self._refs)

    # -------------------------------------
    # Reads
    # -------------------------------------

    def decode(self, i: int) -> Any:
        """Value at position i, NA if missing."""
        r = int(self._refs[i])
        if r == 0:
            return NA
        return self._pool[r - 1]

    def values(self) -> list[Any]:
        """Decode every element into a new list."""
        pool = self._pool
        return [pool[r - 1] if r else NA for r in self._refs.tolist()]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())

    def to_dense(self):
        from .dense import DenseColumn
        return DenseColumn(self.values())

    def isna(self) -> np.ndarray:
        return self._refs == 0

    def __getitem__(self, key: Any) -> Any:
        if is_scalar_index(key):
            return self.decode(key)
        positions = resolve_positions(key, len(self))
        return PooledColumn(
            self._refs[positions],
            self._pool[:],
            ref_dtype=self._refs.dtype,
            eltype=self.eltype,
        )

    # -------------------------------------
    # Writes
    # -------------------------------------

    def _convert(self, value: Any) -> Any:
        if self.eltype is None or isinstance(value, self.eltype):
            return value
        return self.eltype(value)

    def _intern(self, value: Any) -> int:
        """Pool index for value, appending it to the pool if new."""
        idx = pool_index(self._pool, value)
        if idx:
            return idx
        check_capacity(len(self._pool) + 1, self._refs.dtype)
        self._pool.append(value)
        return len(self._pool)

    def __setitem__(self, key: Any, value: Any) -> None:
        if is_scalar_index(key):
            self._refs[key]  # IndexError before any pool change
            if value is NA:
                self._refs[key] = 0
            else:
                self._refs[key] = self._intern(self._convert(value))
            return

        positions = resolve_positions(key, len(self))
        if value is NA:
            if self.eltype is NAType:
                raise UnsupportedElementKind(NAType, "setting missing values")
            self._refs[positions] = 0
            return
        if positions.size == 0:
            return
        self._refs[positions]  # IndexError before any pool change
        self._refs[positions] = self._intern(self._convert(value))

    def replace(self, from_value: Any, to_value: Any) -> Any:
        """Replace from_value with to_value in place (see replace.replace)."""
        from .replace import replace
        return replace(self, from_value, to_value)

    # -------------------------------------
    # Derived columns and views
    # -------------------------------------

    def copy(self) -> "PooledColumn":
        """Deep copy of refs and pool."""
        return PooledColumn(self._refs.copy(), self._pool[:], ref_dtype=self._refs.dtype, eltype=self.eltype)

    def similar(self, n: int) -> "PooledColumn":
        """All-NA column of length n over a copy of this pool."""
        return PooledColumn(np.zeros(n, dtype=self._refs.dtype), self._pool[:], eltype=self.eltype)

    def unique(self) -> list[Any]:
        from .levels import unique
        return unique(self)

    def levels(self) -> list[Any]:
        from .levels import levels
        return levels(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PooledColumn):
            return NotImplemented
        return self.values() == other.values()

    def __repr__(self) -> str:
        return f"PooledColumn({self.values()!r}, levels={self.levels()!r})"
