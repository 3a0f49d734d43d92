# -------------------------------------
# dense column
# -------------------------------------
"""
DenseColumn: plain values plus a missingness mask.

The unpooled counterpart of PooledColumn. Both satisfy the Column
protocol, so table code can take either.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator

import numpy as np

from .indexing import is_scalar_index, resolve_positions
from .missing import NA


class DenseColumn:
    """A list of values with a parallel NA mask."""

    def __init__(self, data: Iterable[Any], na: Iterable[bool] | None = None):
        if isinstance(data, np.ndarray):
            data = data.tolist()
        data = list(data)
        if na is None:
            mask = np.array([v is NA for v in data], dtype=np.bool_)
        else:
            mask = np.asarray(na, dtype=np.bool_).copy()
            if mask.shape != (len(data),):
                raise ValueError(
                    f"missingness mask has {mask.size} entries, expected {len(data)}"
                )
            mask |= np.array([v is NA for v in data], dtype=np.bool_)
        self.data = data
        self.na = mask

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Any]:
        for v, m in zip(self.data, self.na):
            yield NA if m else v

    def decode(self, i: int) -> Any:
        if self.na[i]:
            return NA
        return self.data[i]

    def values(self) -> list[Any]:
        return list(self)

    def isna(self) -> np.ndarray:
        return self.na.copy()

    def __getitem__(self, key: Any) -> Any:
        if is_scalar_index(key):
            return self.decode(key)
        positions = resolve_positions(key, len(self))
        return DenseColumn([self.data[p] for p in positions], self.na[positions])

    def __setitem__(self, key: Any, value: Any) -> None:
        if is_scalar_index(key):
            positions = [key]
        else:
            positions = resolve_positions(key, len(self)).tolist()
        for p in positions:
            if value is NA:
                self.na[p] = True
            else:
                self.data[p] = value
                self.na[p] = False

    def copy(self) -> "DenseColumn":
        return DenseColumn(self.data[:], self.na)

    def to_pooled(self, **kwargs):
        """Encode as a PooledColumn (kwargs go to PooledColumn.from_dense)."""
        from .column import PooledColumn
        return PooledColumn.from_dense(self, **kwargs)

    def unique(self) -> list[Any]:
        from .levels import unique
        return unique(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseColumn):
            return NotImplemented
        return self.values() == other.values()

    def __repr__(self) -> str:
        return f"DenseColumn({self.values()!r})"
