from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Column(Protocol):
    """What table code needs from a column, dense or pooled."""

    def __len__(self) -> int:
        ...

    def __getitem__(self, key: Any) -> Any:
        ...

    def decode(self, i: int) -> Any:
        ...

    def values(self) -> list[Any]:
        ...

    def isna(self) -> np.ndarray:
        ...


__all__ = ["Column"]
