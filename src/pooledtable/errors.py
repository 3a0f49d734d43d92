# -------------------------------------
# pooled column errors
# -------------------------------------
"""
Error kinds raised by pooled columns.

All of them subclass ValueError, so callers that already catch
ValueError from table utilities keep working.
"""
from __future__ import annotations

from typing import Any


class PooledError(ValueError):
    """Base class for pooled column errors."""


class PoolCapacityExceeded(PooledError):
    """Pool does not fit in the reference width."""

    def __init__(self, size: int, capacity: int, ref_dtype: Any = None):
        self.size = size
        self.capacity = capacity
        self.ref_dtype = ref_dtype
        super().__init__(
            f"pool capacity exceeded: {size:,} values do not fit "
            f"{ref_dtype} references (max {capacity:,})"
        )


class ReferenceOutOfRange(PooledError):
    """Reference array points beyond the end of the pool."""

    def __init__(self, ref: int, pool_size: int):
        self.ref = ref
        self.pool_size = pool_size
        super().__init__(
            f"reference {ref} points beyond the end of the pool (size {pool_size})"
        )


class ValueNotInPool(PooledError):
    """Data value missing from a caller-supplied pool."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"value not in provided pool: {value!r}")


class ReplaceSourceNotFound(PooledError):
    """Replace was asked to substitute a value the pool does not hold."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"can't replace a value not in the pool: {value!r}")


class UnsupportedElementKind(PooledError):
    """Operation not allowed for columns of this element type."""

    def __init__(self, eltype: Any, operation: str = ""):
        self.eltype = eltype
        self.operation = operation
        name = getattr(eltype, "__name__", repr(eltype))
        suffix = f" for {operation}" if operation else ""
        super().__init__(f"unsupported element type {name}{suffix}")


__all__ = [
    "PooledError",
    "PoolCapacityExceeded",
    "ReferenceOutOfRange",
    "ValueNotInPool",
    "ReplaceSourceNotFound",
    "UnsupportedElementKind",
]
