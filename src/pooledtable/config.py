# -------------------------------------
# pooledtable shared configuration
# -------------------------------------
"""
Module-level defaults:
- REF_DTYPE: reference width used when a column is built without ref_dtype
- MAX_FORMAT_ROWS: largest column format_column will render
"""
import numpy as np

DEFAULT_REF_DTYPE = np.dtype(np.uint16)
MAX_FORMAT_ROWS = 100_000

_REF_DTYPE = DEFAULT_REF_DTYPE


def as_ref_dtype(dtype) -> np.dtype:
    """Normalize dtype, rejecting anything that is not an unsigned integer."""
    dt = np.dtype(dtype)
    if dt.kind != "u":
        raise ValueError(f"reference dtype must be an unsigned integer type, got {dt}")
    return dt


def get_ref_dtype() -> np.dtype:
    """Return the default reference dtype."""
    return _REF_DTYPE


def set_ref_dtype(dtype) -> np.dtype:
    """Set the default reference dtype. Returns the previous one."""
    global _REF_DTYPE
    previous = _REF_DTYPE
    _REF_DTYPE = as_ref_dtype(dtype)
    return previous


def reset_ref_dtype() -> None:
    """Restore the default reference dtype (uint16)."""
    global _REF_DTYPE
    _REF_DTYPE = DEFAULT_REF_DTYPE


def resolve_ref_dtype(dtype=None) -> np.dtype:
    """Per-call dtype if given, else the configured default."""
    if dtype is None:
        return _REF_DTYPE
    return as_ref_dtype(dtype)
