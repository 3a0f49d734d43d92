# -------------------------------------
# PyArrow interop
# -------------------------------------
"""
Convert between PooledColumn and pyarrow DictionaryArray.

A DictionaryArray is the Arrow form of the same idea: integer indices
into a dictionary of values. Arrow indices are 0-based with nulls for
missing, so ref r maps to index r - 1 and ref 0 maps to null.
"""
from __future__ import annotations

from typing import Any, TYPE_CHECKING

import numpy as np

from .column import PooledColumn
from .missing import NA

# PyArrow is optional - only required for these conversions
pa = None


def _import_pyarrow():
    """Import pyarrow lazily, raising a clear error if not installed."""
    global pa
    if pa is None:
        try:
            import pyarrow as _pa
            pa = _pa
        except ImportError:
            raise ImportError(
                "PyArrow is required for Arrow conversion. "
                "Install with: pip install pyarrow"
            )
    return pa


if TYPE_CHECKING:
    import pyarrow as pa


def to_arrow(col: PooledColumn) -> "pa.DictionaryArray":
    """
    Convert a PooledColumn to a DictionaryArray.

    The dictionary is the full pool, unused slots included.
    """
    _pa = _import_pyarrow()
    indices = col.refs.astype(np.int64) - 1
    missing = indices < 0
    indices[missing] = 0
    index_array = _pa.array(indices, type=_pa.int64(), mask=missing)
    return _pa.DictionaryArray.from_arrays(index_array, _pa.array(col.pool))


def from_arrow(array: Any, *, ref_dtype=None, eltype: type | None = None) -> PooledColumn:
    """
    Build a PooledColumn from a pyarrow Array or ChunkedArray.

    Dictionary and plain arrays are both accepted. Nulls become NA and the
    pool is rebuilt in sorted order, so Arrow dictionary order is not kept.
    """
    _pa = _import_pyarrow()
    if isinstance(array, _pa.ChunkedArray):
        array = array.combine_chunks()
    values = [NA if v is None else v for v in array.to_pylist()]
    return PooledColumn.from_values(values, ref_dtype=ref_dtype, eltype=eltype)
