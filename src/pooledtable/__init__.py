# -------------------------------------
# pooledtable
# -------------------------------------
"""
Dictionary-encoded ("pooled") columns.

A PooledColumn stores each distinct value once in a sorted pool and each
element as a small unsigned integer reference into it (0 = missing).

This package provides:
- Encoding: PooledColumn.from_values, build_pool, build_pool_with
- Shared pools for two columns: pooled_pair
- In-place replacement: replace
- Distinct values: unique, levels, level_to_index, index_to_level
- Ordering: groupsort_indexer, order, sort
- Dict-table joins on pooled keys: table_join
- Display: format_column, print_column
- Arrow conversion: to_arrow, from_arrow (needs pyarrow)
"""

from .arrow import from_arrow, to_arrow
from .column import PooledColumn
from .config import get_ref_dtype, reset_ref_dtype, set_ref_dtype
from .dense import DenseColumn
from .display import format_column, print_column
from .dual import pooled_pair
from .errors import (
    PoolCapacityExceeded,
    PooledError,
    ReferenceOutOfRange,
    ReplaceSourceNotFound,
    UnsupportedElementKind,
    ValueNotInPool,
)
from .grouping import groupsort_indexer, order, sort
from .levels import index_to_level, level_to_index, levels, unique
from .missing import NA, NAType, is_na
from .pool import build_pool, build_pool_with, capacity, pool_index
from .protocols import Column
from .replace import replace
from .table import table_column, table_join, table_pool_column

__all__ = [
    # columns
    "PooledColumn",
    "DenseColumn",
    "Column",
    "NA",
    "NAType",
    "is_na",
    # pool builder
    "build_pool",
    "build_pool_with",
    "capacity",
    "pool_index",
    # shared pools
    "pooled_pair",
    # mutation
    "replace",
    # levels
    "unique",
    "levels",
    "level_to_index",
    "index_to_level",
    # ordering
    "groupsort_indexer",
    "order",
    "sort",
    # tables
    "table_column",
    "table_pool_column",
    "table_join",
    # display
    "format_column",
    "print_column",
    # arrow
    "to_arrow",
    "from_arrow",
    # config
    "get_ref_dtype",
    "set_ref_dtype",
    "reset_ref_dtype",
    # errors
    "PooledError",
    "PoolCapacityExceeded",
    "ReferenceOutOfRange",
    "ValueNotInPool",
    "ReplaceSourceNotFound",
    "UnsupportedElementKind",
]
