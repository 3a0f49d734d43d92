# -------------------------------------
# In-place value replacement
# -------------------------------------
"""
Replace every occurrence of one value with another, in place.

Transitions, keyed on whether each side is NA:

    from      to                 effect
    NA        NA                 nothing
    x         NA                 refs pointing at x become 0
    NA        y (in pool)        refs equal to 0 point at y
    NA        y (new)            y is appended, refs equal to 0 point at it
    x         y (in pool)        refs pointing at x point at y; x stays in
                                 the pool as an unused slot
    x         y (new)            the pool slot of x is overwritten with y

A concrete `from` value must be in the pool, else ReplaceSourceNotFound
is raised before anything changes.
"""
from __future__ import annotations

import logging
from typing import Any

from .errors import ReplaceSourceNotFound
from .missing import NA
from .pool import check_capacity, pool_index

logger = logging.getLogger(__name__)


def replace(col, from_value: Any, to_value: Any) -> Any:
    """
    Replace from_value with to_value in col.

    Args:
        col: PooledColumn to modify
        from_value: Value (or NA) to replace
        to_value: Replacement value (or NA)

    Returns:
        to_value

    Raises:
        ReplaceSourceNotFound: If from_value is concrete and not in the pool
        PoolCapacityExceeded: If appending to_value would overflow the pool
    """
    refs = col._refs
    pool = col._pool

    if from_value is NA and to_value is NA:
        return NA

    if to_value is NA:
        fromidx = pool_index(pool, from_value)
        if fromidx == 0:
            raise ReplaceSourceNotFound(from_value)
        refs[refs == fromidx] = 0
        logger.debug("replace %r -> NA (pool slot %d)", from_value, fromidx)
        return NA

    to_value = col._convert(to_value)

    if from_value is NA:
        toidx = pool_index(pool, to_value)
        if toidx == 0:
            check_capacity(len(pool) + 1, refs.dtype)
            pool.append(to_value)
            toidx = len(pool)
        refs[refs == 0] = toidx
        logger.debug("replace NA -> %r (pool slot %d)", to_value, toidx)
        return to_value

    fromidx = pool_index(pool, from_value)
    if fromidx == 0:
        raise ReplaceSourceNotFound(from_value)

    toidx = pool_index(pool, to_value)
    if toidx != 0:
        refs[refs == fromidx] = toidx
        logger.debug("replace %r -> %r: merged slot %d into %d", from_value, to_value, fromidx, toidx)
    else:
        pool[fromidx - 1] = to_value
        logger.debug("replace %r -> %r: renamed slot %d", from_value, to_value, fromidx)
    return to_value
