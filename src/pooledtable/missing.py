# -------------------------------------
# missing marker
# -------------------------------------
"""
The NA marker: an out-of-band value meaning "missing".

NA is a singleton distinct from every valid element, None included.
Pooled columns store it as reference 0 and never put it in a pool.
"""
from __future__ import annotations

from typing import Any


class NAType:
    """Type of the NA singleton."""

    _instance: "NAType | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NA"

    def __reduce__(self):
        return (NAType, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


NA = NAType()


def is_na(value: Any) -> bool:
    """True if value is the NA marker."""
    return value is NA


def na_mask(values) -> list[bool]:
    """Mask with True wherever values holds NA."""
    return [v is NA for v in values]
