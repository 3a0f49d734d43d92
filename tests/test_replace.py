# -------------------------------------
# Replace tests
# -------------------------------------
"""
Tests for in-place replacement on PooledColumn.
"""
import numpy as np
import pytest

from pooledtable import (
    NA,
    PoolCapacityExceeded,
    PooledColumn,
    ReplaceSourceNotFound,
    replace,
)


@pytest.fixture
def abc():
    """Column ["a", "b", "a", NA]: refs [1, 2, 1, 0], pool ["a", "b"]."""
    return PooledColumn.from_values(["a", "b", "a", NA])


def _invariant_holds(col):
    refs = col.refs
    return refs.size == 0 or int(refs.max()) <= len(col.pool)


class TestReplaceTransitions:
    """One test per (from, to) transition."""

    def test_na_to_na_is_noop(self, abc):
        assert replace(abc, NA, NA) is NA
        assert abc.refs.tolist() == [1, 2, 1, 0]
        assert abc.pool == ["a", "b"]

    def test_value_to_na(self, abc):
        assert replace(abc, "a", NA) is NA
        assert abc.refs.tolist() == [0, 2, 0, 0]
        assert abc.pool == ["a", "b"]

    def test_unknown_value_to_na(self, abc):
        with pytest.raises(ReplaceSourceNotFound, match="not in the pool"):
            replace(abc, "zz", NA)
        assert abc.refs.tolist() == [1, 2, 1, 0]

    def test_na_to_existing(self, abc):
        assert replace(abc, NA, "b") == "b"
        assert abc.refs.tolist() == [1, 2, 1, 2]
        assert abc.pool == ["a", "b"]

    def test_na_to_new(self, abc):
        replace(abc, NA, "c")
        assert abc.pool == ["a", "b", "c"]
        assert abc.refs.tolist() == [1, 2, 1, 3]

    def test_merge_into_existing(self, abc):
        replace(abc, "a", "b")
        assert abc.refs.tolist() == [2, 2, 2, 0]
        assert abc.pool == ["a", "b"]  # "a" slot is left unused
        assert abc.values() == ["b", "b", "b", NA]

    def test_rename_to_new(self, abc):
        replace(abc, "a", "z")
        assert abc.pool == ["z", "b"]
        assert abc.refs.tolist() == [1, 2, 1, 0]
        assert abc.values() == ["z", "b", "z", NA]

    def test_unknown_source(self, abc):
        with pytest.raises(ReplaceSourceNotFound) as info:
            replace(abc, "q", "b")
        assert info.value.value == "q"
        assert abc.refs.tolist() == [1, 2, 1, 0]
        assert abc.pool == ["a", "b"]


class TestReplaceProperties:
    """Idempotence and invariants."""

    def test_value_to_itself(self, abc):
        replace(abc, "b", "b")
        assert abc.refs.tolist() == [1, 2, 1, 0]
        assert abc.pool == ["a", "b"]

    def test_replace_is_repeatable(self, abc):
        replace(abc, "a", "b")
        replace(abc, "a", "b")
        assert abc.refs.tolist() == [2, 2, 2, 0]

    def test_method_delegates(self, abc):
        assert abc.replace(NA, "c") == "c"
        assert abc.values() == ["a", "b", "a", "c"]

    def test_invariant_after_sequence(self, abc):
        replace(abc, NA, "c")
        replace(abc, "a", "c")
        replace(abc, "b", NA)
        replace(abc, NA, "d")
        replace(abc, "d", "e")
        assert _invariant_holds(abc)
        assert abc.values() == ["c", "e", "c", "c"]

    def test_na_to_new_past_capacity(self):
        col = PooledColumn.from_values(list(range(255)) + [NA], ref_dtype=np.uint8)
        with pytest.raises(PoolCapacityExceeded):
            replace(col, NA, 999)
        assert len(col.pool) == 255
        assert col.decode(255) is NA

    def test_rename_uses_eltype(self):
        col = PooledColumn.from_values([1.0, 2.0], eltype=float)
        replace(col, 1.0, 5)
        assert col.pool == [5.0, 2.0]
        assert type(col.pool[0]) is float

    def test_other_column_unaffected(self, abc):
        other = abc.copy()
        replace(abc, "a", "b")
        assert other.refs.tolist() == [1, 2, 1, 0]
