# -------------------------------------
# Pool builder tests
# -------------------------------------
"""
Tests for pooledtable.pool and pooledtable.config.
"""
import random

import numpy as np
import pytest

from pooledtable import (
    NA,
    PooledColumn,
    PoolCapacityExceeded,
    ValueNotInPool,
    build_pool,
    build_pool_with,
    capacity,
    get_ref_dtype,
    pool_index,
    reset_ref_dtype,
    set_ref_dtype,
)
from pooledtable.pool import encode, missing_mask


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_ref_dtype()


class TestBuildPool:
    """Tests for build_pool / encode."""

    def test_basic(self):
        col = build_pool(["b", "a", "b", "c"])
        assert col.pool == ["a", "b", "c"]
        assert col.refs.tolist() == [2, 1, 2, 3]

    def test_pool_is_sorted_not_first_seen(self):
        col = build_pool([30, 10, 20, 10])
        assert col.pool == [10, 20, 30]
        assert col.refs.tolist() == [3, 1, 2, 1]

    def test_mask_marks_missing(self):
        col = build_pool(["a", "b", "a", "z"], [False, False, False, True])
        assert col.pool == ["a", "b"]
        assert col.refs.tolist() == [1, 2, 1, 0]

    def test_masked_values_do_not_enter_pool(self):
        col = build_pool([5, 7], [True, False])
        assert col.pool == [7]

    def test_na_values_are_missing(self):
        col = build_pool(["a", NA, "b"])
        assert col.refs.tolist() == [1, 0, 2]
        assert col.pool == ["a", "b"]

    def test_empty(self):
        col = build_pool([])
        assert len(col) == 0
        assert col.pool == []

    def test_all_missing(self):
        col = build_pool([1, 2, 3], [True, True, True])
        assert col.refs.tolist() == [0, 0, 0]
        assert col.pool == []

    def test_numpy_input(self):
        col = build_pool(np.array([3, 1, 3]))
        assert col.pool == [1, 3]
        assert all(type(v) is int for v in col.pool)

    def test_mask_length_mismatch(self):
        with pytest.raises(ValueError, match="mask"):
            build_pool([1, 2, 3], [False])

    def test_default_dtype(self):
        assert build_pool([1]).ref_dtype == np.uint16

    def test_explicit_dtype(self):
        col = build_pool([1, 2], ref_dtype=np.uint8)
        assert col.ref_dtype == np.uint8

    def test_round_trip(self):
        rng = random.Random(7)
        values = [rng.choice("abcdefg") for _ in range(200)]
        mask = [rng.random() < 0.2 for _ in range(200)]
        col = build_pool(values, mask)
        decoded = col.values()
        for v, m, d in zip(values, mask, decoded):
            if m:
                assert d is NA
            else:
                assert d == v

    def test_pool_unique_and_sorted(self):
        rng = random.Random(11)
        values = [rng.randint(0, 40) for _ in range(500)]
        pool = build_pool(values).pool
        assert pool == sorted(set(pool))


class TestCapacity:
    """Tests for pool capacity against the reference width."""

    def test_capacity_values(self):
        assert capacity(np.uint8) == 255
        assert capacity(np.uint16) == 65535

    def test_pool_at_capacity(self):
        col = build_pool(list(range(255)), ref_dtype=np.uint8)
        assert len(col.pool) == 255
        assert int(col.refs.max()) == 255

    def test_pool_over_capacity(self):
        with pytest.raises(PoolCapacityExceeded, match="pool capacity exceeded") as info:
            build_pool(list(range(256)), ref_dtype=np.uint8)
        assert info.value.size == 256
        assert info.value.capacity == 255

    def test_capacity_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_pool(list(range(256)), ref_dtype=np.uint8)

    def test_fixed_pool_over_capacity(self):
        with pytest.raises(PoolCapacityExceeded):
            build_pool_with([1], list(range(256)), ref_dtype=np.uint8)

    def test_fixed_pool_at_capacity(self):
        col = build_pool_with([0, 254], list(range(255)), ref_dtype=np.uint8)
        assert col.refs.tolist() == [1, 255]


class TestFixedPool:
    """Tests for build_pool_with / from_values(pool=...)."""

    def test_pool_is_sorted_and_deduplicated(self):
        col = build_pool_with(["b", "a"], ["c", "b", "a", "b"])
        assert col.pool == ["a", "b", "c"]
        assert col.refs.tolist() == [2, 1]

    def test_unused_pool_values_kept(self):
        col = PooledColumn.from_values([1], pool=[3, 2, 1])
        assert col.pool == [1, 2, 3]
        assert col.levels() == [1, 2, 3]

    def test_value_not_in_pool(self):
        with pytest.raises(ValueNotInPool, match="not in provided pool") as info:
            build_pool_with(["a", "x"], ["a", "b"])
        assert info.value.value == "x"

    def test_missing_values_skip_pool_check(self):
        col = build_pool_with(["a", "x"], ["a", "b"], [False, True])
        assert col.refs.tolist() == [1, 0]


class TestHelpers:
    """Tests for pool_index, missing_mask, encode."""

    def test_pool_index(self):
        pool = ["x", "y", "z"]
        assert pool_index(pool, "x") == 1
        assert pool_index(pool, "z") == 3
        assert pool_index(pool, "w") == 0
        assert pool_index(pool, NA) == 0

    def test_missing_mask_combines(self):
        assert missing_mask([1, NA, 3], [True, False, False]) == [True, True, False]

    def test_encode_returns_pair(self):
        refs, pool = encode(["q", "p"])
        assert refs.dtype == np.uint16
        assert refs.tolist() == [2, 1]
        assert pool == ["p", "q"]


class TestConfig:
    """Tests for the default reference dtype."""

    def test_default(self):
        assert get_ref_dtype() == np.uint16

    def test_set_ref_dtype(self):
        previous = set_ref_dtype(np.uint8)
        assert previous == np.uint16
        assert build_pool(["a"]).ref_dtype == np.uint8
        with pytest.raises(PoolCapacityExceeded):
            build_pool(list(range(300)))

    def test_set_ref_dtype_rejects_signed(self):
        with pytest.raises(ValueError, match="unsigned"):
            set_ref_dtype(np.int32)

    def test_reset(self):
        set_ref_dtype("uint32")
        reset_ref_dtype()
        assert get_ref_dtype() == np.uint16
