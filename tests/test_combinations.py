"""
Tests for CombinationStore: segmentation, capacity and the coefficient
layout of the stored combinations.
"""
import numpy as np
import pytest

from hlcdsearch import CombinationCapacityError, SearchConfig
from hlcdsearch.arithmetic import FieldArithmetic
from hlcdsearch.exceptions import InvalidRowIndexError
from hlcdsearch.matrix import PackedMatrix
from hlcdsearch.search import CombinationStore
from hlcdsearch.testing import make_rng, random_matrix, span


# ============================================================================
# Storage
# ============================================================================

class TestStorage:

    def test_size_and_zero_initialised(self):
        store = CombinationStore(3, 4)
        assert len(store) == 64
        assert list(store) == [0] * 64
        assert store.segment_count == 1

    def test_segmented_access(self):
        store = CombinationStore(2, 4, SearchConfig(segment_length=5))
        assert store.segment_count == 4
        for i in range(16):
            store[i] = 1000 + i
        assert [store.get(i) for i in range(16)] == list(range(1000, 1016))
        assert list(store) == list(range(1000, 1016))
        np.testing.assert_array_equal(store.to_numpy(), np.arange(1000, 1016))

    def test_large_values_round_trip(self):
        store = CombinationStore(1, 4)
        value = (1 << 60) - 1
        store.set(3, value)
        assert store.get(3) == value
        assert isinstance(store.get(3), int)

    def test_out_of_range(self):
        store = CombinationStore(2, 2)
        with pytest.raises(IndexError):
            store.get(4)
        with pytest.raises(IndexError):
            store.set(-1, 0)

    def test_capacity_ceiling(self):
        config = SearchConfig(max_combinations=15)
        with pytest.raises(CombinationCapacityError) as info:
            CombinationStore(2, 4, config)
        assert isinstance(info.value, MemoryError)
        assert info.value.required == 16
        CombinationStore(3, 2, config)

    def test_equality_ignores_segmentation(self):
        a = CombinationStore(2, 4)
        b = CombinationStore(2, 4, SearchConfig(segment_length=3))
        a[7] = b[7] = 42
        assert a == b
        b[8] = 1
        assert a != b


# ============================================================================
# Combination layout
# ============================================================================

class TestLayout:

    def test_rows_sit_at_powers_of_the_base(self):
        rng = make_rng(21)
        m = random_matrix(rng, n=8, k=3)
        store = CombinationStore.from_matrix(m)
        assert store[0] == 0
        for r in range(3):
            assert store[4 ** r] == m.get_row(r)

    def test_index_digits_are_coefficients(self):
        rng = make_rng(22)
        m = random_matrix(rng, n=8, k=3)
        field = FieldArithmetic(4)
        store = CombinationStore.from_matrix(m)
        for index in range(64):
            expected = 0
            digits = index
            for r in range(3):
                expected ^= field.multiply_by_scalar(m.get_row(r), digits % 4)
                digits //= 4
            assert store[index] == expected

    def test_closure_matches_span(self):
        rng = make_rng(23)
        for base in (2, 4):
            m = random_matrix(rng, n=10, k=4, base=base)
            store = CombinationStore.from_matrix(m)
            assert set(store) == span(list(m.rows), 10, base)

    def test_incremental_equals_populated(self):
        m = PackedMatrix.from_digits([[1, 0, 0, 1, 1], [0, 1, 0, 1, 2], [0, 0, 1, 1, 3]])
        incremental = CombinationStore(3, 4, SearchConfig(segment_length=7))
        for r in range(3):
            incremental.extend_with_row(r, m.get_row(r))
        assert incremental == CombinationStore.from_matrix(m)

    def test_extend_rejects_bad_row(self):
        store = CombinationStore(2, 4)
        with pytest.raises(InvalidRowIndexError):
            store.extend_with_row(2, 1)

    def test_populate_rejects_mismatched_matrix(self):
        store = CombinationStore(2, 4)
        with pytest.raises(ValueError):
            store.populate_combinations(PackedMatrix(5, 3, 4))
