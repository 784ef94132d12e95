#!/usr/bin/env python3
"""
Tests for the bit-parallel field arithmetic.

Every packed operation is compared against the symbol-at-a-time reference
in ``hlcdsearch.testing``:
1. element-wise multiplication agrees with MUL_TABLE, exhaustively per
   symbol and on 10,000 random vector pairs
2. scalar multiplication, conjugation and (Hermitian) inner products
3. Hamming weight for base 2 and base 4, including zero and full vectors
4. scalar division through DIV_TABLE
"""
import numpy as np
import pytest

from hlcdsearch.arithmetic import (
    ALL_ONES,
    MUL_TABLE,
    FieldArithmetic,
    HammingWeight,
    field_divide,
    field_multiply,
    hamming_weight,
    max_columns,
    pack_digits,
    unpack_digits,
)
from hlcdsearch.exceptions import InvalidBaseError, InvalidDigitError
from hlcdsearch.testing import (
    make_rng,
    naive_conjugate,
    naive_inner_product,
    naive_multiply,
    naive_weight,
    random_vector,
    random_vectors,
)


@pytest.fixture
def gf4():
    return FieldArithmetic(4)


@pytest.fixture
def gf2():
    return FieldArithmetic(2)


# ============================================================================
# Packing
# ============================================================================

class TestPacking:
    """Digit layout inside a packed word."""

    def test_first_digit_is_most_significant(self):
        assert pack_digits([1, 0, 3, 2], 4) == 0b01_00_11_10
        assert pack_digits([1, 0, 1, 1], 2) == 0b1011

    def test_unpack_inverts_pack(self):
        rng = make_rng(1)
        for base in (2, 4):
            digits = [int(x) for x in rng.integers(0, base, size=max_columns(base))]
            assert unpack_digits(pack_digits(digits, base), len(digits), base) == digits

    def test_invalid_digit_rejected(self):
        with pytest.raises(InvalidDigitError):
            pack_digits([0, 4], 4)
        with pytest.raises(InvalidDigitError):
            pack_digits([2], 2)

    def test_invalid_base_rejected(self):
        with pytest.raises(InvalidBaseError):
            FieldArithmetic(3)
        with pytest.raises(ValueError):
            hamming_weight(1, 8)


# ============================================================================
# Multiplication
# ============================================================================

class TestMultiplication:
    """Packed multiplication against MUL_TABLE."""

    def test_every_digit_pair_in_every_position(self, gf4):
        n = max_columns(4)
        for a in range(4):
            for b in range(4):
                v1 = pack_digits([a] * n, 4)
                v2 = pack_digits([b] * n, 4)
                expected = pack_digits([int(MUL_TABLE[a][b])] * n, 4)
                assert gf4.multiply(v1, v2) == expected, (a, b)

    def test_random_vector_pairs(self, gf4):
        rng = make_rng(2)
        n = max_columns(4)
        for _ in range(10_000):
            v1, v2 = random_vectors(rng, 2, n=n, base=4)
            assert gf4.multiply(v1, v2) == naive_multiply(v1, v2, n, 4)

    def test_binary_multiplication_is_and(self, gf2):
        rng = make_rng(3)
        for _ in range(500):
            v1, v2 = random_vectors(rng, 2, base=2)
            assert gf2.multiply(v1, v2) == naive_multiply(v1, v2, max_columns(2), 2)

    def test_scalar_multiples(self, gf4):
        rng = make_rng(4)
        n = max_columns(4)
        for _ in range(500):
            v = random_vector(rng, n, 4)
            for digit in range(4):
                scalar = pack_digits([digit] * n, 4)
                assert gf4.multiply_by_scalar(v, digit) == naive_multiply(v, scalar, n, 4)
            assert gf4.scalar_multiples(v) == [
                v, gf4.multiply_by_two(v), gf4.multiply_by_three(v)
            ]

    def test_multiply_by_three_uses_all_ones(self, gf4):
        assert gf4.multiply_by_three(0b01) == gf4.multiply(0b01, ALL_ONES) == 0b11

    def test_invalid_scalar(self, gf4, gf2):
        with pytest.raises(InvalidDigitError):
            gf4.multiply_by_scalar(1, 4)
        with pytest.raises(InvalidDigitError):
            gf2.multiply_by_scalar(1, 2)

    def test_addition_is_xor(self, gf4):
        assert gf4.add(0b0110, 0b0011) == 0b0101
        assert gf4.subtract(0b0110, 0b0011) == 0b0101


# ============================================================================
# Conjugation and inner products
# ============================================================================

class TestInnerProducts:

    def test_hermitian_vector_swaps_two_and_three(self, gf4):
        assert gf4.hermitian_vector(pack_digits([0, 1, 2, 3], 4)) == pack_digits([0, 1, 3, 2], 4)

    def test_hermitian_vector_random(self, gf4):
        rng = make_rng(5)
        n = max_columns(4)
        for _ in range(1000):
            v = random_vector(rng, n, 4)
            assert gf4.hermitian_vector(v) == naive_conjugate(v, n, 4)
            assert gf4.hermitian_vector(gf4.hermitian_vector(v)) == v

    def test_inner_product_random(self, gf4, gf2):
        rng = make_rng(6)
        for field, base in ((gf4, 4), (gf2, 2)):
            n = max_columns(base)
            for _ in range(2000):
                v1, v2 = random_vectors(rng, 2, n=n, base=base)
                assert field.inner_product(v1, v2) == naive_inner_product(v1, v2, n, base)

    def test_hermitian_inner_product_conjugates_second_argument(self, gf4):
        rng = make_rng(7)
        n = 12
        for _ in range(1000):
            c, v = random_vectors(rng, 2, n=n, base=4)
            expected = naive_inner_product(c, naive_conjugate(v, n, 4), n, 4)
            assert gf4.hermitian_inner_product(c, v) == expected

    def test_omega_times_omega_bar_is_one(self, gf4):
        # <w, w>_H = w * conj(w) = w * w' = 1
        assert gf4.hermitian_inner_product(0b10, 0b10) == 1
        assert gf4.inner_product(0b10, 0b10) == 3


# ============================================================================
# Hamming weight
# ============================================================================

class TestHammingWeight:

    @pytest.mark.parametrize("base", [2, 4])
    def test_zero_and_full_vectors(self, base):
        n = max_columns(base)
        full = pack_digits([base - 1] * n, base)
        assert hamming_weight(0, base) == 0
        assert hamming_weight(full, base) == n

    def test_base_four_counts_symbols_not_bits(self):
        assert hamming_weight(0b11_10_01_00, 4) == 3
        assert hamming_weight(0b11_10_01_00, 2) == 4

    @pytest.mark.parametrize("base", [2, 4])
    def test_random_vectors_match_naive_count(self, base):
        rng = make_rng(8 + base)
        weight = HammingWeight(base)
        n = max_columns(base)
        for _ in range(2000):
            v = random_vector(rng, n, base)
            assert weight(v) == weight.get_weight(v) == naive_weight(v, n, base)

    def test_field_wrapper(self, gf4):
        assert gf4.hamming_weight(pack_digits([1, 0, 2, 3], 4)) == 3


# ============================================================================
# Scalar tables
# ============================================================================

class TestScalarTables:

    def test_division_inverts_multiplication(self):
        for x in range(4):
            for y in range(1, 4):
                assert field_multiply(field_divide(x, y), y) == x

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            field_divide(2, 0)

    def test_multiplication_table_is_a_field(self):
        table = np.asarray(MUL_TABLE, dtype=int)
        assert (table == table.T).all()
        for x in range(1, 4):
            assert sorted(table[x, 1:]) == [1, 2, 3]
