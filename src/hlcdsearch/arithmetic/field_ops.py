# src/hlcdsearch/arithmetic/field_ops.py
"""
Bit-parallel GF(4) and GF(2) vector arithmetic on packed words.

All operations act on every symbol of a packed vector at once. For GF(4)
each symbol x = h*omega + l is stored as the bit pair (h, l), so

    omega * omega = omega + 1     (0b10 * 0b10 = 0b11)

and the element-wise product of two vectors is

    a = (v1 >> 1) & ONE            # omega components of v1
    b = (v2 >> 1) & ONE            # omega components of v2
    v1 * v2 = (((v1 & b) ^ (v2 & a)) << 1) ^ (a & b) ^ (v1 & v2)

which agrees with ``MUL_TABLE`` on every pair of digits.

Hermitian conjugation fixes 0 and 1 and swaps omega with omega-bar.
"""
from __future__ import annotations

from .hamming_weight import HammingWeight
from .packing import ALL_ONES, ONE, TWO, check_base, check_digit


class FieldArithmetic:
    """
    Vector operations in GF(base) for packed vectors.

    Parameters
    ----------
    base : int
        2 or 4.

    Examples
    --------
    >>> gf4 = FieldArithmetic(4)
    >>> gf4.multiply_by_scalar(0b01_10_11, 2)   # [1, w, w'] * w
    45
    """

    def __init__(self, base: int = 4):
        self.base = check_base(base)
        self._weight = HammingWeight(base)

    def __repr__(self) -> str:
        return f"FieldArithmetic(base={self.base})"

    # --- Addition ---

    @staticmethod
    def add(v1: int, v2: int) -> int:
        """Add (or subtract) two vectors; characteristic 2 makes both XOR."""
        return v1 ^ v2

    subtract = add

    # --- Multiplication ---

    def multiply(self, v1: int, v2: int) -> int:
        """Element-wise (Hadamard) product of two packed vectors."""
        if self.base == 2:
            return v1 & v2
        a = (v1 >> 1) & ONE
        b = (v2 >> 1) & ONE
        return (((v1 & b) ^ (v2 & a)) << 1) ^ (a & b) ^ (v1 & v2)

    def multiply_by_two(self, v: int) -> int:
        """Multiply every symbol by omega."""
        return self.multiply(v, TWO)

    def multiply_by_three(self, v: int) -> int:
        """Multiply every symbol by omega-bar."""
        return self.multiply(v, ALL_ONES)

    def multiply_by_scalar(self, v: int, digit: int) -> int:
        check_digit(digit, self.base)
        if digit == 3:
            return self.multiply(v, ALL_ONES)
        if digit == 2:
            return self.multiply(v, TWO)
        if digit == 1:
            return v
        return 0

    def scalar_multiples(self, v: int):
        """Return ``[1*v, 2*v, 3*v]`` (just ``[v]`` in base 2)."""
        if self.base == 2:
            return [v]
        return [v, self.multiply(v, TWO), self.multiply(v, ALL_ONES)]

    # --- Conjugation and inner products ---

    def hermitian_vector(self, v: int) -> int:
        """Conjugate every symbol (2 <-> 3); the identity in base 2."""
        if self.base == 2:
            return v
        a = v & ONE
        b = (v & TWO) >> 1
        c = a ^ b
        ones_only = v & c
        twos_and_threes = v ^ ones_only
        # flip the low bit of every 2 or 3
        high = twos_and_threes & TWO
        return (twos_and_threes ^ (high >> 1)) | ones_only

    def _fold(self, product: int) -> int:
        """XOR-fold the symbols of a product vector into one field element."""
        if self.base == 2:
            return self._weight(product) & 1
        a = product & ONE
        b = (product & TWO) >> 1
        c = a ^ b
        ones = product & c
        twos = c ^ ones
        threes = a & b
        result_one = self._weight(ones) % 2
        result_two = (self._weight(twos) % 2) << 1
        parity_three = self._weight(threes) % 2
        result_three = (parity_three << 1) | parity_three
        return (result_one | result_two) ^ result_three

    def inner_product(self, v1: int, v2: int) -> int:
        """Sum over symbols of ``v1[i] * v2[i]``."""
        return self._fold(self.multiply(v1, v2))

    def hermitian_inner_product(self, codeword: int, v: int) -> int:
        """Inner product of ``codeword`` with the conjugate of ``v``."""
        return self._fold(self.multiply(codeword, self.hermitian_vector(v)))

    # --- Weight ---

    def hamming_weight(self, v: int) -> int:
        return self._weight(v)
