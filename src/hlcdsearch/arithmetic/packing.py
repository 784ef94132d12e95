# src/hlcdsearch/arithmetic/packing.py
"""
Packed vector layout and scalar field tables.

A vector of length n is stored in a single 64-bit word, most significant
symbol first. Base 4 uses two bits per symbol (30 usable symbols), base 2
uses one bit per symbol (62 usable symbols). Column 0 is the left-most of
the n used symbols, i.e. the highest symbol of the word::

    n = 4, base = 4, digits [1, 0, 3, 2]  ->  0b01_00_11_10

Within a GF(4) symbol the high bit is the omega component and the low bit
is the 1 component, so 0, 1, 2, 3 encode 0, 1, omega, omega-bar.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..exceptions import (
    InvalidBaseError,
    InvalidColIndexError,
    InvalidDigitError,
)


# =============================================================================
# Bit masks
# =============================================================================

ONE = 0x5555_5555_5555_5555       # low bit of every 2-bit symbol
TWO = 0xAAAA_AAAA_AAAA_AAAA       # high bit of every 2-bit symbol
THREE = 0x3333_3333_3333_3333
F = 0x0F0F_0F0F_0F0F_0F0F
ALL_ONES = 0xFFFF_FFFF_FFFF_FFFF

VALID_BASES = (2, 4)


# =============================================================================
# Scalar field tables (rows/cols ordered 0, 1, omega, omega-bar)
# =============================================================================

MUL_TABLE = np.array(
    [
        [0, 0, 0, 0],
        [0, 1, 2, 3],
        [0, 2, 3, 1],
        [0, 3, 1, 2],
    ],
    dtype=np.uint8,
)

DIV_SENTINEL = -99

DIV_TABLE = np.array(
    [
        [DIV_SENTINEL, 0, 0, 0],
        [DIV_SENTINEL, 1, 3, 2],
        [DIV_SENTINEL, 2, 1, 3],
        [DIV_SENTINEL, 3, 2, 1],
    ],
    dtype=np.int8,
)

CONJUGATE = (0, 1, 3, 2)


# =============================================================================
# Validation helpers
# =============================================================================

def is_valid_base(base: int) -> bool:
    return base in VALID_BASES


def check_base(base: int) -> int:
    """Return ``base`` unchanged, raising InvalidBaseError if unsupported."""
    if not is_valid_base(base):
        raise InvalidBaseError(base)
    return base


def is_valid_digit(digit: int, base: int) -> bool:
    return 0 <= digit < base


def check_digit(digit: int, base: int) -> int:
    if not is_valid_digit(digit, base):
        raise InvalidDigitError(digit, base)
    return digit


def symbol_width(base: int) -> int:
    """Number of bits used by one symbol: 1 for base 2, 2 for base 4."""
    check_base(base)
    return 1 if base == 2 else 2


def max_columns(base: int) -> int:
    """Number of usable symbol slots in a 64-bit word (62 or 30)."""
    check_base(base)
    return 62 if base == 2 else 30


def symbol_mask(base: int) -> int:
    return (1 << symbol_width(base)) - 1


def vector_mask(n: int, base: int) -> int:
    """Mask covering the n used symbols of a packed vector."""
    return (1 << (symbol_width(base) * n)) - 1


def ones_vector(n: int, base: int) -> int:
    """Packed vector with every one of its n symbols equal to 1."""
    width = symbol_width(base)
    result = 0
    for _ in range(n):
        result = (result << width) | 1
    return result


# =============================================================================
# Packing / unpacking
# =============================================================================

def pack_digits(digits: Sequence[int], base: int) -> int:
    """
    Pack a sequence of digits into a single word, first digit highest.

    Parameters
    ----------
    digits : Sequence[int]
        Symbol values, each in [0, base).
    base : int
        2 or 4.

    Returns
    -------
    int
        The packed vector.

    Example
    -------
    >>> pack_digits([1, 0, 3, 2], 4)
    78
    """
    check_base(base)
    if len(digits) > max_columns(base):
        raise InvalidColIndexError(len(digits) - 1, max_columns(base), base)
    width = symbol_width(base)
    result = 0
    for digit in digits:
        digit = int(digit)
        check_digit(digit, base)
        result = (result << width) | digit
    return result


def unpack_digits(vector: int, n: int, base: int) -> List[int]:
    """Unpack the n used symbols of ``vector``, left-most column first."""
    check_base(base)
    if n < 0 or n > max_columns(base):
        raise InvalidColIndexError(n - 1, max_columns(base), base)
    width = symbol_width(base)
    mask = symbol_mask(base)
    return [
        (vector >> (width * (n - 1 - c))) & mask
        for c in range(n)
    ]


def conjugate_digit(digit: int) -> int:
    """Hermitian conjugate of a single GF(4) digit (swaps omega and omega-bar)."""
    return CONJUGATE[digit]


def field_multiply(x: int, y: int) -> int:
    return int(MUL_TABLE[x][y])


def field_divide(x: int, y: int) -> int:
    """Divide two field digits using the fixed table.

    Raises
    ------
    ZeroDivisionError
        If ``y`` is zero.
    """
    value = int(DIV_TABLE[x][y])
    if value == DIV_SENTINEL:
        raise ZeroDivisionError(f"Division of {x} by zero in GF(4)")
    return value
