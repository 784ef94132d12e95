"""
Packed-vector finite field arithmetic.

    packing.py         - word layout, masks, MUL/DIV tables, pack/unpack
    hamming_weight.py  - bit-parallel Hamming weight
    field_ops.py       - FieldArithmetic: add, multiply, scalar multiply,
                         (Hermitian) inner products
"""

from .packing import (
    ONE,
    TWO,
    THREE,
    F,
    ALL_ONES,
    VALID_BASES,
    MUL_TABLE,
    DIV_TABLE,
    DIV_SENTINEL,
    CONJUGATE,
    is_valid_base,
    check_base,
    is_valid_digit,
    check_digit,
    symbol_width,
    max_columns,
    symbol_mask,
    vector_mask,
    ones_vector,
    pack_digits,
    unpack_digits,
    conjugate_digit,
    field_multiply,
    field_divide,
)
from .hamming_weight import HammingWeight, hamming_weight
from .field_ops import FieldArithmetic

__all__ = [
    "ONE",
    "TWO",
    "THREE",
    "F",
    "ALL_ONES",
    "VALID_BASES",
    "MUL_TABLE",
    "DIV_TABLE",
    "DIV_SENTINEL",
    "CONJUGATE",
    "is_valid_base",
    "check_base",
    "is_valid_digit",
    "check_digit",
    "symbol_width",
    "max_columns",
    "symbol_mask",
    "vector_mask",
    "ones_vector",
    "pack_digits",
    "unpack_digits",
    "conjugate_digit",
    "field_multiply",
    "field_divide",
    "HammingWeight",
    "hamming_weight",
    "FieldArithmetic",
]
