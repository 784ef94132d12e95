# src/hlcdsearch/testing/__init__.py
"""
hlcdsearch Testing Utilities.

Symbol-at-a-time reference arithmetic and seeded random packed data used
by the test suite to check the bit-parallel implementations.

Available Functions
-------------------
- make_rng: seeded numpy Generator
- random_vector / random_vectors / random_matrix: random packed data
- naive_multiply / naive_weight / naive_conjugate / naive_inner_product
- naive_matrix_product: digit-array product over the field
- span: every linear combination of a list of rows
"""

from hlcdsearch.testing.testing_utils import (
    DEFAULT_SEED,
    make_rng,
    random_digits,
    random_vector,
    random_vectors,
    random_matrix,
    naive_multiply,
    naive_weight,
    naive_conjugate,
    naive_inner_product,
    naive_matrix_product,
    span,
)

__all__ = [
    "DEFAULT_SEED",
    "make_rng",
    "random_digits",
    "random_vector",
    "random_vectors",
    "random_matrix",
    "naive_multiply",
    "naive_weight",
    "naive_conjugate",
    "naive_inner_product",
    "naive_matrix_product",
    "span",
]
