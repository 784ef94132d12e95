# src/hlcdsearch/matrix/__init__.py
"""
Packed matrices over GF(2) / GF(4).

- PackedMatrix: one packed word per row, bounds-checked cell/row/column
  access, (Hermitian) transpose, products and the Bareiss determinant
"""

from hlcdsearch.matrix.packed_matrix import PackedMatrix

__all__ = ["PackedMatrix"]
