# src/hlcdsearch/matrix/packed_matrix.py
"""
Matrices over GF(2) / GF(4) stored as one packed word per row.

A ``k x n`` PackedMatrix keeps ``k`` integers, each holding the ``n``
symbols of a row in the layout described in ``arithmetic.packing``. The
search engine fills rows of the generator matrix directly as packed words;
cell, row and column accessors are bounds-checked and raise the errors in
``hlcdsearch.exceptions`` instead of corrupting neighbouring symbols.

The determinant uses a fraction-free (Bareiss) elimination in which every
division is exact by construction, so the fixed ``DIV_TABLE`` never sees a
zero divisor once a non-zero pivot is secured.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..arithmetic.field_ops import FieldArithmetic
from ..arithmetic.packing import (
    check_base,
    check_digit,
    field_divide,
    field_multiply,
    max_columns,
    pack_digits,
    symbol_mask,
    symbol_width,
    unpack_digits,
)
from ..exceptions import (
    InvalidColIndexError,
    InvalidColumnDimensionToSetError,
    InvalidColumnVectorDimensionError,
    InvalidMatricesBasesError,
    InvalidMatrixDimensionsError,
    InvalidRowIndexError,
)


class PackedMatrix:
    """
    A ``k x n`` matrix over GF(base) with one packed word per row.

    Parameters
    ----------
    n : int
        Number of columns (symbols per row).
    k : int
        Number of rows.
    base : int
        2 or 4.
    rows : Iterable[int], optional
        Initial packed rows. Defaults to the zero matrix.

    Examples
    --------
    >>> m = PackedMatrix.from_digits([[1, 0, 2], [0, 1, 3]], base=4)
    >>> m.get_cell(0, 2)
    2
    >>> m.transpose().shape
    (3, 2)
    """

    def __init__(
        self,
        n: int,
        k: int,
        base: int = 4,
        rows: Optional[Iterable[int]] = None,
    ):
        check_base(base)
        if not 1 <= n <= max_columns(base) or k < 1:
            raise InvalidMatrixDimensionsError(
                (k, n),
                reason=(
                    f"A packed matrix needs k >= 1 rows and 1 <= n <= "
                    f"{max_columns(base)} columns in base {base}; got "
                    f"k={k}, n={n}."
                ),
            )
        self._n = n
        self._k = k
        self._base = base
        self._width = symbol_width(base)
        self._field = FieldArithmetic(base)
        if rows is None:
            self._rows: List[int] = [0] * k
        else:
            self._rows = [int(r) for r in rows]
            if len(self._rows) != k:
                raise InvalidMatrixDimensionsError(
                    (k, n),
                    reason=f"Expected {k} rows, received {len(self._rows)}.",
                )
            for r in self._rows:
                self._check_vector(r)

    # --- Construction helpers ---

    @classmethod
    def from_rows(cls, rows: Sequence[int], n: int, base: int = 4) -> "PackedMatrix":
        """Build a matrix from packed row words."""
        return cls(n, len(rows), base, rows)

    @classmethod
    def from_digits(cls, digits, base: int = 4) -> "PackedMatrix":
        """Build a matrix from a 2-D sequence (or numpy array) of digits."""
        array = np.asarray(digits, dtype=np.int64)
        if array.ndim != 2:
            raise InvalidMatrixDimensionsError(
                array.shape, reason="Expected a 2-D array of digits."
            )
        k, n = array.shape
        rows = [pack_digits(list(row), base) for row in array]
        return cls(n, k, base, rows)

    @classmethod
    def identity(cls, size: int, base: int = 4) -> "PackedMatrix":
        return cls.from_digits(np.eye(size, dtype=np.int64), base)

    def to_digits(self) -> np.ndarray:
        """Return the matrix as a ``(k, n)`` numpy array of uint8 digits."""
        return np.array(
            [unpack_digits(r, self._n, self._base) for r in self._rows],
            dtype=np.uint8,
        ).reshape(self._k, self._n)

    def copy(self) -> "PackedMatrix":
        return PackedMatrix(self._n, self._k, self._base, list(self._rows))

    __copy__ = copy

    # --- Properties ---

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    @property
    def base(self) -> int:
        return self._base

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._k, self._n)

    @property
    def rows(self) -> Tuple[int, ...]:
        """Packed rows (read-only snapshot)."""
        return tuple(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedMatrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._base == other._base
            and self._rows == other._rows
        )

    def __repr__(self) -> str:
        return f"PackedMatrix(n={self._n}, k={self._k}, base={self._base}, rows={self._rows})"

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(d) for d in unpack_digits(r, self._n, self._base))
            for r in self._rows
        )

    # --- Bounds checks ---

    def _check_row(self, index: int) -> None:
        if not 0 <= index < self._k:
            raise InvalidRowIndexError(index, self._k)

    def _check_col(self, index: int) -> None:
        if not 0 <= index < max_columns(self._base):
            raise InvalidColIndexError(index, max_columns(self._base), self._base)
        if index >= self._n:
            raise InvalidColIndexError(index, self._n, self._base)

    def _check_vector(self, vector: int) -> None:
        if vector < 0 or vector >> (self._width * self._n):
            raise ValueError(
                f"Vector {vector:#x} does not fit in {self._n} symbols of "
                f"base {self._base}."
            )

    def _shift(self, column: int) -> int:
        return self._width * (self._n - column - 1)

    # --- Cells ---

    def get_cell(self, row: int, column: int) -> int:
        self._check_col(column)
        self._check_row(row)
        return (self._rows[row] >> self._shift(column)) & symbol_mask(self._base)

    def set_cell(self, row: int, column: int, value: int) -> None:
        check_digit(value, self._base)
        self._check_col(column)
        self._check_row(row)
        shift = self._shift(column)
        cleared = self._rows[row] & ~(symbol_mask(self._base) << shift)
        self._rows[row] = cleared | (value << shift)

    # --- Rows ---

    def get_row(self, index: int) -> int:
        self._check_row(index)
        return self._rows[index]

    def set_row(self, index: int, vector: int) -> None:
        self._check_row(index)
        self._check_vector(vector)
        self._rows[index] = vector

    def row_to_column(self, index: int) -> List[int]:
        """Digits of row ``index`` as a column vector (left-most first)."""
        self._check_row(index)
        return unpack_digits(self._rows[index], self._n, self._base)

    def multiply_row_by_digit(self, index: int, digit: int) -> int:
        """Return row ``index`` scaled by ``digit`` (the matrix is unchanged)."""
        self._check_row(index)
        return self._field.multiply_by_scalar(self._rows[index], digit)

    # --- Columns ---

    def get_column(self, index: int) -> List[int]:
        self._check_col(index)
        shift = self._shift(index)
        mask = symbol_mask(self._base)
        return [(r >> shift) & mask for r in self._rows]

    def set_column(self, index: int, column: Sequence[int]) -> None:
        for digit in column:
            check_digit(int(digit), self._base)
        self._check_col(index)
        if len(column) != self._k:
            raise InvalidColumnDimensionToSetError(self._k, len(column))
        for r, digit in enumerate(column):
            self.set_cell(r, index, int(digit))

    def column_to_row(self, index: int) -> int:
        """Pack column ``index`` (``k`` digits) into a single row word."""
        column = self.get_column(index)
        if not 1 <= len(column) <= max_columns(self._base):
            raise InvalidColumnVectorDimensionError(
                len(column), self._base, max_columns(self._base)
            )
        return pack_digits(column, self._base)

    # --- Transposition ---

    def transpose(self) -> "PackedMatrix":
        """Return the ``n x k`` transpose."""
        rows = [self.column_to_row(c) for c in range(self._n)]
        return PackedMatrix(self._k, self._n, self._base, rows)

    def hermitian_transpose(self) -> "PackedMatrix":
        """Transpose and conjugate every entry (swap omega and omega-bar)."""
        result = self.transpose()
        if self._base == 4:
            result._rows = [self._field.hermitian_vector(r) for r in result._rows]
        return result

    def conjugate(self) -> "PackedMatrix":
        result = self.copy()
        if self._base == 4:
            result._rows = [self._field.hermitian_vector(r) for r in result._rows]
        return result

    # --- Products ---

    def multiply(self, other: "PackedMatrix") -> "PackedMatrix":
        """
        Matrix product ``self * other`` over GF(base).

        Raises
        ------
        InvalidMatricesBasesError
            If the two bases differ.
        InvalidMatrixDimensionsError
            If ``self.n != other.k``.
        """
        if self._base != other._base:
            raise InvalidMatricesBasesError(self._base, other._base)
        if self._n != other._k:
            raise InvalidMatrixDimensionsError(self.shape, other.shape)
        columns = [other.column_to_row(c) for c in range(other._n)]
        result = PackedMatrix(other._n, self._k, self._base)
        for r, row in enumerate(self._rows):
            for c, column in enumerate(columns):
                value = self._field.inner_product(row, column)
                if value:
                    result.set_cell(r, c, value)
        return result

    __matmul__ = multiply

    def get_g_prime(self, last_row: Optional[int] = None) -> "PackedMatrix":
        """
        Return ``S * S^H`` where ``S`` holds rows ``0..last_row``.

        Parameters
        ----------
        last_row : int, optional
            Zero-based index of the last row to include. Defaults to the
            last row of the matrix.
        """
        if last_row is None:
            last_row = self._k - 1
        self._check_row(last_row)
        sub = PackedMatrix(self._n, last_row + 1, self._base, self._rows[: last_row + 1])
        return sub.multiply(sub.hermitian_transpose())

    # --- Determinant ---

    def get_determinant(self) -> int:
        """
        Determinant over GF(base) by fraction-free (Bareiss) elimination.

        Returns
        -------
        int
            A field digit; 0 exactly when the matrix is singular.
        """
        if self._n != self._k:
            raise InvalidMatrixDimensionsError(
                self.shape,
                reason=f"The determinant needs a square matrix, got {self._k} x {self._n}.",
            )
        m = self.copy()
        size = self._k
        pivot = 1
        for step in range(size - 1):
            if m.get_cell(step, step) == 0:
                for swap in range(step + 1, size):
                    if m.get_cell(swap, step) != 0:
                        m._rows[step], m._rows[swap] = m._rows[swap], m._rows[step]
                        break
                else:
                    return 0
            diagonal = m.get_cell(step, step)
            for i in range(step + 1, size):
                right = m.get_cell(i, step)
                for j in range(step + 1, size):
                    top = m.get_cell(step, j)
                    # subtraction is XOR in characteristic 2
                    value = field_multiply(m.get_cell(i, j), diagonal) ^ field_multiply(right, top)
                    m.set_cell(i, j, field_divide(value, pivot))
            pivot = diagonal
        return m.get_cell(size - 1, size - 1)

    def is_invertible(self) -> bool:
        return self.get_determinant() != 0

    def contains_zero_row(self) -> bool:
        return any(r == 0 for r in self._rows)
