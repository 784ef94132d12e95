# src/hlcdsearch/exceptions.py
"""
Error taxonomy for the HLCD search engine.

Every error here is a programmer or configuration error. They are raised at
the point of detection and are never caught inside the package. A search
that finds no code is NOT an error; it is reported through
``SearchResult.found``.

Class Hierarchy:
    HLCDSearchError (Exception)
    ├── InvalidBaseError (ValueError)
    ├── InvalidCodeParametersError (ValueError)
    ├── InvalidMinimumDistanceError (ValueError)
    ├── InvalidDigitError (ValueError)
    ├── InvalidRowIndexError (IndexError)
    ├── InvalidColIndexError (IndexError)
    ├── InvalidIdentityRowIndexError (IndexError)
    ├── InvalidColumnVectorDimensionError (ValueError)
    ├── InvalidColumnDimensionToSetError (ValueError)
    ├── InvalidMatrixDimensionsError (ValueError)
    ├── InvalidMatricesBasesError (ValueError)
    ├── CombinationCapacityError (MemoryError)
    └── UnsupportedOperationError (NotImplementedError)
"""
from __future__ import annotations


class HLCDSearchError(Exception):
    """Base class for all errors raised by hlcdsearch."""
    pass


class InvalidBaseError(HLCDSearchError, ValueError):
    """Raised when a base other than 2 or 4 is used."""

    def __init__(self, base: int):
        self.base = base
        super().__init__(
            f"The base {base} is an invalid base, please enter 2 or 4."
        )


class InvalidCodeParametersError(HLCDSearchError, ValueError):
    """Raised when k is outside [1, n] or n exceeds the packed width."""

    def __init__(self, n: int, k: int, reason: str = ""):
        self.n = n
        self.k = k
        message = (
            f"The k value must be between [1, n]. The passed k value is {k} "
            f"and the passed n value is {n}."
        )
        if reason:
            message = reason
        super().__init__(message)


class InvalidMinimumDistanceError(HLCDSearchError, ValueError):
    """Raised when the minimum distance is below 3."""

    def __init__(self, d: int):
        self.d = d
        super().__init__(
            f"The minimum distance {d} is invalid. Please enter a minimum "
            f"distance >= 3."
        )


class InvalidDigitError(HLCDSearchError, ValueError):
    """Raised when a symbol value is not a digit of the base."""

    def __init__(self, digit: int, base: int):
        self.digit = digit
        self.base = base
        super().__init__(f"The digit {digit} is an invalid digit in base {base}.")


class InvalidRowIndexError(HLCDSearchError, IndexError):
    """Raised on access to a row outside [0, rows)."""

    def __init__(self, index: int, rows: int):
        self.index = index
        self.rows = rows
        super().__init__(
            f"The row {index} is an invalid row index. The minimum "
            f"(zero-based) and maximum (zero-based) rows are 0 and "
            f"{rows - 1} (both inclusive)."
        )


class InvalidColIndexError(HLCDSearchError, IndexError):
    """Raised on access to a column outside [0, columns)."""

    def __init__(self, index: int, columns: int, base: int):
        self.index = index
        self.columns = columns
        self.base = base
        super().__init__(
            f"The column {index} is an invalid column index. The minimum "
            f"(zero-based) and maximum (zero-based) columns are 0 and "
            f"{columns - 1} (both inclusive) since the base is {base}."
        )


class InvalidIdentityRowIndexError(HLCDSearchError, IndexError):
    """Raised when the identity prefix is requested for a row outside [0, k)."""

    def __init__(self, index: int, k: int, base: int):
        self.index = index
        self.k = k
        self.base = base
        super().__init__(
            f"The column {index} is an invalid column to insert the value 1 "
            f"in. The minimum (zero-based) and maximum (zero-based) columns "
            f"are 0 and {k - 1} (both inclusive) since the base is {base}."
        )


class InvalidColumnVectorDimensionError(HLCDSearchError, ValueError):
    """Raised when a column vector cannot be packed into one row word."""

    def __init__(self, length: int, base: int, max_length: int):
        self.length = length
        self.base = base
        super().__init__(
            f"The column vector has {length} entries which is outside the "
            f"allowable range [1, {max_length}] for base {base}."
        )


class InvalidColumnDimensionToSetError(HLCDSearchError, ValueError):
    """Raised when a column to install does not match the number of rows."""

    def __init__(self, matrix_rows: int, column_rows: int):
        self.matrix_rows = matrix_rows
        self.column_rows = column_rows
        super().__init__(
            f"The matrix contains {matrix_rows} rows. The column that needs "
            f"to be set in the matrix has {column_rows} rows."
        )


class InvalidMatrixDimensionsError(HLCDSearchError, ValueError):
    """Raised when matrix shapes are incompatible for an operation."""

    def __init__(self, left_shape, right_shape=None, reason: str = ""):
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape) if right_shape is not None else None
        if reason:
            message = reason
        else:
            lk, ln = self.left_shape
            rk, rn = self.right_shape
            message = (
                f"The dimension (rows * cols) of left matrix = ({lk} * {ln}) "
                f"does not match the dimension of the right matrix which is "
                f"({rk} * {rn})."
            )
        super().__init__(message)


class InvalidMatricesBasesError(HLCDSearchError, ValueError):
    """Raised when two matrices with different bases are combined."""

    def __init__(self, left_base: int, right_base: int):
        self.left_base = left_base
        self.right_base = right_base
        super().__init__(
            f"The base of the left-hand-side matrix is {left_base} which "
            f"doesn't match the right-hand-side matrix base which is "
            f"{right_base}."
        )


class CombinationCapacityError(HLCDSearchError, MemoryError):
    """Raised before allocating a combination store larger than allowed."""

    def __init__(self, required: int, limit: int):
        self.required = required
        self.limit = limit
        super().__init__(
            f"The combination store needs {required} entries which exceeds "
            f"the configured ceiling of {limit}. Reduce k or raise "
            f"SearchConfig.max_combinations."
        )


class UnsupportedOperationError(HLCDSearchError, NotImplementedError):
    """Raised for code paths that exist but are not supported."""
    pass
