# src/hlcdsearch/search/combinations.py
"""
Storage for every linear combination of the rows of a generator matrix.

Index ``i`` of the store, written in the field base, is the coefficient
vector of the combination it holds: digit ``r`` of ``i`` multiplies row
``r``. Accepting row ``r`` therefore writes the block ``[q**r, q**(r+1))``
with

    comb[c * q**r + j] = c * row_r + comb[j],   1 <= c < q,  0 <= j < q**r

and the store of a complete ``k``-row matrix holds all ``q**k`` codewords,
closed under addition.

Entries are kept in numpy ``uint64`` segments so that very large stores
never need a single contiguous allocation.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from ..arithmetic.field_ops import FieldArithmetic
from ..exceptions import CombinationCapacityError, InvalidRowIndexError
from ..parameters import SearchConfig


class CombinationStore:
    """
    Segmented array of ``base ** k`` packed codewords.

    Parameters
    ----------
    k : int
        Number of generator rows.
    base : int
        2 or 4.
    config : SearchConfig, optional
        Supplies ``max_combinations`` and ``segment_length``.

    Raises
    ------
    CombinationCapacityError
        If ``base ** k`` exceeds ``config.max_combinations``.
    """

    def __init__(self, k: int, base: int = 4, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.k = k
        self.base = base
        self._field = FieldArithmetic(base)
        self._size = base ** k
        if self._size > self.config.max_combinations:
            raise CombinationCapacityError(self._size, self.config.max_combinations)
        self._segment_length = self.config.segment_length
        self._segments: List[np.ndarray] = []
        remaining = self._size
        while remaining > 0:
            length = min(remaining, self._segment_length)
            self._segments.append(np.zeros(length, dtype=np.uint64))
            remaining -= length

    @classmethod
    def from_matrix(cls, matrix, config: Optional[SearchConfig] = None) -> "CombinationStore":
        """Build and fill a store from every row of ``matrix``."""
        store = cls(matrix.k, matrix.base, config)
        store.populate_combinations(matrix)
        return store

    # --- Element access ---

    def _locate(self, index: int):
        if not 0 <= index < self._size:
            raise IndexError(
                f"Combination index {index} is outside [0, {self._size - 1}]."
            )
        return divmod(index, self._segment_length)

    def get(self, index: int) -> int:
        segment, offset = self._locate(index)
        return int(self._segments[segment][offset])

    def set(self, index: int, vector: int) -> None:
        segment, offset = self._locate(index)
        self._segments[segment][offset] = vector

    __getitem__ = get
    __setitem__ = set

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for segment in self._segments:
            for value in segment:
                yield int(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CombinationStore):
            return NotImplemented
        return (
            self._size == other._size
            and self.base == other.base
            and np.array_equal(self.to_numpy(), other.to_numpy())
        )

    def __repr__(self) -> str:
        return (
            f"CombinationStore(k={self.k}, base={self.base}, size={self._size}, "
            f"segments={len(self._segments)})"
        )

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def to_numpy(self) -> np.ndarray:
        """Return all entries as one contiguous ``uint64`` array (a copy)."""
        return np.concatenate(self._segments)

    # --- Filling ---

    def extend_with_row(self, row_index: int, vector: int) -> None:
        """
        Write the combinations that introduce row ``row_index``.

        Requires entries ``[0, base ** row_index)`` to already hold the
        combinations of the rows above.
        """
        if not 0 <= row_index < self.k:
            raise InvalidRowIndexError(row_index, self.k)
        limit = self.base ** row_index
        for c, multiple in enumerate(self._field.scalar_multiples(vector), start=1):
            offset = c * limit
            for j in range(limit):
                self.set(offset + j, multiple ^ self.get(j))

    def populate_combinations(self, matrix) -> None:
        """Recompute every entry from the rows of ``matrix``."""
        if matrix.k != self.k or matrix.base != self.base:
            raise ValueError(
                f"A store for k={self.k}, base={self.base} cannot hold the "
                f"combinations of a {matrix.k}-row base {matrix.base} matrix."
            )
        self.set(0, 0)
        for r in range(matrix.k):
            self.extend_with_row(r, matrix.get_row(r))
