# src/hlcdsearch/analysis/weight_enumerator.py
"""Weight distribution of a code."""
from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from ..arithmetic.hamming_weight import HammingWeight


class WeightEnumerator:
    """
    Counts codewords by Hamming weight.

    Parameters
    ----------
    combinations : Iterable[int]
        Every codeword of the code (a CombinationStore or any iterable).
    n : int
        Code length.
    base : int
        2 or 4. Taken from ``combinations.base`` when available.

    Examples
    --------
    >>> WeightEnumerator([0, 0b0101, 0b1010, 0b1111], n=2).counts
    [1, 0, 3]
    """

    def __init__(self, combinations: Iterable[int], n: int, base: Optional[int] = None):
        if base is None:
            base = getattr(combinations, "base", 4)
        self.n = n
        self.base = base
        self._combinations = combinations
        self._counts = None

    def _compute(self) -> np.ndarray:
        weight = HammingWeight(self.base)
        counts = np.zeros(self.n + 1, dtype=np.int64)
        for codeword in self._combinations:
            counts[weight(int(codeword))] += 1
        return counts

    def get_weight_enumerator(self) -> np.ndarray:
        """Array ``A`` where ``A[w]`` is the number of codewords of weight w."""
        if self._counts is None:
            self._counts = self._compute()
        return self._counts.copy()

    @property
    def counts(self) -> List[int]:
        return [int(c) for c in self.get_weight_enumerator()]

    @property
    def minimum_distance(self) -> int:
        """Smallest non-zero weight (0 if the code is trivial)."""
        counts = self.get_weight_enumerator()
        nonzero = np.nonzero(counts[1:])[0]
        return int(nonzero[0]) + 1 if nonzero.size else 0

    def __str__(self) -> str:
        return f"Weight enumerator (n={self.n}, base={self.base}): {self.counts}"
