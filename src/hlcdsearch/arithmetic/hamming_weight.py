# src/hlcdsearch/arithmetic/hamming_weight.py
"""
Bit-parallel Hamming weight for packed base 2 and base 4 vectors.

The weight is computed in a constant number of word operations without
looping over symbols. For base 4 each 2-bit symbol is first collapsed into
its low bit (set if either bit of the symbol is set), after which the usual
SWAR population count applies.
"""
from __future__ import annotations

from .packing import F, ONE, THREE, check_base


def _popcount(v: int) -> int:
    v = v - ((v >> 1) & ONE)
    v = (v & THREE) + ((v >> 2) & THREE)
    v = (v + (v >> 4)) & F
    v = v + (v >> 8)
    v = v + (v >> 16)
    v = v + (v >> 32)
    return v & 0x7F


def _weight_engine(v: int, base: int) -> int:
    if base == 4:
        v = (v & ONE) | ((v >> 1) & ONE)
    return _popcount(v)


def hamming_weight(vector: int, base: int) -> int:
    """Number of non-zero symbols of a packed vector in the given base."""
    check_base(base)
    return _weight_engine(vector, base)


class HammingWeight:
    """Hamming weight calculator bound to a single base.

    Parameters
    ----------
    base : int
        2 or 4.
    """

    def __init__(self, base: int):
        self.base = check_base(base)

    def __call__(self, vector: int) -> int:
        return _weight_engine(vector, self.base)

    def get_weight(self, vector: int) -> int:
        return _weight_engine(vector, self.base)
