# src/hlcdsearch/search/vector_generator.py
"""
Sequential generator of candidate generator-matrix rows.

A candidate row in standard form ``G = [I | P]`` is the identity part (a
single 1 in column ``row``) OR'd with a subvector of length ``n - k``. The
subvector counts upward from the far right; only subvectors of weight at
least ``rhs_weight`` (normally ``d - 1``) are returned.

Restricted generation (base 4) only visits subvectors whose left-most
non-zero digit is 1. It does so with a *reset point*: the subvector ``1``
followed by ``rhs_weight - 1`` digits 3, the largest value whose leading
1 sits in the current position. Reaching it jumps straight to the next
leading-1 position::

    reset_point = 01 11          ->  next subvector 01 00 00
    reset_point = 01 11 11       ->  next subvector 01 00 00 00

which removes every subvector beginning with omega or omega-bar. All
inequivalent generator matrices are still visited because any row can be
scaled so that its leading non-zero entry is 1.

Lifecycle::

    NOT_STARTED -> POSITIONED -> ADVANCING -> EXHAUSTED
"""
from __future__ import annotations

import logging
from enum import Enum

from ..arithmetic.hamming_weight import HammingWeight
from ..arithmetic.packing import check_base, max_columns, ones_vector, symbol_width
from ..exceptions import (
    InvalidColIndexError,
    InvalidIdentityRowIndexError,
    InvalidMinimumDistanceError,
)
from ..parameters import CodeParameters

logger = logging.getLogger(__name__)


class GeneratorState(Enum):
    NOT_STARTED = "not_started"
    POSITIONED = "positioned"
    ADVANCING = "advancing"
    EXHAUSTED = "exhausted"


def initial_reset_point(rhs_weight: int, base: int) -> int:
    """Digit 1 followed by ``rhs_weight - 1`` copies of the largest digit."""
    width = symbol_width(base)
    top = (1 << width) - 1
    result = 1
    for _ in range(rhs_weight - 1):
        result = (result << width) | top
    return result


class CandidateVectorGenerator:
    """
    Produces candidate rows in increasing subvector order.

    Parameters
    ----------
    n, k, d : int
        Code length, dimension and minimum distance.
    rhs_weight : int
        Minimum weight of a returned subvector.
    base : int
        2 or 4.
    append_identity : bool
        OR the identity column into every full vector.
    restrict_generation : bool
        Skip subvectors whose leading non-zero digit is not 1. Forces
        ``append_identity``.

    Examples
    --------
    >>> gen = CandidateVectorGenerator(7, 4, 3, 2)
    >>> bin(gen.next_subvector())
    '0b101'
    >>> bin(gen.next_subvector())
    '0b110'
    """

    def __init__(
        self,
        n: int,
        k: int,
        d: int,
        rhs_weight: int,
        base: int = 4,
        append_identity: bool = True,
        restrict_generation: bool = True,
    ):
        check_base(base)
        if d < 3:
            raise InvalidMinimumDistanceError(d)
        self.n = n
        self.k = k
        self.d = d
        self.rhs_weight = rhs_weight
        self.base = base
        self.restrict_generation = restrict_generation
        if restrict_generation and not append_identity:
            logger.info(
                "append_identity is False while restrict_generation is True; "
                "append_identity is now True as well."
            )
            append_identity = True
        self.append_identity = append_identity

        self._width = symbol_width(base)
        self._weight = HammingWeight(base)
        self.limit = base ** (n - k) if append_identity else base ** n
        self.vectors_examined = 0
        self.subvector = 0
        self.reset_point = 0
        self.next_reset_point = 0
        self.state = GeneratorState.NOT_STARTED

        if restrict_generation:
            if n - k >= rhs_weight:
                self.subvector = ones_vector(rhs_weight, base)
                self.reset_point = initial_reset_point(rhs_weight, base)
                self.next_reset_point = self.subvector << self._width
            else:
                # not enough room to the right of the identity
                self.state = GeneratorState.EXHAUSTED
        if self.subvector >= self.limit:
            self.state = GeneratorState.EXHAUSTED

    @classmethod
    def from_parameters(cls, params: CodeParameters) -> "CandidateVectorGenerator":
        return cls(
            params.n,
            params.k,
            params.d,
            params.rhs_weight,
            params.base,
            params.append_identity,
            params.restrict_codeword_generation,
        )

    @classmethod
    def from_previous(
        cls,
        n: int,
        k: int,
        d: int,
        rhs_weight: int,
        base: int,
        starting_subvector: int,
        reset_point: int,
        append_identity: bool = True,
        restrict_generation: bool = True,
    ) -> "CandidateVectorGenerator":
        """
        Generator positioned one step before ``starting_subvector``.

        The first advance revisits ``starting_subvector`` itself, so the row
        below an accepted row may reuse its subvector.
        """
        gen = cls.__new__(cls)
        check_base(base)
        if d < 3:
            raise InvalidMinimumDistanceError(d)
        gen.n = n
        gen.k = k
        gen.d = d
        gen.rhs_weight = rhs_weight
        gen.base = base
        gen.restrict_generation = restrict_generation
        gen.append_identity = append_identity or restrict_generation
        gen._width = symbol_width(base)
        gen._weight = HammingWeight(base)
        gen.limit = base ** (n - k) if gen.append_identity else base ** n
        gen.vectors_examined = 0
        gen.reset_point = reset_point
        gen.next_reset_point = (reset_point + 1) >> 1
        gen.subvector = max(starting_subvector, 0) - 1
        gen.state = GeneratorState.POSITIONED
        return gen

    def carry_forward(self) -> "CandidateVectorGenerator":
        """Generator for the next row, starting at this generator's subvector."""
        return CandidateVectorGenerator.from_previous(
            self.n,
            self.k,
            self.d,
            self.rhs_weight,
            self.base,
            self.subvector,
            self.reset_point,
            self.append_identity,
            self.restrict_generation,
        )

    def __repr__(self) -> str:
        return (
            f"CandidateVectorGenerator(n={self.n}, k={self.k}, d={self.d}, "
            f"base={self.base}, subvector={self.subvector:#x}, "
            f"state={self.state.value})"
        )

    # --- Queries ---

    def is_current_subvector_valid(self) -> bool:
        return self.state is not GeneratorState.EXHAUSTED

    @property
    def current_subvector(self) -> int:
        return self.subvector

    def current_full_vector(self, row: int) -> int:
        return self.identity_row(row) | self.subvector

    # --- Identity prefix ---

    def identity_row(self, row: int) -> int:
        """
        Vector with a single 1 in column ``row`` (0 without identity).

        Raises
        ------
        InvalidColIndexError
            If ``row`` is outside the packed word.
        InvalidIdentityRowIndexError
            If ``row`` is outside ``[0, k)``.
        """
        if not self.append_identity:
            return 0
        if not 0 <= row < max_columns(self.base):
            raise InvalidColIndexError(row, max_columns(self.base), self.base)
        if not 0 <= row < self.k:
            raise InvalidIdentityRowIndexError(row, self.k, self.base)
        return 1 << (self._width * (self.n - 1 - row))

    # --- Advancing ---

    def _advance(self) -> None:
        self.vectors_examined += 1
        if (
            self.restrict_generation
            and self.base == 4
            and self.subvector == self.reset_point
        ):
            self.subvector = (self.reset_point + 1) << 1
            self.next_reset_point = self.subvector << 2
            self.reset_point = (self.reset_point << 2) | 0b11
            logger.debug(
                "Reset reached; next leading-1 subvector %#x", self.subvector
            )
        else:
            self.subvector += 1

    def next_subvector(self) -> int:
        """
        Advance to the next subvector of weight >= ``rhs_weight``.

        Once the subvector reaches ``limit`` the generator is exhausted and
        ``is_current_subvector_valid()`` returns False.
        """
        if self.state is GeneratorState.EXHAUSTED:
            return self.subvector
        if self.state is GeneratorState.NOT_STARTED:
            self.state = GeneratorState.POSITIONED
            if self._weight(self.subvector) >= self.rhs_weight:
                return self.subvector
        self.state = GeneratorState.ADVANCING
        while True:
            self._advance()
            if self.subvector >= self.limit:
                self.state = GeneratorState.EXHAUSTED
                break
            if self._weight(self.subvector) >= self.rhs_weight:
                break
        return self.subvector

    def next_full_vector(self, row: int) -> int:
        """Identity column ``row`` OR'd with the next valid subvector."""
        identity = self.identity_row(row)
        return identity | self.next_subvector()
