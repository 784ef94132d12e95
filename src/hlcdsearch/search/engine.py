# src/hlcdsearch/search/engine.py
"""
Backtracking search for generator matrices.

The engine fills the generator matrix one row at a time. Each candidate
row comes from a CandidateVectorGenerator; it is accepted when every new
codeword it introduces has weight at least ``d`` (see ``orthogonality``).
An accepted row is placed in the matrix and the search recurses with a
generator carried forward from the accepted subvector, so rows appear in
non-decreasing subvector order. Once all ``k`` rows are placed an HLCD
search additionally requires ``G * G^H`` to be invertible.

Usage
-----
>>> from hlcdsearch import CodeParameters, run_search
>>> result = run_search(CodeParameters(n=7, k=4, d=3))
>>> result.found
True
"""
from __future__ import annotations

import logging
import time
import warnings
from dataclasses import dataclass
from typing import Optional

from ..arithmetic.field_ops import FieldArithmetic
from ..exceptions import UnsupportedOperationError
from ..matrix.packed_matrix import PackedMatrix
from ..parameters import CodeParameters, SearchConfig
from .combinations import CombinationStore
from .orthogonality import is_candidate_admissible, is_candidate_admissible_threaded
from .statistics import SearchStatistics
from .vector_generator import CandidateVectorGenerator

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


# =============================================================================
# Result
# =============================================================================

@dataclass
class SearchResult:
    """
    Outcome of a search.

    Attributes
    ----------
    params : CodeParameters
        Parameters that were searched.
    matrix : PackedMatrix
        The generator matrix. Only meaningful when ``found`` is True.
    found : bool
        Whether a matrix satisfying every constraint was found.
    recursive_calls : int
        Number of ``backtrack`` invocations.
    combinations : CombinationStore
        All ``base ** k`` codewords of the found code.
    statistics : SearchStatistics
        Counters and timings.
    """
    params: CodeParameters
    matrix: PackedMatrix
    found: bool
    recursive_calls: int
    combinations: CombinationStore
    statistics: SearchStatistics

    def __bool__(self) -> bool:
        return self.found

    def __str__(self) -> str:
        if not self.found:
            return f"No generator matrix found for {self.params}"
        return f"Generator matrix for {self.params}:\n{self.matrix}"


# =============================================================================
# Engine
# =============================================================================

class SearchEngine:
    """
    Depth-first search for a ``k x n`` generator matrix.

    Parameters
    ----------
    params : CodeParameters
        Target code.
    config : SearchConfig, optional
        Resource limits and opt-in features.

    Raises
    ------
    UnsupportedOperationError
        If ``params.is_multithreaded`` is set without
        ``config.allow_experimental_multithreading``.
    CombinationCapacityError
        If ``base ** k`` exceeds ``config.max_combinations``.
    """

    def __init__(self, params: CodeParameters, config: Optional[SearchConfig] = None):
        self.params = params
        self.config = config or SearchConfig()
        if params.is_multithreaded and not self.config.allow_experimental_multithreading:
            raise UnsupportedOperationError(
                "The multithreaded search is experimental. Set "
                "SearchConfig(allow_experimental_multithreading=True) to use it."
            )
        self.field = FieldArithmetic(params.base)
        self.matrix = PackedMatrix(params.n, params.k, params.base)
        self.combinations = CombinationStore(params.k, params.base, self.config)
        self.recursive_calls = 0
        self.vectors_examined = 0
        self.rows_accepted = 0

    def _is_admissible(self, vector: int, limit: int) -> bool:
        if self.params.is_multithreaded:
            return is_candidate_admissible_threaded(
                self.combinations,
                self.field,
                vector,
                limit,
                self.params.d,
                self.config.max_workers,
            )
        return is_candidate_admissible(
            self.combinations, self.field, vector, limit, self.params.d
        )

    def backtrack(self, row: int, generator: CandidateVectorGenerator) -> bool:
        """
        Try to complete the matrix from ``row`` onward.

        Returns
        -------
        bool
            True once all rows are placed (and, for HLCD, ``G * G^H`` is
            invertible).
        """
        self.recursive_calls += 1
        params = self.params

        if row >= params.k:
            if not params.is_hlcd:
                return True
            if self.matrix.get_g_prime().is_invertible():
                return True
            self.matrix.set_row(row - 1, 0)
            return False

        limit = params.base ** row
        while True:
            vector = generator.next_full_vector(row)
            if not generator.is_current_subvector_valid():
                return False
            self.vectors_examined += 1
            if self._is_admissible(vector, limit):
                self.matrix.set_row(row, vector)
                self.rows_accepted += 1
                logger.debug("Row %d accepted: %#x", row, vector)
                if self.backtrack(row + 1, generator.carry_forward()):
                    return True

    def run(self) -> SearchResult:
        """Run the search and return a SearchResult."""
        params = self.params
        if params.is_multithreaded:
            warnings.warn(
                "The multithreaded acceptance check is experimental and has "
                "not been verified against the sequential search.",
                RuntimeWarning,
                stacklevel=2,
            )
        logger.info(
            "Searching for %s (hlcd=%s, restricted=%s)",
            params,
            params.is_hlcd,
            params.restrict_codeword_generation,
        )
        start = _now_ms()

        generator = CandidateVectorGenerator.from_parameters(params)
        found = False
        row = 0
        proceed = True
        if params.restrict_codeword_generation:
            # top row: identity column 0 and rhs_weight ones on the right
            vector = generator.next_full_vector(row)
            if generator.is_current_subvector_valid():
                self.matrix.set_row(row, vector)
                self.combinations.extend_with_row(row, vector)
                self.rows_accepted += 1
                logger.debug("Top row fixed: %#x", vector)
                row += 1
            else:
                proceed = False
        if proceed:
            found = self.backtrack(row, generator.carry_forward())

        statistics = SearchStatistics(
            params=params,
            recursive_calls=self.recursive_calls,
            vectors_examined=self.vectors_examined,
            rows_accepted=self.rows_accepted,
            start_time_ms=start,
            end_time_ms=_now_ms(),
        )
        logger.info(statistics.summary(found))
        return SearchResult(
            params=params,
            matrix=self.matrix,
            found=found,
            recursive_calls=self.recursive_calls,
            combinations=self.combinations,
            statistics=statistics,
        )


def run_search(
    params: CodeParameters, config: Optional[SearchConfig] = None
) -> SearchResult:
    """Search for a generator matrix with the given parameters."""
    return SearchEngine(params, config).run()
