# src/hlcdsearch/parameters.py
"""
Configuration objects for the search engine and the code validator.

    CodeParameters       - immutable (n, k, d, base, ...) target of a search
    SearchConfig         - engine resource limits and opt-in features
    ValidatorParameters  - which checks CodeValidator runs
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .arithmetic.packing import check_base, max_columns
from .exceptions import (
    InvalidCodeParametersError,
    InvalidMinimumDistanceError,
)


@dataclass(frozen=True)
class CodeParameters:
    """
    Target parameters of a code search.

    Attributes
    ----------
    n : int
        Codeword length. At most 30 for base 4 and 62 for base 2.
    k : int
        Code dimension, ``1 <= k <= n``.
    d : int
        Required minimum distance, ``d >= 3``.
    base : int
        Field size, 2 or 4.
    rhs_weight : int, optional
        Minimum weight of the part of a candidate row to the right of the
        identity prefix. Defaults to ``d - 1``.
    is_hlcd : bool, optional
        Require ``G * G^H`` to be invertible at every complete matrix.
        Defaults to True for base 4 and False for base 2.
    append_identity : bool
        Generate rows in standard form ``[I | P]``.
    restrict_codeword_generation : bool
        Skip candidates whose leading non-zero symbol is not 1 and
        hard-code the top row. Implies ``append_identity``.
    is_multithreaded : bool
        Request the experimental threaded acceptance check.
    """
    n: int
    k: int
    d: int
    base: int = 4
    rhs_weight: Optional[int] = None
    is_hlcd: Optional[bool] = None
    append_identity: bool = True
    restrict_codeword_generation: bool = True
    is_multithreaded: bool = False

    def __post_init__(self) -> None:
        check_base(self.base)
        if not 1 <= self.k <= self.n:
            raise InvalidCodeParametersError(self.n, self.k)
        if self.n > max_columns(self.base):
            raise InvalidCodeParametersError(
                self.n,
                self.k,
                reason=(
                    f"The length n={self.n} exceeds the {max_columns(self.base)} "
                    f"symbols a packed word holds in base {self.base}."
                ),
            )
        if self.d < 3:
            raise InvalidMinimumDistanceError(self.d)
        # frozen dataclass: resolve defaults through object.__setattr__
        if self.rhs_weight is None:
            object.__setattr__(self, "rhs_weight", self.d - 1)
        if self.is_hlcd is None:
            object.__setattr__(self, "is_hlcd", self.base == 4)
        if self.restrict_codeword_generation and not self.append_identity:
            object.__setattr__(self, "append_identity", True)

    @property
    def combination_count(self) -> int:
        """Number of linear combinations of k rows, ``base ** k``."""
        return self.base ** self.k

    @property
    def label(self) -> str:
        """Short label such as ``07_04_03H_4``."""
        hlcd = "H" if self.is_hlcd else ""
        return f"{self.n:02d}_{self.k:02d}_{self.d:02d}{hlcd}_{self.base}"

    def __str__(self) -> str:
        return f"({self.n}, {self.k}, {self.d})_{self.base}"


@dataclass(frozen=True)
class SearchConfig:
    """
    Resource limits and opt-in features of the search engine.

    Attributes
    ----------
    max_combinations : int
        Largest combination store (``base ** k`` entries) the engine will
        allocate. Larger searches fail fast with CombinationCapacityError.
    segment_length : int
        Maximum number of entries per physical storage segment.
    allow_experimental_multithreading : bool
        Permit ``CodeParameters.is_multithreaded``. The threaded check has
        not been verified and is off by default.
    max_workers : int
        Worker threads used by the threaded check.
    """
    max_combinations: int = 4 ** 12
    segment_length: int = 2 ** 31 - 16
    allow_experimental_multithreading: bool = False
    max_workers: int = 3

    def __post_init__(self) -> None:
        if self.max_combinations < 1:
            raise ValueError(
                f"max_combinations must be >= 1, got {self.max_combinations}"
            )
        if self.segment_length < 1:
            raise ValueError(
                f"segment_length must be >= 1, got {self.segment_length}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass(frozen=True)
class ValidatorParameters:
    """
    Checks run by CodeValidator.

    Attributes
    ----------
    check_determinant : bool
        ``G * G^H`` must be invertible (skipped for non-HLCD parameters).
    check_zero_vectors : bool
        No combination other than index 0 may be the zero vector.
    replicate_linear_combinations : bool
        Recomputing every combination from the matrix rows must reproduce
        the stored combinations.
    check_minimum_distance : bool
        Every non-zero combination must have weight >= d.
    check_uniqueness : bool
        All combinations must be pairwise distinct.
    check_hlcd_property : bool
        Confirm that no non-zero codeword is Hermitian orthogonal to every
        row of the generator matrix (trivial Hermitian hull). Costs
        ``k * base ** k`` inner products; off by default.
    stop_when_false_encountered : bool
        Return on the first failing check.
    """
    check_determinant: bool = True
    check_zero_vectors: bool = True
    replicate_linear_combinations: bool = True
    check_minimum_distance: bool = True
    check_uniqueness: bool = True
    check_hlcd_property: bool = False
    stop_when_false_encountered: bool = True
