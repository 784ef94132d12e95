# src/hlcdsearch/__init__.py
"""
hlcdsearch: search for quaternary Hermitian LCD codes.

Finds a k x n generator matrix G over GF(4) (or GF(2)) whose code has
minimum distance at least d and, for Hermitian LCD codes, whose
G * G^H is invertible.

Usage
-----
>>> from hlcdsearch import CodeParameters, CodeValidator, run_search
>>> result = run_search(CodeParameters(n=7, k=4, d=3))
>>> result.found
True
>>> CodeValidator(result).is_valid_code()
True

Subpackages
-----------
- arithmetic: packed-vector field arithmetic and Hamming weight
- matrix: PackedMatrix
- search: combination store, candidate generator and search engine
- analysis: weight enumerator and code validator
- testing: reference implementations for tests
"""
import logging

from hlcdsearch.exceptions import (
    HLCDSearchError,
    InvalidBaseError,
    InvalidCodeParametersError,
    InvalidMinimumDistanceError,
    InvalidDigitError,
    InvalidRowIndexError,
    InvalidColIndexError,
    InvalidIdentityRowIndexError,
    InvalidColumnVectorDimensionError,
    InvalidColumnDimensionToSetError,
    InvalidMatrixDimensionsError,
    InvalidMatricesBasesError,
    CombinationCapacityError,
    UnsupportedOperationError,
)
from hlcdsearch.parameters import CodeParameters, SearchConfig, ValidatorParameters
from hlcdsearch.arithmetic import FieldArithmetic, HammingWeight, hamming_weight
from hlcdsearch.matrix import PackedMatrix
from hlcdsearch.search import (
    CandidateVectorGenerator,
    CombinationStore,
    SearchEngine,
    SearchResult,
    SearchStatistics,
    run_search,
)
from hlcdsearch.analysis import CodeValidator, WeightEnumerator

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HLCDSearchError",
    "InvalidBaseError",
    "InvalidCodeParametersError",
    "InvalidMinimumDistanceError",
    "InvalidDigitError",
    "InvalidRowIndexError",
    "InvalidColIndexError",
    "InvalidIdentityRowIndexError",
    "InvalidColumnVectorDimensionError",
    "InvalidColumnDimensionToSetError",
    "InvalidMatrixDimensionsError",
    "InvalidMatricesBasesError",
    "CombinationCapacityError",
    "UnsupportedOperationError",
    "CodeParameters",
    "SearchConfig",
    "ValidatorParameters",
    "FieldArithmetic",
    "HammingWeight",
    "hamming_weight",
    "PackedMatrix",
    "CandidateVectorGenerator",
    "CombinationStore",
    "SearchEngine",
    "SearchResult",
    "SearchStatistics",
    "run_search",
    "CodeValidator",
    "WeightEnumerator",
]
