# src/hlcdsearch/search/__init__.py
"""
Backtracking search for (Hermitian LCD) generator matrices.

- CombinationStore: segmented storage of every row combination
- CandidateVectorGenerator: ordered candidate rows with restricted generation
- is_candidate_admissible: minimum-distance acceptance check
- SearchEngine / run_search: the depth-first search
- SearchStatistics: counters and timings of a run
"""

from hlcdsearch.search.combinations import CombinationStore
from hlcdsearch.search.vector_generator import (
    CandidateVectorGenerator,
    GeneratorState,
)
from hlcdsearch.search.orthogonality import (
    is_candidate_admissible,
    is_candidate_admissible_threaded,
)
from hlcdsearch.search.statistics import SearchStatistics, format_elapsed
from hlcdsearch.search.engine import SearchEngine, SearchResult, run_search

__all__ = [
    "CombinationStore",
    "CandidateVectorGenerator",
    "GeneratorState",
    "is_candidate_admissible",
    "is_candidate_admissible_threaded",
    "SearchStatistics",
    "format_elapsed",
    "SearchEngine",
    "SearchResult",
    "run_search",
]
