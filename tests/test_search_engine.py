#!/usr/bin/env python3
"""
End-to-end tests for the backtracking search.

Scenarios:
  (7, 4, 3)_4  Hermitian LCD code found, 256 codewords of weight 0 or >= 3
  (5, 2, 3)_4  found, 16 distinct codewords
  (3, 3, 3)_4  no room for the right-hand side, not found
  (7, 4, 3)_2  binary sanity path, finds the Hamming code
"""
import warnings

import numpy as np
import pytest

from hlcdsearch import (
    CodeParameters,
    CombinationCapacityError,
    SearchConfig,
    SearchEngine,
    UnsupportedOperationError,
    hamming_weight,
    run_search,
)
from hlcdsearch.testing import span


def assert_code_properties(result):
    params = result.params
    matrix = result.matrix
    codewords = list(result.combinations)
    assert len(codewords) == params.base ** params.k
    assert codewords[0] == 0
    assert all(hamming_weight(c, params.base) >= params.d for c in codewords[1:])
    assert len(set(codewords)) == len(codewords)
    assert set(codewords) == span(list(matrix.rows), params.n, params.base)
    assert not matrix.contains_zero_row()
    if params.is_hlcd:
        assert matrix.get_g_prime().is_invertible()


# ============================================================================
# Scenarios
# ============================================================================

class TestScenarios:

    def test_seven_four_three_quaternary(self):
        result = run_search(CodeParameters(n=7, k=4, d=3))
        assert result.found
        assert len(result.combinations) == 256
        assert_code_properties(result)
        assert result.recursive_calls > 0

    def test_standard_form_with_restricted_top_row(self):
        result = run_search(CodeParameters(n=7, k=4, d=3))
        digits = result.matrix.to_digits()
        np.testing.assert_array_equal(digits[:, :4], np.eye(4, dtype=np.uint8))
        np.testing.assert_array_equal(digits[0], [1, 0, 0, 0, 0, 1, 1])
        for row in digits[1:]:
            rhs = [d for d in row[4:] if d]
            assert rhs[0] == 1

    def test_five_two_three_quaternary(self):
        result = run_search(CodeParameters(n=5, k=2, d=3))
        assert result.found
        assert len(set(result.combinations)) == 16
        assert_code_properties(result)

    def test_three_three_three_not_found(self):
        result = run_search(CodeParameters(n=3, k=3, d=3))
        assert not result.found
        assert not result
        assert "No generator matrix found" in str(result)

    def test_seven_four_three_binary(self):
        result = run_search(CodeParameters(n=7, k=4, d=3, base=2))
        assert result.found
        assert result.params.is_hlcd is False
        assert result.matrix.rows == (0b1000011, 0b0100101, 0b0010110, 0b0001111)
        assert_code_properties(result)

    def test_binary_hamming_code_is_not_lcd(self):
        result = run_search(CodeParameters(n=7, k=4, d=3, base=2, is_hlcd=True))
        assert not result.found

    def test_quaternary_without_hlcd_gate(self):
        result = run_search(CodeParameters(n=7, k=4, d=3, is_hlcd=False))
        assert result.found
        assert_code_properties(result)

    def test_unrestricted_search(self):
        params = CodeParameters(n=5, k=2, d=3, restrict_codeword_generation=False)
        result = run_search(params)
        assert result.found
        assert_code_properties(result)

    def test_search_is_deterministic(self):
        params = CodeParameters(n=6, k=3, d=3)
        first = run_search(params)
        second = run_search(params)
        assert first.matrix == second.matrix
        assert first.recursive_calls == second.recursive_calls


# ============================================================================
# Engine behaviour
# ============================================================================

class TestEngine:

    def test_statistics(self):
        result = run_search(CodeParameters(n=5, k=2, d=3))
        stats = result.statistics
        assert stats.recursive_calls == result.recursive_calls
        assert stats.vectors_examined >= stats.rows_accepted - 1
        assert stats.elapsed_ms >= 0
        assert "(5, 2, 3)_4 found" in stats.summary(result.found)

    def test_capacity_checked_before_search(self):
        with pytest.raises(CombinationCapacityError):
            SearchEngine(CodeParameters(n=30, k=13, d=3))
        small = SearchConfig(max_combinations=255)
        with pytest.raises(CombinationCapacityError):
            run_search(CodeParameters(n=7, k=4, d=3), small)

    def test_multithreading_requires_opt_in(self):
        params = CodeParameters(n=5, k=2, d=3, is_multithreaded=True)
        with pytest.raises(UnsupportedOperationError):
            run_search(params)
        with pytest.raises(NotImplementedError):
            SearchEngine(params)

    def test_experimental_multithreading_matches_sequential(self):
        config = SearchConfig(allow_experimental_multithreading=True)
        threaded_params = CodeParameters(n=7, k=4, d=3, is_multithreaded=True)
        with pytest.warns(RuntimeWarning, match="experimental"):
            threaded = run_search(threaded_params, config)
        sequential = run_search(CodeParameters(n=7, k=4, d=3))
        assert threaded.found
        assert threaded.matrix == sequential.matrix
        assert threaded.combinations == sequential.combinations

    def test_sequential_search_emits_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            run_search(CodeParameters(n=5, k=2, d=3))

    def test_logging(self, caplog):
        with caplog.at_level("DEBUG", logger="hlcdsearch"):
            run_search(CodeParameters(n=5, k=2, d=3))
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Searching for (5, 2, 3)_4") for m in messages)
        assert any("Top row fixed" in m for m in messages)
