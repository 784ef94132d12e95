# src/hlcdsearch/analysis/validator.py
"""
Independent checks of a search result.

CodeValidator re-examines a found generator matrix and its combination
store without trusting the search:

    1. G * G^H is invertible (HLCD parameters only)
    2. no zero codeword outside index 0
    3. recomputing the combinations from the rows reproduces the store
    4. every non-zero codeword has weight >= d
    5. all codewords are distinct
    6. (optional) the Hermitian hull is trivial

Failures are logged at WARNING. With ``stop_when_false_encountered`` the
first failure ends validation.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..arithmetic.field_ops import FieldArithmetic
from ..arithmetic.hamming_weight import HammingWeight
from ..parameters import ValidatorParameters
from ..search.combinations import CombinationStore

logger = logging.getLogger(__name__)


class CodeValidator:
    """
    Validates a SearchResult.

    Parameters
    ----------
    result : SearchResult
        Output of ``run_search``.
    parameters : ValidatorParameters, optional
        Which checks to run. Defaults to ValidatorParameters().
    """

    def __init__(self, result, parameters: Optional[ValidatorParameters] = None):
        self.result = result
        self.parameters = parameters or ValidatorParameters()
        self.params = result.params
        self.matrix = result.matrix
        self.combinations = result.combinations
        self.field = FieldArithmetic(self.params.base)

    # --- Individual checks ---

    def is_determinant_valid(self) -> bool:
        """``G * G^H`` is invertible; always True for non-HLCD parameters."""
        if not self.params.is_hlcd:
            return True
        return self.matrix.get_g_prime().is_invertible()

    def get_total_zero_vectors(self) -> int:
        """Zero codewords at indices >= 1."""
        values = self.combinations.to_numpy()
        return int(np.count_nonzero(values[1:] == 0))

    def is_replicated_combinations_same(self) -> bool:
        """Rebuild the store from the matrix rows and compare."""
        replica = CombinationStore(
            self.params.k, self.params.base, self.combinations.config
        )
        replica.populate_combinations(self.matrix)
        return replica == self.combinations

    def get_total_invalid_minimum_distance_vectors(self) -> int:
        """Non-zero-index codewords with weight below d."""
        weight = HammingWeight(self.params.base)
        total = 0
        for index, codeword in enumerate(self.combinations):
            if index and weight(codeword) < self.params.d:
                total += 1
        return total

    def are_all_combinations_unique(self) -> bool:
        values = self.combinations.to_numpy()
        return np.unique(values).size == values.size

    def is_hlcd_property_satisfied(self) -> bool:
        """
        No non-zero codeword is Hermitian orthogonal to every row of G.

        Such a codeword would lie in the Hermitian hull ``C ∩ C^⊥H``.
        """
        rows = self.matrix.rows
        for index, codeword in enumerate(self.combinations):
            if index == 0:
                continue
            if all(
                self.field.hermitian_inner_product(codeword, row) == 0
                for row in rows
            ):
                logger.warning(
                    "Codeword %#x at index %d lies in the Hermitian hull",
                    codeword,
                    index,
                )
                return False
        return True

    # --- Driver ---

    def is_valid_code(self) -> bool:
        """Run the enabled checks in order and report overall validity."""
        p = self.parameters
        checks = []
        if p.check_determinant:
            checks.append(
                ("determinant of G * G^H is zero", self.is_determinant_valid)
            )
        if p.check_zero_vectors:
            checks.append(
                ("zero vectors found", lambda: self.get_total_zero_vectors() == 0)
            )
        if p.replicate_linear_combinations:
            checks.append(
                (
                    "linear combinations could not be replicated",
                    self.is_replicated_combinations_same,
                )
            )
        if p.check_minimum_distance:
            checks.append(
                (
                    "codewords below the minimum distance",
                    lambda: self.get_total_invalid_minimum_distance_vectors() == 0,
                )
            )
        if p.check_uniqueness:
            checks.append(
                ("linear combinations are not unique", self.are_all_combinations_unique)
            )
        if p.check_hlcd_property:
            checks.append(
                ("Hermitian LCD property not satisfied", self.is_hlcd_property_satisfied)
            )

        valid = True
        for failure_message, check in checks:
            if not check():
                logger.warning("%s: %s", self.params, failure_message)
                valid = False
                if p.stop_when_false_encountered:
                    return False
        return valid
