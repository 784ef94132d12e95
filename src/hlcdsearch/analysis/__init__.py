# src/hlcdsearch/analysis/__init__.py
"""
Post-search analysis of found codes.

- WeightEnumerator: codeword counts by Hamming weight
- CodeValidator: independent re-check of a SearchResult
"""

from hlcdsearch.analysis.weight_enumerator import WeightEnumerator
from hlcdsearch.analysis.validator import CodeValidator

__all__ = ["WeightEnumerator", "CodeValidator"]
