# src/hlcdsearch/search/orthogonality.py
"""
Acceptance check for a candidate row.

A candidate ``v`` for row ``r`` is accepted when every new codeword it
introduces has weight at least ``d``:

    w(c * v + comb[i]) >= d    for all 1 <= c < q,  0 <= i < q**r

The new codewords are written to ``comb[c * q**r + i]`` while checking, so
an accepted row leaves the store ready for the next row. A rejected row
leaves stale entries above the current prefix; they are overwritten by the
next attempt.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..arithmetic.field_ops import FieldArithmetic
from .combinations import CombinationStore


def _check_multiple(
    store: CombinationStore,
    weight,
    multiple: int,
    offset: int,
    limit: int,
    d: int,
    cancelled: Optional[threading.Event] = None,
) -> bool:
    get = store.get
    put = store.set
    for i in range(limit):
        if cancelled is not None and cancelled.is_set():
            return False
        v = multiple ^ get(i)
        if weight(v) < d:
            if cancelled is not None:
                cancelled.set()
            return False
        put(offset + i, v)
    return True


def is_candidate_admissible(
    store: CombinationStore,
    field: FieldArithmetic,
    vector: int,
    limit: int,
    d: int,
) -> bool:
    """
    Sequential acceptance check.

    Parameters
    ----------
    store : CombinationStore
        Holds the combinations of the accepted rows in ``[0, limit)``.
    field : FieldArithmetic
        Arithmetic for the store's base.
    vector : int
        Candidate row.
    limit : int
        ``base ** row``.
    d : int
        Required minimum distance.

    Returns
    -------
    bool
        True when all ``(base - 1) * limit`` new codewords have weight >= d.
    """
    weight = field.hamming_weight
    for c, multiple in enumerate(field.scalar_multiples(vector), start=1):
        if not _check_multiple(store, weight, multiple, c * limit, limit, d):
            return False
    return True


def is_candidate_admissible_threaded(
    store: CombinationStore,
    field: FieldArithmetic,
    vector: int,
    limit: int,
    d: int,
    max_workers: int = 3,
) -> bool:
    """
    Experimental threaded acceptance check.

    One task per scalar multiple; the tasks write disjoint blocks of the
    store and share a cancellation flag so the first failure stops the
    others. Results match ``is_candidate_admissible``.
    """
    cancelled = threading.Event()
    weight = field.hamming_weight
    multiples = field.scalar_multiples(vector)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(
                _check_multiple, store, weight, multiple, c * limit, limit, d, cancelled
            )
            for c, multiple in enumerate(multiples, start=1)
        ]
        results = [future.result() for future in futures]
    return all(results) and not cancelled.is_set()
