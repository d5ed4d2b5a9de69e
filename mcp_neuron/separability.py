"""
Which Boolean functions a single MCP unit can compute.

Two checks live here:

* an exhaustive search over every gate with weights in {-1, 0, 1} and an
  integer threshold, which is exactly the model `Gate` implements;
* the general linear-separability test, solved as the feasibility LP

        find w, b  s.t.  y_i · (w·x_i + b) ≥ 1   for all i,

  where y_i ∈ {-1, +1} are the truth-table outputs.

Every function the first finds is separable by the second. XOR and XNOR
pass neither: a single threshold unit cannot compute them.
"""
from itertools import product
import random
from typing import List, Optional, Sequence

import numpy as np
from scipy.optimize import linprog

from .errors import DimensionMismatch, MCPError, TooManyInputs
from .gate import WEIGHT_VALUES, Gate, as_signal
from .truth_table import all_signals, int_to_outputs


# ────────────────────────────────────────────────────────────────────
MAX_SEARCH_N = 8      # realization search holds a (3**m, 2**m) array of sums
MAX_EXACT_N = 3       # exact LP census solves one LP for each of 2**(2**m) functions
SAMPLE_SIZE = 10_000  # random functions drawn when m > MAX_EXACT_N
# ────────────────────────────────────────────────────────────────────


def _check_size(m: int, limit: int, what: str) -> None:
    if m < 1:
        raise DimensionMismatch(f"need at least one input, got {m}")
    if m > limit:
        raise TooManyInputs(f"{what} supports at most {limit} inputs, got {m}")


def _inputs_for(outputs: Sequence[int]):
    """Infer m from a full truth table and validate its bits."""
    n_rows = len(outputs)
    m = n_rows.bit_length() - 1
    if m < 1 or n_rows != 1 << m:
        raise DimensionMismatch(
            f"a full truth table has 2**m rows (m >= 1), got {n_rows}"
        )
    y = np.asarray(as_signal(outputs, n_rows), dtype=np.int64)
    X = np.array(all_signals(m), dtype=np.int64)
    return m, X, y


def threshold_range(m: int) -> range:
    """Thresholds outside [-m, m+1] only repeat the constant functions."""
    return range(-m, m + 2)


def candidate_gates(m: int):
    """Yield every gate with m inputs, weights in {-1,0,1} and a useful threshold."""
    for weights in product(WEIGHT_VALUES, repeat=m):
        for t in threshold_range(m):
            yield Gate(weights, t)


def realizations(outputs: Sequence[int]) -> List[Gate]:
    """
    Return every {-1,0,1} gate whose full truth table equals *outputs*.

    Parameters
    ----------
    outputs : sequence of 0/1, length 2**m, in `all_signals(m)` order

    Returns
    -------
    list of Gate, empty when no single unit computes the function
    """
    m, X, y = _inputs_for(outputs)
    _check_size(m, MAX_SEARCH_N, "realization search")
    W = np.array(list(product(WEIGHT_VALUES, repeat=m)), dtype=np.int64)
    sums = W @ X.T                                    # (3**m, 2**m)

    found = []
    for t in threshold_range(m):
        match = ((sums >= t).astype(np.int64) == y).all(axis=1)
        for idx in np.flatnonzero(match):
            found.append(Gate(tuple(W[idx]), t))
    return found


def is_realizable(outputs: Sequence[int]) -> bool:
    return bool(realizations(outputs))


def realizable_functions(m: int) -> List[int]:
    """Integer encodings (bit i = row i) of every function one gate computes."""
    _check_size(m, MAX_SEARCH_N, "realization census")
    X = np.array(all_signals(m), dtype=np.int64)
    W = np.array(list(product(WEIGHT_VALUES, repeat=m)), dtype=np.int64)
    sums = W @ X.T
    place = 1 << np.arange(X.shape[0], dtype=object)

    codes = set()
    for t in threshold_range(m):
        fired = (sums >= t).astype(object)
        codes.update(int(c) for c in fired @ place)
    return sorted(codes)


def is_separable(outputs: Sequence[int]) -> bool:
    """
    Exact linear separability test via LP (any real weights and bias).

    Returns
    -------
    bool : True if a separating hyperplane exists.
    """
    _, X, y01 = _inputs_for(outputs)
    X_with_bias = np.hstack([X, np.ones((X.shape[0], 1))]).astype(float)
    y = 2 * y01 - 1.0                                 # {0,1} → {-1,+1}
    A_ub = -(y[:, None] * X_with_bias)
    b_ub = -np.ones_like(y)
    c = np.zeros(X_with_bias.shape[1])

    res = linprog(c, A_ub=A_ub, b_ub=b_ub,
                  bounds=[(None, None)] * X_with_bias.shape[1], method="highs")
    return bool(res.success)


def separable_functions(m: int) -> List[int]:
    """Every linearly separable function of m inputs, exact (small m only)."""
    _check_size(m, MAX_EXACT_N, "exact separability census")
    return [code for code in range(1 << (1 << m))
            if is_separable(int_to_outputs(code, m))]


def sample_functions(m: int, k: int, rng: random.Random) -> List[List[int]]:
    """Return k random truth tables for m inputs (Monte-Carlo sampling)."""
    rows = 1 << m
    return [rng.choices([0, 1], k=rows) for _ in range(k)]


def proportion_separable(m: int, sample_size: int = SAMPLE_SIZE,
                         rng: Optional[random.Random] = None) -> float:
    """
    Fraction of m-input Boolean functions that are linearly separable.

    Exact for m <= MAX_EXACT_N, otherwise estimated from *sample_size*
    random truth tables.
    """
    if m <= MAX_EXACT_N:
        return len(separable_functions(m)) / (1 << (1 << m))
    _check_size(m, MAX_SEARCH_N, "sampled separability census")
    if sample_size < 1:
        raise MCPError("sample_size must be positive")
    rng = rng or random.Random()
    funcs = sample_functions(m, sample_size, rng)
    return sum(is_separable(outputs) for outputs in funcs) / sample_size
