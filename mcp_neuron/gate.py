# ─────────────────────────────────────────────────────────────────────────────
#  McCulloch-Pitts threshold unit
# ─────────────────────────────────────────────────────────────────────────────
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatch, InvalidSignal, InvalidWeight

WEIGHT_VALUES = (-1, 0, 1)
SIGNAL_VALUES = (0, 1)


def _is_integer(x) -> bool:
    return isinstance(x, (int, np.integer, np.bool_))


def as_signal(message: Sequence[int], m: int, row: Optional[int] = None) -> Tuple[int, ...]:
    """
    Validate one binary input vector against a gate of *m* inputs.

    Returns the message as a tuple of plain ints. The length is checked
    before the values.
    """
    where = f" (row {row})" if row is not None else ""
    values = tuple(message)
    if len(values) != m:
        raise DimensionMismatch(
            f"expected {m} signal value(s), got {len(values)}{where}", row=row
        )
    for i, v in enumerate(values):
        if not (_is_integer(v) and v in SIGNAL_VALUES):
            raise InvalidSignal(
                f"signal {i} must be 0 or 1, got {v!r}{where}", row=row
            )
    return tuple(int(v) for v in values)


@dataclass(frozen=True)
class Gate:
    """
    A single MCP neuron: fixed weights in {-1, 0, 1} and an integer threshold.

    The unit fires (outputs 1) when the weighted sum of its binary inputs
    reaches the threshold. Excitatory inputs carry weight +1, inhibitory
    inputs -1, and a 0 weight disconnects the input.

    Args:
        weights (sequence of int): one weight per input, at least one.
        threshold (int): activation threshold, usually within [-m, m].
        name (str, optional): display label, ignored in comparisons.
    """
    weights: Tuple[int, ...]
    threshold: int
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        weights = tuple(self.weights)
        if not weights:
            raise DimensionMismatch("a gate needs at least one weight")
        for i, w in enumerate(weights):
            if not (_is_integer(w) and w in WEIGHT_VALUES):
                raise InvalidWeight(f"weight {i} must be -1, 0 or 1, got {w!r}")
        if not _is_integer(self.threshold):
            raise TypeError(f"threshold must be an integer, got {self.threshold!r}")

        object.__setattr__(self, "weights", tuple(int(w) for w in weights))
        object.__setattr__(self, "threshold", int(self.threshold))

    @property
    def m(self) -> int:
        """Number of inputs."""
        return len(self.weights)

    def weighted_sum(self, message: Sequence[int]) -> int:
        x = as_signal(message, self.m)
        w = np.asarray(self.weights, dtype=np.int64)
        return int(np.dot(w, np.asarray(x, dtype=np.int64)))

    def decide(self, message: Sequence[int]) -> int:
        """Return 1 if the weighted sum of *message* reaches the threshold, else 0."""
        return int(self.weighted_sum(message) >= self.threshold)

    def __str__(self):
        label = self.name or "Gate"
        return f"{label}(weights={list(self.weights)}, threshold={self.threshold})"
