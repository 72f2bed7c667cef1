"""
Weighted index sampling with an infinite-weight short-circuit.

A weight of ``+inf`` marks a choice that must always happen. A categorical
table cannot be normalized with such an entry, so the weights are classified
once at construction: either a finite alias table or the position of the
first infinite weight. Both paths consume exactly one generator step per
draw, which keeps seeded runs aligned when inputs only differ in whether
some weight is infinite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from ..runtime.rng import RandomSource, unit_interval
from ..schema import defaults
from ..schema.validation import validate_weights
from .alias import AliasTable


@dataclass(frozen=True)
class FiniteWeights:
    table: AliasTable


@dataclass(frozen=True)
class InfiniteWeight:
    index: int


WeightClass = Union[FiniteWeights, InfiniteWeight]


def classify_weights(
    weights: np.ndarray, on_all_zero: str = defaults.DEFAULT_ZERO_WEIGHTS_MODE
) -> WeightClass:
    """Pick the sampling variant for already validated ``weights``."""

    mode = str(on_all_zero).strip().lower()
    if mode not in defaults.ZERO_WEIGHTS_MODES:
        options = ", ".join(defaults.ZERO_WEIGHTS_MODES)
        raise ValueError(f"Unknown on_all_zero mode '{on_all_zero}'. Available: {options}")

    infinite = np.flatnonzero(np.isposinf(weights))
    if infinite.size:
        return InfiniteWeight(index=int(infinite[0]))

    if not weights.any():
        if mode == "error":
            raise ValueError("weights are all zero; nothing to sample")
        return FiniteWeights(table=AliasTable.build(np.ones_like(weights)))

    return FiniteWeights(table=AliasTable.build(weights))


class WeightedIndexSampler:
    """Draws indices in proportion to a fixed weight vector.

    Args:
        weights: Non-empty sequence of weights ``>= 0``. ``+inf`` forces the
            first such index to be returned on every draw.
        on_all_zero: ``"error"`` rejects an all-zero vector, ``"uniform"``
            samples it as if every weight were equal.

    The sampler is immutable after construction and may be shared between
    threads as long as each thread draws from its own generator.
    """

    __slots__ = ("_weights", "_variant")

    def __init__(self, weights, on_all_zero: str = defaults.DEFAULT_ZERO_WEIGHTS_MODE):
        values = validate_weights(weights)
        self._variant = classify_weights(values, on_all_zero)
        self._weights = values

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def size(self) -> int:
        return int(self._weights.size)

    @property
    def variant(self) -> WeightClass:
        return self._variant

    @property
    def has_infinite_weight(self) -> bool:
        return isinstance(self._variant, InfiniteWeight)

    @property
    def infinite_index(self) -> int | None:
        if isinstance(self._variant, InfiniteWeight):
            return self._variant.index
        return None

    @property
    def probabilities(self) -> np.ndarray:
        """Selection probability of every index."""

        if isinstance(self._variant, InfiniteWeight):
            out = np.zeros(self.size, dtype=np.float64)
            out[self._variant.index] = 1.0
            return out
        return self._variant.table.probabilities.copy()

    def sample(self, generator: RandomSource) -> int:
        variant = self._variant
        if isinstance(variant, InfiniteWeight):
            generator.discard(1)
            return variant.index
        return variant.table.pick(unit_interval(generator.next()))

    def sample_many(self, generator: RandomSource, size: int) -> np.ndarray:
        size = int(size)
        if size < 0:
            raise ValueError("size must be >= 0")
        return np.fromiter(
            (self.sample(generator) for _ in range(size)), dtype=np.int64, count=size
        )

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        if isinstance(self._variant, InfiniteWeight):
            detail = f"forced_index={self._variant.index}"
        else:
            detail = "finite"
        return f"WeightedIndexSampler(size={self.size}, {detail})"
