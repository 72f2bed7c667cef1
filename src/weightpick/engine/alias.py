"""Vose alias table over finite, non-negative weights."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class AliasTable:
    accept: np.ndarray
    alias: np.ndarray
    probabilities: np.ndarray

    @property
    def size(self) -> int:
        return int(self.accept.size)

    @classmethod
    def build(cls, weights) -> AliasTable:
        """Build the table in O(n).

        ``weights`` must be finite, non-negative and not all zero.
        """
        w = np.asarray(weights, dtype=np.float64)
        n = w.size
        peak = float(w.max())
        if not np.isfinite(peak) or peak <= 0.0:
            raise ValueError("alias table needs finite weights with a positive entry")

        # Scale by the peak first so the total cannot overflow.
        scaled_w = w / peak
        probabilities = scaled_w / scaled_w.sum()
        scaled = probabilities * n

        accept = np.ones(n, dtype=np.float64)
        alias = np.arange(n, dtype=np.int64)
        small = [i for i in range(n) if scaled[i] < 1.0]
        large = [i for i in range(n) if scaled[i] >= 1.0]

        while small and large:
            s = small.pop()
            g = large.pop()
            accept[s] = scaled[s]
            alias[s] = g
            scaled[g] = (scaled[g] + scaled[s]) - 1.0
            if scaled[g] < 1.0:
                small.append(g)
            else:
                large.append(g)

        # Leftovers are within rounding of 1.0.
        fallback = int(np.argmax(w))
        for i in small:
            if w[i] > 0.0:
                accept[i] = 1.0
            else:
                accept[i] = 0.0
                alias[i] = fallback

        for array in (accept, alias, probabilities):
            array.setflags(write=False)
        return cls(accept=accept, alias=alias, probabilities=probabilities)

    def pick(self, u: float) -> int:
        """Resolve one uniform ``u`` in ``[0, 1)`` to an index."""

        n = self.accept.size
        x = u * n
        column = min(int(x), n - 1)
        if x - column < self.accept[column]:
            return column
        return int(self.alias[column])
