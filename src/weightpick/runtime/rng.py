"""
Random sources with deterministic seed derivation.
"""

from __future__ import annotations

import hashlib
from typing import Protocol, runtime_checkable

import numpy as np

_UNIT_SCALE = 1.0 / (1 << 53)

_BIT_GENERATORS = {
    "pcg64": np.random.PCG64,
    "pcg64dxsm": np.random.PCG64DXSM,
    "philox": np.random.Philox,
    "sfc64": np.random.SFC64,
}

# Bit generators whose ``advance(k)`` moves the state exactly k raw outputs.
_ADVANCEABLE = ("pcg64", "pcg64dxsm")


@runtime_checkable
class RandomSource(Protocol):
    """Capability needed by the samplers: raw draws and discards."""

    def next(self) -> int:
        """Return one raw unsigned 64-bit output."""

    def discard(self, k: int) -> None:
        """Advance the state as if ``k`` outputs had been produced."""


def unit_interval(raw: int) -> float:
    """Map a raw 64-bit output to a double in ``[0, 1)``."""

    return (int(raw) >> 11) * _UNIT_SCALE


def available_bit_generators() -> list[str]:
    return sorted(_BIT_GENERATORS)


# Seed namespace convention:
# - Use one base seed for the entire run.
# - Derive per-thread or per-stream generators with RNG.spawn("<namespace>", ...).
class RNG:
    def __init__(self, seed=42, bit_generator="pcg64"):
        name = str(bit_generator).strip().lower()
        if name not in _BIT_GENERATORS:
            options = ", ".join(available_bit_generators())
            raise ValueError(
                f"Unknown bit generator '{bit_generator}'. Available: {options}"
            )
        self.seed = int(seed)
        self.bit_generator_name = name
        self.bit_generator = _BIT_GENERATORS[name](self.seed)
        self.steps = 0

    @staticmethod
    def derive_seed(base_seed, *parts):
        h = hashlib.sha256()
        h.update(str(base_seed).encode())
        for part in parts:
            h.update(b":")
            h.update(str(part).encode())
        return int(h.hexdigest(), 16) % (2**32)

    def spawn(self, *parts) -> RNG:
        """Return an independent generator for the named sub-stream."""

        return RNG(
            RNG.derive_seed(self.seed, *parts),
            bit_generator=self.bit_generator_name,
        )

    def next(self) -> int:
        self.steps += 1
        return int(self.bit_generator.random_raw())

    def discard(self, k: int = 1) -> None:
        k = int(k)
        if k < 0:
            raise ValueError("discard count must be >= 0")
        if k == 0:
            return
        if self.bit_generator_name in _ADVANCEABLE:
            self.bit_generator.advance(k)
        else:
            self.bit_generator.random_raw(k, output=False)
        self.steps += k

    def random(self, size=None):
        if size is None:
            return unit_interval(self.next())
        return np.array(
            [unit_interval(self.next()) for _ in range(int(size))], dtype=np.float64
        )

    def __repr__(self) -> str:
        return (
            f"RNG(seed={self.seed}, bit_generator='{self.bit_generator_name}', "
            f"steps={self.steps})"
        )
