"""Public runtime models for the import-first API."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import pandas as pd

from ..scoring.frequencies import max_abs_deviation


@dataclass
class RunConfig:
    """Runtime overrides for a draw run; ``None`` defers to config metadata."""

    seed: int | None = None
    draws: int | None = None
    log_level: str | None = None
    log_dir: str | None = None
    log_to_file: bool = True
    bit_generator: str | None = None
    zero_weights_mode: str | None = None
    output_path: str | None = None
    keep_indices: bool = True


@dataclass
class DrawResult:
    """Result payload returned by high-level draw APIs."""

    summary: pd.DataFrame
    size: int
    draws: int
    steps_consumed: int
    elapsed_ms: float
    seed: int
    forced_index: int | None = None
    indices: np.ndarray | None = None
    log_path: Path | None = None
    output_path: Path | None = None
    runtime_notes: list[str] = field(default_factory=list)

    @property
    def forced(self) -> bool:
        return self.forced_index is not None

    def max_deviation(self) -> float:
        """Return the largest absolute gap between frequency and weight share."""

        return max_abs_deviation(self.summary)
