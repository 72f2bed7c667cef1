"""
Empirical frequency summaries for drawn indices.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

SUMMARY_COLUMNS = ["index", "label", "weight_share", "count", "frequency", "deviation"]


def summarize_draws(
    indices,
    probabilities,
    labels: Sequence | None = None,
) -> pd.DataFrame:
    """Tabulate drawn indices against their expected shares.

    One row per index, including indices that were never drawn. ``labels``
    is used only when it has one entry per index.
    """
    expected = np.asarray(probabilities, dtype=np.float64)
    n = expected.size
    drawn = np.asarray(indices, dtype=np.int64)
    if drawn.size and (drawn.min() < 0 or drawn.max() >= n):
        raise ValueError(f"drawn indices must lie in [0, {n})")

    counts = np.bincount(drawn, minlength=n)
    total = int(counts.sum())
    frequency = counts / total if total else np.zeros(n, dtype=np.float64)

    if labels is not None and len(labels) == n:
        label_values = [str(label) for label in labels]
    else:
        label_values = [str(i) for i in range(n)]

    return pd.DataFrame(
        {
            "index": np.arange(n, dtype=np.int64),
            "label": label_values,
            "weight_share": expected,
            "count": counts.astype(np.int64),
            "frequency": frequency,
            "deviation": frequency - expected,
        },
        columns=SUMMARY_COLUMNS,
    )


def max_abs_deviation(summary: pd.DataFrame) -> float:
    if summary.empty:
        return 0.0
    return float(summary["deviation"].abs().max())
