"""Random walk over a small graph where some edges are forced.

Two copies of the same graph are walked with identically seeded generators.
The second copy marks one edge as forced (infinite weight). Because forced
draws still consume one generator step, both walks stay on the same random
stream, and they only diverge where the forced edge changes the path.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from weightpick import RNG, WeightedIndexSampler  # noqa: E402

GRAPH = {
    "a": {"b": 1.0, "c": 2.0, "d": 1.0},
    "b": {"a": 1.0, "c": 1.0},
    "c": {"a": 3.0, "d": 1.0},
    "d": {"a": 1.0, "b": 1.0, "c": 1.0},
}


def build_samplers(graph):
    out = {}
    for node, edges in graph.items():
        targets = list(edges)
        out[node] = (targets, WeightedIndexSampler([edges[t] for t in targets]))
    return out


def walk(samplers, start, steps, rng):
    node = start
    path = [node]
    for _ in range(steps):
        targets, sampler = samplers[node]
        node = targets[sampler.sample(rng)]
        path.append(node)
    return path


def main(steps: int = 5000, seed: int = 2024) -> int:
    forced_graph = {node: dict(edges) for node, edges in GRAPH.items()}
    forced_graph["b"]["c"] = float("inf")

    plain_rng = RNG(seed)
    forced_rng = RNG(seed)
    plain = walk(build_samplers(GRAPH), "a", steps, plain_rng)
    forced = walk(build_samplers(forced_graph), "a", steps, forced_rng)

    visits = pd.DataFrame(
        {
            "plain": pd.Series(plain).value_counts(normalize=True),
            "forced_b_to_c": pd.Series(forced).value_counts(normalize=True),
        }
    ).sort_index()
    print(visits.round(4).to_string())
    print(
        f"generator steps plain={plain_rng.steps} forced={forced_rng.steps} "
        f"next_outputs_equal={plain_rng.next() == forced_rng.next()}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
