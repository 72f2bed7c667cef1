"""
Benchmark sampler construction and per-draw cost.

This compares finite and forced (infinite-weight) samplers across weight
vector sizes, using one generator seed per repeat.

Run:
    python -m weightpick.benchmarks.benchmark_sampler

Optional env overrides:
    BENCH_SIZES, BENCH_DRAWS, BENCH_REPEATS, BENCH_BASE_SEED

Examples:
    BENCH_SIZES=10,1000 BENCH_DRAWS=50000 python -m weightpick.benchmarks.benchmark_sampler
"""

import os
import statistics

import numpy as np

from weightpick.engine.sampler import WeightedIndexSampler
from weightpick.runtime.rng import RNG
from weightpick.runtime.timer import Timer
from weightpick.schema import defaults


def _env_int(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_sizes(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    out = []
    for part in raw.split(","):
        token = part.strip()
        if not token:
            continue
        try:
            parsed = int(token)
        except ValueError:
            continue
        if parsed >= 1:
            out.append(parsed)
    return out or default


BENCH_SIZES = _env_sizes("BENCH_SIZES", [4, 256, 65536])
BENCH_DRAWS = max(1, _env_int("BENCH_DRAWS", 20000))
BENCH_REPEATS = max(1, _env_int("BENCH_REPEATS", 3))
BENCH_BASE_SEED = _env_int("BENCH_BASE_SEED", defaults.DEFAULT_SEED)


def _make_weights(size, seed, forced):
    weights = RNG(RNG.derive_seed(seed, "weights", size)).random(size) + 0.01
    if forced:
        weights[size // 2] = np.inf
    return weights


def run_once(size, draws, seed, forced=False):
    weights = _make_weights(size, seed, forced)

    timer = Timer()
    sampler = WeightedIndexSampler(weights)
    timer.pause()
    build_ms = timer.elapsed("ms")

    rng = RNG(seed)
    timer = Timer()
    sampler.sample_many(rng, draws)
    timer.pause()
    draw_ms = timer.elapsed("ms")

    return {
        "size": int(size),
        "forced": bool(forced),
        "build_ms": build_ms,
        "draw_ms": draw_ms,
        "ns_per_draw": draw_ms * 1e6 / max(1, draws),
        "steps": int(rng.steps),
    }


def main():
    seeds = [BENCH_BASE_SEED + idx for idx in range(BENCH_REPEATS)]

    print("[BENCHMARK] weighted index sampler")
    print(f"sizes={BENCH_SIZES} draws={BENCH_DRAWS} repeats={BENCH_REPEATS}")

    print("\n[SUMMARY]")
    for size in BENCH_SIZES:
        for forced in (False, True):
            rows = [run_once(size, BENCH_DRAWS, seed, forced) for seed in seeds]
            build = [row["build_ms"] for row in rows]
            per_draw = [row["ns_per_draw"] for row in rows]
            label = "forced" if forced else "finite"
            print(
                f"  size={size:<6} {label:<6} "
                f"build_median={statistics.median(build):.3f}ms "
                f"draw_median={statistics.median(per_draw):.1f}ns "
                f"steps={rows[0]['steps']}"
            )


if __name__ == "__main__":
    main()
