"""High-level import-first runtime API for config-driven draw runs."""

from __future__ import annotations

import copy
from datetime import datetime
from pathlib import Path
from typing import Any

from ..engine.sampler import WeightedIndexSampler
from ..runtime.logging_utils import log_if, setup_run_logger
from ..runtime.rng import RNG, available_bit_generators
from ..runtime.timer import Timer
from ..schema import defaults
from ..schema.samples import load_config
from ..schema.validation import validate_config
from ..scoring.frequencies import max_abs_deviation, summarize_draws
from .models import DrawResult, RunConfig


def _coerce_int(value: Any, fallback: int, minimum: int | None = None) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        parsed = int(fallback)
    if minimum is not None:
        parsed = max(minimum, parsed)
    return parsed


def _normalize_choice(value: Any, allowed, fallback: str) -> str:
    text = str(value).strip().lower() if value is not None else ""
    if text in allowed:
        return text
    return fallback


def _pick(override: Any, metadata: dict[str, Any], key: str, default: Any) -> Any:
    if override is not None:
        return override
    return metadata.get(key, default)


def _timestamped_output_name() -> str:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    return f"{stamp}_weightpick.csv"


def _resolve_output_path(output_path: str | None) -> Path | None:
    if output_path is None:
        return None
    text = str(output_path).strip()
    if not text:
        return None

    path = Path(text).expanduser()
    is_dir = (
        text.endswith("/")
        or text.endswith("\\")
        or path.suffix == ""
        or (path.exists() and path.is_dir())
    )
    if is_dir:
        path = path / _timestamped_output_name()
    return path


class WeightedDrawRunner:
    """High-level facade for running config-driven weighted draws."""

    def __init__(self, config: Any, run_config: RunConfig | None = None):
        self._config = load_config(config)
        self.run_config = run_config or RunConfig()

    def run(self) -> DrawResult:
        config = copy.deepcopy(self._config)
        metadata = config.get("metadata", {})
        if not isinstance(metadata, dict):
            metadata = {}
        run_cfg = self.run_config
        runtime_notes = []

        log_level = _normalize_choice(
            _pick(run_cfg.log_level, metadata, "log_level", defaults.DEFAULT_LOG_LEVEL),
            defaults.LOG_LEVELS,
            defaults.DEFAULT_LOG_LEVEL,
        )
        warnings = validate_config(config)
        logger, log_path = setup_run_logger(
            log_dir=_pick(run_cfg.log_dir, metadata, "log_dir", None),
            name="weightpick",
            level=log_level,
            to_file=run_cfg.log_to_file,
        )

        if warnings:
            logger.warning("[CONFIG WARNINGS]")
            for warning in warnings:
                logger.warning("  - %s", warning)

        seed = _coerce_int(
            _pick(run_cfg.seed, metadata, "seed", defaults.DEFAULT_SEED),
            defaults.DEFAULT_SEED,
        )
        draws = _coerce_int(
            _pick(run_cfg.draws, metadata, "draws", defaults.DEFAULT_DRAWS),
            defaults.DEFAULT_DRAWS,
            minimum=0,
        )
        bit_generator = _normalize_choice(
            _pick(
                run_cfg.bit_generator,
                metadata,
                "bit_generator",
                defaults.DEFAULT_BIT_GENERATOR,
            ),
            available_bit_generators(),
            defaults.DEFAULT_BIT_GENERATOR,
        )
        zero_mode = _normalize_choice(
            _pick(
                run_cfg.zero_weights_mode,
                metadata,
                "zero_weights_mode",
                defaults.DEFAULT_ZERO_WEIGHTS_MODE,
            ),
            defaults.ZERO_WEIGHTS_MODES,
            defaults.DEFAULT_ZERO_WEIGHTS_MODE,
        )
        output_file = _resolve_output_path(
            _pick(run_cfg.output_path, metadata, "output_path", None)
        )

        timer = Timer()
        sampler = WeightedIndexSampler(config["weights"], on_all_zero=zero_mode)
        timer.pause()
        build_ms = timer.elapsed("ms")

        if sampler.has_infinite_weight:
            runtime_notes.append(
                f"Infinite weight at index {sampler.infinite_index}; draws are forced"
            )
        logger.info(
            "[SAMPLER] size=%d forced_index=%s build_ms=%.3f",
            sampler.size,
            sampler.infinite_index,
            build_ms,
        )

        rng = RNG(seed, bit_generator=bit_generator)
        timer.start()
        indices = sampler.sample_many(rng, draws)
        timer.pause()
        elapsed_ms = timer.elapsed("ms")

        labels = config.get("labels")
        summary = summarize_draws(indices, sampler.probabilities, labels=labels)

        if output_file is not None:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            summary.to_csv(output_file, index=False)
            runtime_notes.append(f"Summary written to {output_file}")

        log_if(
            logger,
            draws > 0,
            "debug",
            "[COUNTS] %s",
            dict(zip(summary["label"], summary["count"].tolist())),
        )
        logger.info(
            "[FINAL] draws=%d steps=%d seed=%d bit_generator=%s "
            "max_deviation=%.6f elapsed_ms=%.3f",
            draws,
            rng.steps,
            seed,
            bit_generator,
            max_abs_deviation(summary),
            elapsed_ms,
        )

        return DrawResult(
            summary=summary,
            size=sampler.size,
            draws=draws,
            steps_consumed=int(rng.steps),
            elapsed_ms=elapsed_ms,
            seed=seed,
            forced_index=sampler.infinite_index,
            indices=indices if run_cfg.keep_indices else None,
            log_path=Path(log_path) if log_path is not None else None,
            output_path=output_file,
            runtime_notes=runtime_notes,
        )


def draw(config: Any, run_config: RunConfig | None = None) -> DrawResult:
    """Convenience function for one-off draw runs."""

    return WeightedDrawRunner(config, run_config=run_config).run()


def compare_step_consumption(
    weights_a,
    weights_b,
    seed: int = defaults.DEFAULT_SEED,
    draws: int = 1,
    bit_generator: str = defaults.DEFAULT_BIT_GENERATOR,
) -> dict[str, Any]:
    """Draw from two weight vectors with identically seeded generators.

    ``aligned`` is True when both generators produce the same next output
    afterwards, meaning both sides consumed the same number of steps.
    """
    sampler_a = WeightedIndexSampler(weights_a)
    sampler_b = WeightedIndexSampler(weights_b)
    rng_a = RNG(seed, bit_generator=bit_generator)
    rng_b = RNG(seed, bit_generator=bit_generator)

    picks_a = sampler_a.sample_many(rng_a, draws)
    picks_b = sampler_b.sample_many(rng_b, draws)
    steps_a = rng_a.steps
    steps_b = rng_b.steps

    return {
        "a_steps": int(steps_a),
        "b_steps": int(steps_b),
        "a_indices": picks_a,
        "b_indices": picks_b,
        "aligned": rng_a.next() == rng_b.next(),
    }
