"""Quick local sample run for weightpick."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from weightpick import RunConfig, WeightedDrawRunner, get_sample_config  # noqa: E402


def main() -> int:
    try:
        for name in ("skewed", "forced_edge"):
            config = get_sample_config(name)
            run_cfg = RunConfig(draws=20_000, log_level="info", keep_indices=False)
            result = WeightedDrawRunner(config, run_cfg).run()
            mode = f"forced={result.forced_index}" if result.forced else "finite"
            print(
                f"[SAMPLE RUN] config={name} {mode} draws={result.draws} "
                f"steps={result.steps_consumed} "
                f"max_deviation={result.max_deviation():.4f} "
                f"elapsed_ms={result.elapsed_ms:.1f}"
            )
            print(result.summary.to_string(index=False))
    except Exception as exc:
        print(f"[SAMPLE RUN ERROR] {exc}", file=sys.stderr)
        print("Tip: install dependencies with `pip install -e .`", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
