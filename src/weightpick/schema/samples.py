"""
Sample YAML run configurations stored as strings.
"""

import copy
from typing import Any

import yaml

CONFIG_UNIFORM = """
metadata:
  name: "uniform_four"
  seed: 42
  draws: 100000

weights: [1.0, 1.0, 1.0, 1.0]
labels: ["north", "east", "south", "west"]
"""

CONFIG_SKEWED = """
metadata:
  name: "skewed"
  seed: 7
  draws: 50000

weights: [1.0, 2.0, 3.0, 4.0]
"""

CONFIG_FORCED_EDGE = """
metadata:
  name: "forced_edge"
  seed: 11
  draws: 1000

# An infinite weight marks the edge that must always be taken.
weights: [2.0, .inf, 5.0]
labels: ["a->b", "a->c", "a->d"]
"""

CONFIG_DOUBLE_FORCED = """
metadata:
  name: "double_forced"
  seed: 13
  draws: 1000

weights: [.inf, .inf]
"""

CONFIG_SPARSE = """
metadata:
  name: "sparse"
  seed: 17
  draws: 20000
  bit_generator: "sfc64"

weights: [0.0, 3.0, 0.0, 0.0, 1.0, 0.0]
"""


_SAMPLE_CONFIGS = {
    "uniform": CONFIG_UNIFORM,
    "skewed": CONFIG_SKEWED,
    "forced_edge": CONFIG_FORCED_EDGE,
    "double_forced": CONFIG_DOUBLE_FORCED,
    "sparse": CONFIG_SPARSE,
}


def available_sample_configs() -> list[str]:
    """Return sorted names for all built-in sample configurations."""

    return sorted(_SAMPLE_CONFIGS.keys())


def load_config(config: Any) -> dict[str, Any]:
    """Parse and normalize a config from YAML text or dict input."""

    if isinstance(config, dict):
        return copy.deepcopy(config)

    if isinstance(config, str):
        parsed = yaml.safe_load(config)
        if parsed is None:
            raise ValueError("Config text is empty")
        if not isinstance(parsed, dict):
            raise ValueError("Config must parse to a mapping")
        return parsed

    raise TypeError("Config must be a dict or YAML string")


def get_sample_config(name: str) -> dict[str, Any]:
    """Load one of the built-in sample configurations by name."""

    key = str(name).strip().lower()
    if key not in _SAMPLE_CONFIGS:
        options = ", ".join(available_sample_configs())
        raise ValueError(f"Unknown sample config '{name}'. Available: {options}")
    return load_config(_SAMPLE_CONFIGS[key])
