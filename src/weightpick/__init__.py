"""Public package interface for weightpick."""

from importlib.metadata import PackageNotFoundError, version

from .api.models import DrawResult, RunConfig
from .api.runner import WeightedDrawRunner, compare_step_consumption, draw
from .engine.alias import AliasTable
from .engine.sampler import FiniteWeights, InfiniteWeight, WeightedIndexSampler
from .runtime.rng import RNG, RandomSource
from .runtime.timer import Timer
from .schema.samples import (
    available_sample_configs,
    get_sample_config,
    load_config,
)

try:
    __version__ = version("weightpick")
except PackageNotFoundError:
    __version__ = "0.1.0"


__all__ = [
    "AliasTable",
    "DrawResult",
    "FiniteWeights",
    "InfiniteWeight",
    "RNG",
    "RandomSource",
    "RunConfig",
    "Timer",
    "WeightedDrawRunner",
    "WeightedIndexSampler",
    "available_sample_configs",
    "compare_step_consumption",
    "draw",
    "get_sample_config",
    "load_config",
]
