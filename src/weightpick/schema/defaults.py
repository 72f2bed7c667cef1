"""
Default settings for draw runs.
"""

DEFAULT_SEED = 42
DEFAULT_DRAWS = 10000

DEFAULT_LOG_LEVEL = "info"
DEFAULT_BIT_GENERATOR = "pcg64"
DEFAULT_ZERO_WEIGHTS_MODE = "error"

ZERO_WEIGHTS_MODES = ("error", "uniform")
LOG_LEVELS = ("trace", "debug", "info", "warning", "error", "fatal", "quiet")
