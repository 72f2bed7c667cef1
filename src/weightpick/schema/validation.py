"""
Weight and configuration validation.

``validate_weights`` is strict and raises on misuse, since a corrupted weight
vector cannot be sampled from. The config validators are lenient: they
return warning messages and let the runner fall back to defaults.
"""

from collections.abc import Mapping
from typing import Any

import numpy as np

from . import defaults


def _positions(mask: np.ndarray, limit: int = 5) -> str:
    idx = np.flatnonzero(mask)
    shown = ", ".join(str(int(i)) for i in idx[:limit])
    if idx.size > limit:
        shown += ", ..."
    return shown


def _holds_text(weights: Any) -> bool:
    if isinstance(weights, np.ndarray):
        return weights.dtype.kind in ("U", "S") or (
            weights.dtype.kind == "O"
            and any(isinstance(item, (str, bytes)) for item in weights.ravel())
        )
    try:
        items = list(weights)
    except TypeError:
        return False
    return any(
        isinstance(item, (str, bytes, np.str_, np.bytes_)) or _nested_text(item)
        for item in items
    )


def _nested_text(item: Any) -> bool:
    if isinstance(item, (list, tuple, np.ndarray)):
        return _holds_text(item)
    return False


def validate_weights(weights: Any) -> np.ndarray:
    """Return a read-only float64 copy of ``weights`` or raise.

    Args:
        weights: One-dimensional sequence of non-negative numbers. ``+inf``
            is allowed; ``-inf`` and NaN are not.

    Returns:
        A new, non-writeable array that does not alias caller storage.

    Raises:
        TypeError: if ``weights`` is not a numeric sequence.
        ValueError: if it is empty, not one-dimensional, or holds NaN or
            negative entries.
    """
    if weights is None or isinstance(weights, (str, bytes, Mapping)):
        raise TypeError("weights must be a sequence of numbers")
    if not hasattr(weights, "__len__") and hasattr(weights, "__iter__"):
        weights = list(weights)
    if _holds_text(weights):
        raise TypeError("weights must be numbers, not strings")
    try:
        values = np.array(weights, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as exc:
        raise TypeError("weights must be a sequence of numbers") from exc

    if values.ndim != 1:
        raise ValueError(f"weights must be one-dimensional, got shape {values.shape}")
    if values.size == 0:
        raise ValueError("weights must not be empty")

    nan_mask = np.isnan(values)
    if nan_mask.any():
        raise ValueError(f"weights contain NaN at positions {_positions(nan_mask)}")
    negative_mask = values < 0
    if negative_mask.any():
        raise ValueError(
            f"weights must be >= 0; negative at positions {_positions(negative_mask)}"
        )

    values.setflags(write=False)
    return values


def validate_metadata(metadata: dict[str, Any]) -> list[str]:
    """Validate the metadata section of a run config.

    Args:
        metadata: The metadata dictionary from config

    Returns:
        List of warning messages
    """
    warnings = []

    # Validate seed
    seed = metadata.get("seed")
    if seed is not None:
        try:
            int(seed)
        except (TypeError, ValueError):
            warnings.append("metadata.seed must be an integer")

    # Validate draws
    draws = metadata.get("draws")
    if draws is not None:
        try:
            if int(draws) < 0:
                warnings.append("metadata.draws must be >= 0")
        except (TypeError, ValueError):
            warnings.append("metadata.draws must be an integer")

    # Validate log_level
    log_level = metadata.get("log_level")
    if log_level is not None and str(log_level).strip().lower() not in defaults.LOG_LEVELS:
        options = ", ".join(defaults.LOG_LEVELS)
        warnings.append(f"metadata.log_level must be one of {options}")

    # Validate log_dir
    log_dir = metadata.get("log_dir")
    if log_dir is not None and (not isinstance(log_dir, str) or not log_dir.strip()):
        warnings.append("metadata.log_dir must be a non-empty string")

    # Validate bit_generator
    from ..runtime.rng import available_bit_generators

    bit_generator = metadata.get("bit_generator")
    if (
        bit_generator is not None
        and str(bit_generator).strip().lower() not in available_bit_generators()
    ):
        options = ", ".join(available_bit_generators())
        warnings.append(f"metadata.bit_generator must be one of {options}")

    # Validate zero_weights_mode
    zero_mode = metadata.get("zero_weights_mode")
    if (
        zero_mode is not None
        and str(zero_mode).strip().lower() not in defaults.ZERO_WEIGHTS_MODES
    ):
        warnings.append("metadata.zero_weights_mode must be error or uniform")

    # Validate output_path
    output_path = metadata.get("output_path")
    if output_path is not None and (
        not isinstance(output_path, str) or not output_path.strip()
    ):
        warnings.append("metadata.output_path must be a non-empty string")

    return warnings


def validate_labels(labels: Any, n_weights: int) -> list[str]:
    """Check optional index labels against the number of weights."""

    if labels is None:
        return []
    if not isinstance(labels, (list, tuple)):
        return ["labels must be a list"]
    warnings = []
    if len(labels) != n_weights:
        warnings.append(
            f"labels has {len(labels)} entries but weights has {n_weights}; "
            "labels ignored"
        )
    elif len({str(label) for label in labels}) != len(labels):
        warnings.append("labels should be unique")
    return warnings


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate a whole run config; raises only when ``weights`` is absent."""

    if not isinstance(config, dict):
        raise TypeError("Config must be a mapping")
    if "weights" not in config:
        raise ValueError("Config is missing required key 'weights'")

    warnings = []
    metadata = config.get("metadata", {})
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        warnings.append("metadata must be a mapping; ignored")
        metadata = {}
    warnings.extend(validate_metadata(metadata))

    weights = config.get("weights")
    if hasattr(weights, "__len__") and not isinstance(weights, (str, bytes)):
        n_weights = len(weights)
    else:
        n_weights = 0
    warnings.extend(validate_labels(config.get("labels"), n_weights))
    return warnings
