"""
Run logging helpers.
"""

import logging
from datetime import datetime
from pathlib import Path

TRACE = 5
QUIET = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")

_SEVERITIES = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "quiet": QUIET,
}


def resolve_log_level(level):
    """Map a severity name to a ``logging`` level; unknown names mean info."""

    if isinstance(level, int) and not isinstance(level, bool):
        return level
    text = str(level).strip().lower() if level is not None else ""
    return _SEVERITIES.get(text, logging.INFO)


def setup_run_logger(log_dir=None, name="weightpick", level="info", to_file=True):
    default_log_dir = Path.cwd() / "logs"

    if log_dir is None:
        resolved_log_dir = default_log_dir
    else:
        text = str(log_dir).strip()
        resolved_log_dir = Path(text).expanduser() if text else default_log_dir

    threshold = resolve_log_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(threshold)
    logger.propagate = False

    if logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            try:
                handler.close()
            except Exception:
                pass

    log_path = None
    if to_file:
        resolved_log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        log_path = resolved_log_dir / f"run_{timestamp}.log"

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(threshold)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(max(threshold, logging.WARNING))
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    return logger, (str(log_path) if log_path is not None else None)


def log_if(logger, condition, level, message, *args):
    """Emit ``message % args`` at ``level`` only when ``condition`` holds."""

    if logger is None or not condition:
        return
    logger.log(resolve_log_level(level), message, *args)
