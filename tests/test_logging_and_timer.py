import logging
import tempfile
import unittest
from pathlib import Path

from weightpick.runtime.logging_utils import (
    QUIET,
    TRACE,
    log_if,
    resolve_log_level,
    setup_run_logger,
)
from weightpick.runtime.timer import Timer


class _FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)


class LoggingTests(unittest.TestCase):
    def _close(self, logger):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_resolve_log_level_names(self):
        self.assertEqual(resolve_log_level("trace"), TRACE)
        self.assertEqual(resolve_log_level("DEBUG"), logging.DEBUG)
        self.assertEqual(resolve_log_level(" warning "), logging.WARNING)
        self.assertEqual(resolve_log_level("fatal"), logging.CRITICAL)
        self.assertEqual(resolve_log_level("quiet"), QUIET)
        self.assertEqual(resolve_log_level("verbose"), logging.INFO)
        self.assertEqual(resolve_log_level(None), logging.INFO)
        self.assertEqual(resolve_log_level(logging.ERROR), logging.ERROR)
        self.assertEqual(logging.getLevelName(TRACE), "TRACE")

    def test_setup_run_logger_defaults_to_cwd_logs_directory(self):
        logger, log_path = setup_run_logger(log_dir=None, name="weightpick_test_logger")
        logger.info("test-log-entry")

        path = Path(log_path)
        self.assertEqual(path.parent, Path.cwd() / "logs")
        self.assertTrue(path.exists())

        self._close(logger)
        path.unlink(missing_ok=True)

    def test_setup_run_logger_writes_at_requested_level(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            logger, log_path = setup_run_logger(
                log_dir=temp_dir, name="weightpick_test_level", level="warning"
            )
            logger.info("hidden-entry")
            logger.warning("shown-entry")
            self._close(logger)

            text = Path(log_path).read_text()
            self.assertIn("shown-entry", text)
            self.assertNotIn("hidden-entry", text)
            self.assertFalse(logger.propagate)

    def test_setup_run_logger_without_file(self):
        logger, log_path = setup_run_logger(name="weightpick_test_nofile", to_file=False)
        self.assertIsNone(log_path)
        self.assertEqual(len(logger.handlers), 1)
        self._close(logger)

    def test_setup_run_logger_ignores_handler_close_errors(self):
        class _BrokenHandler(logging.Handler):
            def emit(self, record):
                return None

            def close(self):
                raise RuntimeError("close failed")

        logger_name = "weightpick_test_logger_broken_close"
        logger = logging.getLogger(logger_name)
        logger.handlers = []
        logger.addHandler(_BrokenHandler())

        with tempfile.TemporaryDirectory() as temp_dir:
            logger, log_path = setup_run_logger(log_dir=temp_dir, name=logger_name)
            logger.warning("warn")

            self.assertTrue(Path(log_path).exists())
            self._close(logger)

    def test_log_if_respects_condition_and_level(self):
        logger = logging.getLogger("weightpick_test_log_if")
        logger.setLevel(TRACE)
        logger.propagate = False
        handler = _ListHandler()
        logger.handlers = [handler]

        log_if(logger, False, "info", "skipped %d", 1)
        log_if(logger, True, "trace", "picked %d", 2)
        log_if(None, True, "info", "no logger")

        self.assertEqual(len(handler.records), 1)
        self.assertEqual(handler.records[0].levelno, TRACE)
        self.assertEqual(handler.records[0].getMessage(), "picked 2")


class TimerTests(unittest.TestCase):
    def test_elapsed_accumulates_across_pauses(self):
        clock = _FakeClock()
        timer = Timer(clock=clock)
        self.assertTrue(timer.running)

        clock.now += 1.5
        timer.pause()
        clock.now += 10.0
        self.assertFalse(timer.running)
        self.assertAlmostEqual(timer.elapsed("s"), 1.5)

        timer.start()
        clock.now += 0.5
        self.assertAlmostEqual(timer.elapsed("ms"), 2000.0)
        timer.pause()
        timer.pause()
        self.assertAlmostEqual(timer.elapsed("s"), 2.0)

    def test_units(self):
        clock = _FakeClock()
        timer = Timer(clock=clock)
        clock.now += 7200.0
        self.assertAlmostEqual(timer.elapsed("h"), 2.0)
        self.assertAlmostEqual(timer.elapsed("min"), 120.0)
        with self.assertRaises(ValueError):
            timer.elapsed("fortnight")

    def test_default_clock_is_monotonic(self):
        timer = Timer()
        first = timer.elapsed()
        self.assertGreaterEqual(timer.elapsed(), first)


if __name__ == "__main__":
    unittest.main()
