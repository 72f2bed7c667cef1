import logging
import math
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import numpy as np
import pandas as pd

from weightpick import (
    DrawResult,
    RunConfig,
    WeightedDrawRunner,
    compare_step_consumption,
    draw,
    get_sample_config,
)


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)


class PublicApiTests(unittest.TestCase):
    def setUp(self):
        self._temp = tempfile.TemporaryDirectory()
        self.log_dir = self._temp.name

    def tearDown(self):
        logger = logging.getLogger("weightpick")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        self._temp.cleanup()

    def _run_cfg(self, **kwargs):
        kwargs.setdefault("log_dir", self.log_dir)
        kwargs.setdefault("log_level", "quiet")
        return RunConfig(**kwargs)

    def test_uniform_sample_config_frequencies(self):
        result = WeightedDrawRunner(
            get_sample_config("uniform"), self._run_cfg()
        ).run()

        self.assertIsInstance(result, DrawResult)
        self.assertIsInstance(result.summary, pd.DataFrame)
        self.assertEqual(result.draws, 100_000)
        self.assertEqual(result.steps_consumed, 100_000)
        self.assertEqual(list(result.summary["label"]), ["north", "east", "south", "west"])
        self.assertLess(result.max_deviation(), 0.01)
        self.assertFalse(result.forced)
        self.assertTrue(result.log_path.exists())

    def test_forced_edge_always_picks_infinite_weight(self):
        result = draw(get_sample_config("forced_edge"), self._run_cfg(draws=250))
        self.assertEqual(result.forced_index, 1)
        self.assertTrue(np.all(result.indices == 1))
        self.assertEqual(result.steps_consumed, 250)
        self.assertEqual(int(result.summary.loc[1, "count"]), 250)
        self.assertTrue(any("forced" in note for note in result.runtime_notes))

    def test_same_seed_reproduces_indices(self):
        config = get_sample_config("skewed")
        first = draw(config, self._run_cfg(draws=500, seed=5))
        second = draw(config, self._run_cfg(draws=500, seed=5))
        np.testing.assert_array_equal(first.indices, second.indices)

    def test_run_config_overrides_metadata(self):
        config = get_sample_config("sparse")
        result = draw(
            config,
            self._run_cfg(draws=10, seed=3, bit_generator="pcg64", keep_indices=False),
        )
        self.assertEqual(result.draws, 10)
        self.assertEqual(result.seed, 3)
        self.assertIsNone(result.indices)
        zero_rows = result.summary[result.summary["weight_share"] == 0.0]
        self.assertTrue((zero_rows["count"] == 0).all())

    def test_invalid_metadata_falls_back_to_defaults(self):
        config = {
            "metadata": {"draws": "lots", "bit_generator": "bogus", "log_level": "loud"},
            "weights": [1.0, 1.0],
        }
        result = draw(config, RunConfig(log_dir=self.log_dir))
        self.assertEqual(result.draws, 10000)
        self.assertEqual(result.steps_consumed, 10000)

    def test_all_zero_weights_follow_mode(self):
        config = {"weights": [0.0, 0.0]}
        with self.assertRaises(ValueError):
            draw(config, self._run_cfg(draws=5))
        result = draw(config, self._run_cfg(draws=5, zero_weights_mode="uniform"))
        self.assertEqual(result.draws, 5)

    def test_missing_weights_raise(self):
        with self.assertRaises(ValueError):
            draw({"metadata": {}}, self._run_cfg())

    def test_missing_weights_leave_no_run_log(self):
        with patch("weightpick.api.runner.setup_run_logger") as setup:
            with self.assertRaises(ValueError):
                draw({"metadata": {}}, self._run_cfg())
        setup.assert_not_called()
        self.assertEqual(list(Path(self.log_dir).iterdir()), [])

    def test_log_messages_use_deferred_arguments(self):
        logger = logging.getLogger("weightpick_test_runner_records")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = _ListHandler()
        logger.handlers = [handler]

        config = {"metadata": {"log_level": "bogus"}, "weights": [1.0, 2.0]}
        with patch(
            "weightpick.api.runner.setup_run_logger", return_value=(logger, None)
        ):
            draw(config, RunConfig(draws=20, seed=1))

        messages = [record.getMessage() for record in handler.records]
        self.assertTrue(any(m.startswith("[FINAL] draws=20 steps=20") for m in messages))
        self.assertIn("  - metadata.log_level must be one of", "\n".join(messages))
        for record in handler.records:
            if record.msg.startswith(("[FINAL]", "[SAMPLER]", "  - ")):
                self.assertTrue(record.args, record.msg)

    def test_output_directory_hint_creates_timestamped_csv(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            result = draw(
                get_sample_config("skewed"),
                self._run_cfg(draws=100, output_path=temp_dir),
            )
            self.assertEqual(result.output_path.parent, Path(temp_dir))
            self.assertTrue(result.output_path.name.endswith("_weightpick.csv"))
            written = pd.read_csv(result.output_path)
            self.assertEqual(int(written["count"].sum()), 100)

    def test_explicit_output_filename_is_honored(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            explicit_path = Path(temp_dir) / "summary.csv"
            result = draw(
                get_sample_config("skewed"),
                self._run_cfg(draws=10, output_path=str(explicit_path)),
            )
            self.assertEqual(result.output_path, explicit_path)
            self.assertTrue(explicit_path.exists())

    def test_without_log_file(self):
        result = draw(
            get_sample_config("skewed"), self._run_cfg(draws=1, log_to_file=False)
        )
        self.assertIsNone(result.log_path)

    def test_compare_step_consumption(self):
        report = compare_step_consumption(
            [1.0, 2.0, 3.0], [1.0, math.inf, 3.0], seed=12, draws=40
        )
        self.assertEqual(report["a_steps"], 40)
        self.assertEqual(report["b_steps"], 40)
        self.assertTrue(report["aligned"])
        self.assertTrue(np.all(report["b_indices"] == 1))


if __name__ == "__main__":
    unittest.main()
