"""
Tests for run configuration.
"""

import json
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markov_text.config import MarkovConfig, load_config


class TestMarkovConfig(unittest.TestCase):
    """Tests for MarkovConfig."""

    def test_defaults(self):
        """Default configuration values."""
        config = MarkovConfig()
        self.assertEqual(config.prefix_length, 2)
        self.assertEqual(config.num_iterations, 100)
        self.assertIsNone(config.seed)
        self.assertFalse(config.normalize)
        self.assertEqual(config.csv_column, "text")

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys are dropped."""
        config = MarkovConfig.from_dict({"prefix_length": 3, "colour": "blue"})
        self.assertEqual(config.prefix_length, 3)
        self.assertEqual(config.num_iterations, 100)

    def test_to_dict(self):
        """All fields are exported."""
        self.assertEqual(
            MarkovConfig(seed=5).to_dict(),
            {"prefix_length": 2, "num_iterations": 100, "seed": 5, "normalize": False, "csv_column": "text"},
        )

    def test_validate(self):
        """Out-of-range values are rejected."""
        self.assertEqual(MarkovConfig(prefix_length=0).validate().prefix_length, 0)
        with self.assertRaises(ValueError):
            MarkovConfig(prefix_length=-1).validate()
        with self.assertRaises(ValueError):
            MarkovConfig(num_iterations=0).validate()

    def test_validate_rejects_wrong_types(self):
        """Values of the wrong JSON type are rejected with ValueError."""
        bad = [
            {"prefix_length": "2"},
            {"prefix_length": True},
            {"num_iterations": 2.5},
            {"seed": "abc"},
            {"seed": False},
            {"normalize": "yes"},
            {"csv_column": 3},
        ]
        for values in bad:
            with self.assertRaises(ValueError, msg=values):
                MarkovConfig.from_dict(values).validate()

    def test_validate_accepts_null_seed(self):
        """A null seed means OS entropy."""
        self.assertIsNone(MarkovConfig.from_dict({"seed": None}).validate().seed)


class TestLoadConfig(unittest.TestCase):
    """Tests for reading JSON config files."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_load(self):
        """A JSON object loads into a config."""
        path = self.dir / "config.json"
        path.write_text(json.dumps({"prefix_length": 1, "seed": 9}), encoding="utf-8")
        self.assertEqual(load_config(path), MarkovConfig(prefix_length=1, seed=9))

    def test_not_an_object(self):
        """A JSON array is rejected."""
        path = self.dir / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_missing_file(self):
        """A missing file raises OSError."""
        with self.assertRaises(OSError):
            load_config(self.dir / "nope.json")


if __name__ == "__main__":
    unittest.main()
