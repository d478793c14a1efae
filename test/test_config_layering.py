"""Tests for layered config parsing and validation."""

import os
import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.config import build_query, load_config, parse_config_dict
from ElasticBuilder.config.runtime import LOG_LEVEL_ENV


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "output": {"formats": ["console"], "base_dir": "output", "indent": 2},
        "queries": [
            {
                "NAME": "q1",
                "field": "body",
                "query": "nelly the elephant as a cartoon",
                "cutoff_frequency": 0.001,
                "low_freq_operator": "AND",
                "minimum_should_match": {"low_freq": 2, "high_freq": "3<80%"},
            }
        ],
    }


class TestConfigLayering(unittest.TestCase):
    def setUp(self) -> None:
        env = patch.dict(os.environ, {}, clear=False)
        env.start()
        os.environ.pop(LOG_LEVEL_ENV, None)
        self.addCleanup(env.stop)

    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.output.formats, ("console",))
        self.assertEqual(cfg.output.indent, 2)
        spec = cfg.queries[0]
        self.assertEqual(spec.name, "q1")
        self.assertEqual(spec.field, "body")
        self.assertEqual(spec.cutoff_frequency, 0.001)
        self.assertEqual(spec.minimum_should_match, {"low_freq": 2, "high_freq": "3<80%"})

    def test_build_query_from_spec(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        payload = build_query(cfg.queries[0]).to_dict()
        self.assertEqual(
            payload,
            {
                "common": {
                    "body": {
                        "query": "nelly the elephant as a cartoon",
                        "cutoff_frequency": 0.001,
                        "low_freq_operator": "and",
                        "minimum_should_match": {"low_freq": 2, "high_freq": "3<80%"},
                        "_name": "q1",
                    }
                }
            },
        )

    def test_build_query_with_scalar_min_match_and_shared_options(self) -> None:
        raw = _base_raw_config()
        raw["queries"] = [
            {
                "field": "title",
                "query": "x",
                "minimum_should_match": "75%",
                "disable_coord": True,
                "analyzer": "standard",
                "boost": 2,
                "high_freq_operator": "or",
            }
        ]
        spec = parse_config_dict(raw).queries[0]
        self.assertIsNone(spec.name)
        body = build_query(spec).to_dict()["common"]["title"]
        self.assertEqual(body["minimum_should_match"], "75%")
        self.assertIs(body["disable_coord"], True)
        self.assertEqual(body["analyzer"], "standard")
        self.assertEqual(body["boost"], 2)
        self.assertEqual(body["high_freq_operator"], "or")
        self.assertNotIn("_name", body)

    def test_invalid_operator_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0]["high_freq_operator"] = "xor"
        with self.assertRaisesRegex(ValueError, "queries\\[0\\]\\.high_freq_operator"):
            parse_config_dict(raw)

    def test_unknown_query_key_rejected(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0]["operator"] = "and"
        with self.assertRaisesRegex(ValueError, "unknown keys"):
            parse_config_dict(raw)

    def test_missing_field_error(self) -> None:
        raw = _base_raw_config()
        del raw["queries"][0]["field"]
        with self.assertRaisesRegex(ValueError, "queries\\[0\\]\\.field"):
            parse_config_dict(raw)

    def test_cutoff_frequency_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0]["cutoff_frequency"] = "0.1"
        with self.assertRaisesRegex(TypeError, "queries\\[0\\]\\.cutoff_frequency"):
            parse_config_dict(raw)

    def test_negative_cutoff_frequency_rejected(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0]["cutoff_frequency"] = -1
        with self.assertRaisesRegex(ValueError, "cutoff_frequency"):
            parse_config_dict(raw)

    def test_disable_coord_must_be_bool(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0]["disable_coord"] = "yes"
        with self.assertRaisesRegex(TypeError, "disable_coord"):
            parse_config_dict(raw)

    def test_min_match_unknown_sub_key_rejected(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0]["minimum_should_match"] = {"mid_freq": 1}
        with self.assertRaisesRegex(ValueError, "minimum_should_match"):
            parse_config_dict(raw)

    def test_queries_empty_error(self) -> None:
        raw = _base_raw_config()
        raw["queries"] = []
        with self.assertRaisesRegex(ValueError, "queries"):
            parse_config_dict(raw)

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", "markdown"]
        with self.assertRaisesRegex(ValueError, "output\\.formats"):
            parse_config_dict(raw)

    def test_output_formats_normalized_and_deduplicated(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["output"]["formats"] = ["JSON", "json", "console"]
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.output.formats, ("json", "console"))

    def test_output_indent_null_means_compact(self) -> None:
        raw = _base_raw_config()
        raw["output"]["indent"] = None
        self.assertIsNone(parse_config_dict(raw).output.indent)

    def test_log_level_validation(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "verbose"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_log_level_env_override(self) -> None:
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "DEBUG")

    def test_log_level_env_override_still_checks_yaml_value(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = 10
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            with self.assertRaisesRegex(TypeError, "log\\.level"):
                parse_config_dict(raw)
        del raw["log"]["level"]
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            with self.assertRaisesRegex(ValueError, "log\\.level"):
                parse_config_dict(raw)


class TestConfigFiles(unittest.TestCase):
    def test_default_file_parses(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(len(cfg.queries), 1)
        self.assertEqual(cfg.queries[0].low_freq_operator, "and")

    def test_non_mapping_root_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_config(path)


if __name__ == "__main__":
    unittest.main()
