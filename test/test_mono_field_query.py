"""Tests for the shared mono-field option bag."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticBuilder.core import MissingQueryParam, MonoFieldQuery


class TestMonoFieldQuery(unittest.TestCase):
    def test_constructor_seeds_type_field_and_query(self) -> None:
        q = MonoFieldQuery("common", "body", "quick fox")
        self.assertEqual(q.query_type, "common")
        self.assertEqual(q.field_name, "body")
        self.assertEqual(q.query_string, "quick fox")
        self.assertEqual(dict(q.opts), {"query": "quick fox"})

    def test_shared_setters_write_expected_keys(self) -> None:
        q = MonoFieldQuery("common", "body", "x").analyzer("english").boost(1.5).name("n1").minimum_should_match("75%")
        self.assertEqual(
            dict(q.opts),
            {"query": "x", "analyzer": "english", "boost": 1.5, "_name": "n1", "minimum_should_match": "75%"},
        )

    def test_set_and_get_opt(self) -> None:
        q = MonoFieldQuery("common")
        self.assertIsNone(q.get_opt("cutoff_frequency"))
        self.assertEqual(q.get_opt("cutoff_frequency", 0.5), 0.5)
        q.set_opt("cutoff_frequency", 0.01)
        self.assertEqual(q.get_opt("cutoff_frequency"), 0.01)

    def test_to_dict_requires_field_and_query(self) -> None:
        with self.assertRaisesRegex(MissingQueryParam, "field"):
            MonoFieldQuery("common", query_string="x").to_dict()
        with self.assertRaisesRegex(MissingQueryParam, "query"):
            MonoFieldQuery("common", "body").to_dict()

    def test_to_json_round_trips_structure(self) -> None:
        q = MonoFieldQuery("common", "body", "x").boost(2)
        self.assertEqual(json.loads(q.to_json(indent=2)), {"common": {"body": {"query": "x", "boost": 2}}})


if __name__ == "__main__":
    unittest.main()
