"""Tests for the module-level API functions."""

from __future__ import annotations

import numpy as np

import json_dom
from json_dom import QueryConfig, find, find_one, parse_text, parse_value


class TestApi:
    def test_parse_text_returns_document(self, basic_json: bytes) -> None:
        doc = parse_text(basic_json)
        assert doc.kind is json_dom.NodeKind.DOCUMENT
        assert doc.first_child_named("name").value() == "John"

    def test_parse_value_returns_document(self) -> None:
        doc = parse_value([{"id": np.int64(1)}])
        assert doc.kind is json_dom.NodeKind.DOCUMENT
        assert doc.to_record_array() == [{"id": np.int64(1)}]

    def test_find(self, screen_json: bytes) -> None:
        doc = parse_text(screen_json)
        found = find(doc, "*/layers//exportOptions//asset_id")
        assert [n.text() for n in found] == ["4627", "4629", "4630", "4631", "4632"]

    def test_find_with_config(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        found = find(doc, "*/id", config=QueryConfig(cache_size=1))
        assert len(found) == 3

    def test_find_one(self, basic_json: bytes) -> None:
        doc = parse_text(basic_json)
        node = find_one(doc, "cars/*/name")
        assert node is not None
        assert node.text() == "Ford"
        assert find_one(doc, "cars/*/missing") is None

    def test_malformed_pattern(self, basic_json: bytes) -> None:
        assert find(parse_text(basic_json), "cars//") == []

    def test_value_round_trip_after_edit(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        for node in find(doc, "*/userID"):
            node.set_value(node.value() + 1)
        assert [r["userID"] for r in doc.to_record_array()] == [101.0, 201.0, 301.0]
