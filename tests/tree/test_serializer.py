"""Tests for to_value / to_record_array projections.

Verifies:
- text-built trees project to what a JSON decoder produces
- typed record trees project back with their exact scalar types
- apply_exclusion drops excluded records and fields, and only when asked
- to_record_array shape checks
- a corrupted bool leaf surfaces BooleanParseError
"""

from __future__ import annotations

import json

import numpy as np
import pytest

from json_dom import parse_text, parse_value
from json_dom.errors import BooleanParseError, ShapeMismatchError
from json_dom.tree.serializer import to_record_array, to_value


def _typed_records() -> list[dict[str, object]]:
    return [
        {
            "id": np.int8(1),
            "count": np.uint32(7),
            "score": np.float32(0.5),
            "total": 12,
            "ratio": 0.25,
            "name": "alpha",
            "ok": True,
            "note": None,
        },
        {
            "id": np.int8(-2),
            "count": np.uint32(0),
            "score": np.float32(1.25),
            "total": -3,
            "ratio": 1.0,
            "name": "beta",
            "ok": False,
            "note": None,
        },
    ]


class TestToValue:
    def test_matches_json_decoder(self, basic_json: bytes) -> None:
        doc = parse_text(basic_json)
        expected = json.loads(basic_json, parse_int=float)
        assert to_value(doc) == expected

    def test_screen_document_round_trip(self, screen_json: bytes) -> None:
        doc = parse_text(screen_json)
        assert doc.to_value() == json.loads(screen_json, parse_int=float)

    def test_text_numbers_are_floats(self) -> None:
        doc = parse_text(b"[1, 2.5]")
        values = to_value(doc)
        assert values == [1.0, 2.5]
        assert all(type(v) is float for v in values)

    def test_typed_records_round_trip(self) -> None:
        records = _typed_records()
        projected = parse_value(records).to_value()
        assert projected == records
        for original, restored in zip(records, projected, strict=True):
            for key, value in original.items():
                assert type(restored[key]) is type(value), key

    def test_subtree_projection(self, basic_json: bytes) -> None:
        doc = parse_text(basic_json)
        cars = doc.first_child_named("cars")
        assert to_value(cars.first_child) == {
            "name": "Ford",
            "models": ["Fiesta", "Focus", "Mustang"],
        }

    def test_mixed_array_port(self) -> None:
        doc = parse_text(b'{"objects": [1, [21, 22], {"foo": "bar"}, null, true]}')
        assert to_value(doc.first_child_named("objects")) == [
            1.0,
            [21.0, 22.0],
            {"foo": "bar"},
            None,
            True,
        ]

    def test_set_value_is_reflected(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        doc.children()[0].first_child_named("userID").set_value(np.int16(111))
        first = to_value(doc)[0]
        assert first["userID"] == 111
        assert type(first["userID"]) is np.int16


class TestExclusion:
    def test_ignored_by_default(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        doc.children()[1].set_excluded(True)
        assert len(to_value(doc)) == 3

    def test_drops_excluded_records(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        doc.children()[1].set_excluded(True)
        values = to_value(doc, apply_exclusion=True)
        assert [record["id"] for record in values] == [1.0, 3.0]

    def test_drops_excluded_fields(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        for record in doc.children():
            record.first_child_named("roleID").set_excluded(True)
        values = doc.to_record_array(apply_exclusion=True)
        assert values == [
            {"id": 1.0, "userID": 100.0},
            {"id": 2.0, "userID": 200.0},
            {"id": 3.0, "userID": 300.0},
        ]


class TestToRecordArray:
    def test_records(self, records_json: bytes) -> None:
        doc = parse_text(records_json)
        records = to_record_array(doc)
        assert len(records) == 3
        assert records[2] == {"id": 3.0, "userID": 300.0, "roleID": 5.0}

    def test_typed_records(self) -> None:
        records = _typed_records()
        restored = parse_value(records).to_record_array()
        assert restored == records
        assert type(restored[0]["id"]) is np.int8
        assert type(restored[1]["score"]) is np.float32

    def test_empty_array(self) -> None:
        assert to_record_array(parse_text(b"[]")) == []

    def test_non_array_raises(self) -> None:
        doc = parse_text(b'{"a": 1}')
        with pytest.raises(ShapeMismatchError, match="need array"):
            to_record_array(doc)

    def test_non_object_record_raises(self) -> None:
        doc = parse_text(b'[{"a": 1}, 2]')
        with pytest.raises(ShapeMismatchError, match="record 1 is float64"):
            to_record_array(doc)

    def test_excluded_bad_record_is_skipped(self) -> None:
        doc = parse_text(b'[{"a": 1}, 2]')
        doc.children()[1].set_excluded(True)
        assert to_record_array(doc, apply_exclusion=True) == [{"a": 1.0}]
        with pytest.raises(ShapeMismatchError):
            to_record_array(doc)


class TestCorruptBool:
    def test_bad_bool_text_raises(self) -> None:
        doc = parse_text(b'{"flag": true}')
        leaf = doc.first_child_named("flag").first_child
        leaf.label = "yes"
        with pytest.raises(BooleanParseError, match="'yes'"):
            to_value(doc)

    def test_alternative_literals_are_accepted(self) -> None:
        doc = parse_text(b'{"flag": false}')
        doc.first_child_named("flag").first_child.label = "T"
        assert to_value(doc) == {"flag": True}
