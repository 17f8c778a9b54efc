"""Shared JSON documents for the json-dom test suite.

All documents are fixed byte strings so every test parses its own fresh tree.

- ``records_json``: three flat records (id, userID, roleID).
- ``screen_json``: a design-tool style screen with ``asset_id`` fields nested
  at varying depths under ``layers`` and ``exportOptions`` containers.
- ``basic_json``: a small document mixing every JSON type.
"""

from __future__ import annotations

import pytest

RECORDS_JSON = b"""[
    {"id": 1, "userID": 100, "roleID": 3},
    {"id": 2, "userID": 200, "roleID": 4},
    {"id": 3, "userID": 300, "roleID": 5}
]"""

# asset_id placement:
#   0     top-level field of the screen
#   4627  layers[0].exportOptions
#   4629  layers[1].exportOptions
#   4630  layers[1].layers[0].exportOptions      (nested layers)
#   4631  layers[2].children[0].exportOptions.variants[0]
#   4632  layers[3].exportOptions.exportOptions  (reachable twice)
#   9999  exportOptions directly under the screen, not under layers
#   8888  meta.layers[0].exportOptions           (layers not a screen child)
SCREEN_JSON = b"""[
    {
        "id": 1,
        "asset_id": 0,
        "layers": [
            {"name": "background", "exportOptions": {"asset_id": 4627}},
            {
                "name": "logo",
                "exportOptions": {"format": "png", "asset_id": 4629},
                "layers": [
                    {"name": "icon", "exportOptions": {"asset_id": 4630}}
                ]
            },
            {
                "name": "group",
                "children": [
                    {"exportOptions": {"variants": [{"asset_id": 4631}]}}
                ]
            },
            {
                "name": "nested",
                "exportOptions": {"exportOptions": {"asset_id": 4632}}
            }
        ],
        "exportOptions": {"asset_id": 9999},
        "meta": {"layers": [{"exportOptions": {"asset_id": 8888}}]}
    }
]"""

BASIC_JSON = b"""{
    "name": "John",
    "age": 30,
    "ratio": 0.25,
    "active": true,
    "spouse": null,
    "cars": [
        {"name": "Ford", "models": ["Fiesta", "Focus", "Mustang"]},
        {"name": "BMW", "models": ["320", "X3", "X5"]},
        {"name": "Fiat", "models": ["500", "Panda"]}
    ]
}"""


@pytest.fixture
def records_json() -> bytes:
    return RECORDS_JSON


@pytest.fixture
def screen_json() -> bytes:
    return SCREEN_JSON


@pytest.fixture
def basic_json() -> bytes:
    return BASIC_JSON
