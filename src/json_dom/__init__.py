"""json-dom - a navigable, mutable DOM for JSON with structural path queries."""

from __future__ import annotations

import logging

from json_dom.api import find, find_one, parse_text, parse_value
from json_dom.errors import (
    BooleanParseError,
    JsonDomError,
    JSONSyntaxError,
    OutOfRangeError,
    ShapeMismatchError,
    UnsupportedScalarTypeError,
)
from json_dom.query import CompiledPattern, QueryConfig, QueryEngine, compile_pattern
from json_dom.tree import ContentTag, Node, NodeKind, TreeBuilder

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "BooleanParseError",
    "CompiledPattern",
    "ContentTag",
    "JSONSyntaxError",
    "JsonDomError",
    "Node",
    "NodeKind",
    "OutOfRangeError",
    "QueryConfig",
    "QueryEngine",
    "ShapeMismatchError",
    "TreeBuilder",
    "UnsupportedScalarTypeError",
    "compile_pattern",
    "find",
    "find_one",
    "parse_text",
    "parse_value",
]
