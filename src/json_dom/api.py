"""Public API functions for json-dom.

This module provides the user-facing functions: parse_text, parse_value,
find and find_one. Each find call creates a fresh QueryEngine to guarantee
zero global state between calls; hold a ``QueryEngine`` yourself to reuse
its compiled-pattern cache.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_dom.query.config import QueryConfig
from json_dom.query.engine import QueryEngine
from json_dom.tree.builder import JsonSource, TreeBuilder

if TYPE_CHECKING:
    from json_dom.tree.nodes import Node

__all__ = ["find", "find_one", "parse_text", "parse_value"]


def parse_text(source: JsonSource) -> Node:
    """Parse JSON text into a document tree.

    Numbers follow JSON semantics and are stored as 64-bit floats; object
    members keep their source order.

    Args:
        source: JSON text as bytes, bytearray or str, or a readable file-like
                object.

    Returns:
        The DOCUMENT node of the tree.

    Raises:
        JSONSyntaxError: If the text is not valid JSON.
    """
    return TreeBuilder().parse_text(source)


def parse_value(value: Any) -> Node:
    """Build a document tree from an already-typed native value.

    Scalar sub-types (e.g. ``numpy.int8``, ``numpy.float32``) are recorded so
    that ``to_value`` / ``to_record_array`` restore them exactly. Object
    members are ordered by key.

    Args:
        value: Any native value, typically a list of record dicts.

    Returns:
        The DOCUMENT node of the tree.
    """
    return TreeBuilder().parse_value(value)


def find(root: Node, pattern: str, config: QueryConfig | None = None) -> list[Node]:
    """Return every node under ``root`` matching ``pattern``.

    Args:
        root:    The node to search from, usually a DOCUMENT.
        pattern: Path pattern, e.g. ``"*/layers//exportOptions//asset_id"``.
        config:  Engine settings. Defaults to ``QueryConfig()`` when None.

    Returns:
        Matching nodes, duplicate-free, in first-encountered order. A
        malformed pattern yields ``[]``.
    """
    return QueryEngine(config=config).find(root, pattern)


def find_one(
    root: Node, pattern: str, config: QueryConfig | None = None
) -> Node | None:
    """Return the first node under ``root`` matching ``pattern``, or None."""
    return QueryEngine(config=config).find_one(root, pattern)
