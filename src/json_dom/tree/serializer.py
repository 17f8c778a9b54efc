"""Projection of a Node tree back into native Python values.

``to_value`` mirrors ``Node.value()`` but makes the exclusion filter a
parameter, and restores every scalar to the exact native type its tag names:
a leaf tagged ``int8`` comes back as ``numpy.int8``, one tagged ``float64`` as
a float. Trees built from JSON text only carry ``float64`` numbers, so they
project to floats, as a JSON decoder would produce.

``to_record_array`` is the restricted projection for array-of-objects trees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_dom.errors import ShapeMismatchError
from json_dom.tree.kinds import ContentTag
from json_dom.tree.scalars import coerce_scalar, parse_bool

if TYPE_CHECKING:
    from json_dom.tree.nodes import Node

__all__ = ["to_record_array", "to_value"]


def to_value(node: Node, apply_exclusion: bool = False) -> Any:
    """Project ``node`` and its subtree to a native value.

    Args:
        node:            Any node of the tree.
        apply_exclusion: When True, excluded children are left out of arrays
                         and objects. When False, everything is emitted.

    Returns:
        A list, dict or scalar. Scalars keep their tagged sub-type; ``string``
        and ``opaque`` payloads are returned as stored; ``null`` is None.

    Raises:
        BooleanParseError: If a bool-tagged leaf's text is not a bool literal.
    """
    tag = node.content_tag

    if tag is ContentTag.ARRAY:
        return [
            to_value(child, apply_exclusion)
            for child in node.children()
            if not (apply_exclusion and child.excluded)
        ]

    if tag is ContentTag.OBJECT:
        return {
            child.label: to_value(child, apply_exclusion)
            for child in node.children()
            if not (apply_exclusion and child.excluded)
        }

    if tag is ContentTag.NULL:
        return None

    if tag is ContentTag.BOOL:
        return parse_bool(node.text())

    payload = node.value()
    if tag.is_numeric:
        return coerce_scalar(payload, tag)
    return payload


def to_record_array(
    node: Node, apply_exclusion: bool = False
) -> list[dict[str, Any]]:
    """Project an array of objects to a list of dicts, one per record.

    Args:
        node:            An ``array``-tagged node whose children are all
                         ``object``-tagged.
        apply_exclusion: When True, excluded records and excluded fields are
                         left out.

    Returns:
        The records in array order. An empty array yields ``[]``.

    Raises:
        ShapeMismatchError: If ``node`` is not an array, or a retained child
            is not an object.
    """
    if node.content_tag is not ContentTag.ARRAY:
        msg = f"cannot project a {node.content_tag} node to records, need array"
        raise ShapeMismatchError(msg)

    records: list[dict[str, Any]] = []
    for index, child in enumerate(node.children()):
        if apply_exclusion and child.excluded:
            continue
        if child.content_tag is not ContentTag.OBJECT:
            msg = f"record {index} is {child.content_tag}, need object"
            raise ShapeMismatchError(msg)
        records.append(to_value(child, apply_exclusion))
    return records
