"""Debug markup rendering of a Node tree.

Renders an XML-like view of the subtree for inspection: anonymous elements
become ``<element>``, named ones ``<label>``, and scalar text is written
escaped between the tags. Order follows the tree. Labels are used verbatim
as tag names, so the output is for reading, not for an XML parser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

from json_dom.tree.kinds import NodeKind

if TYPE_CHECKING:
    from json_dom.tree.nodes import Node

__all__ = ["to_xml"]

_DECLARATION = '<?xml version="1.0"?>'


def to_xml(node: Node) -> str:
    """Render the children of ``node`` after an XML declaration.

    Example::

        to_xml(parse_text('{"name": "John", "tags": ["a"]}'))
        # '<?xml version="1.0"?><name>John</name><tags><element>a</element></tags>'
    """
    parts = [_DECLARATION]
    for child in node.children():
        _write(child, parts)
    return "".join(parts)


def _write(node: Node, parts: list[str]) -> None:
    if node.kind is NodeKind.TEXT:
        parts.append(escape(node.label))
        return

    tag = node.label or "element"
    parts.append(f"<{tag}>")
    for child in node.children():
        _write(child, parts)
    parts.append(f"</{tag}>")
