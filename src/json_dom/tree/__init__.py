"""Tree subpackage: the JSON document tree and its construction and projection.

Re-exports the public API for the tree module:
- Node: a node of the document tree, with navigation, reading and mutation
- NodeKind: StrEnum of the three node kinds (DOCUMENT, ELEMENT, TEXT)
- ContentTag: StrEnum of composite kinds and exact scalar sub-types
- TreeBuilder: builds a Node tree from JSON text or a native value
"""

from json_dom.tree.builder import TreeBuilder
from json_dom.tree.kinds import ContentTag, NodeKind
from json_dom.tree.nodes import Node

__all__ = ["ContentTag", "Node", "NodeKind", "TreeBuilder"]
