"""Node: the single entity of the JSON document tree.

A tree is made of one DOCUMENT root, ELEMENT containers and TEXT leaves
(see ``NodeKind``). Children form an ordered, doubly linked sibling list per
parent; that order is array index order or object member order as fixed by
the builder.

Ownership only flows downward: a parent holds its first child strongly and
each child holds its next sibling strongly. The parent, previous-sibling and
last-child links are weak references used purely for navigation, so the tree
has no reference cycles and is released with its root.

After construction the tree is only mutated through ``set_value`` and
``set_excluded``; nodes are never inserted, removed or re-parented.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from json_dom.errors import (
    OutOfRangeError,
    ShapeMismatchError,
    UnsupportedScalarTypeError,
)
from json_dom.tree import formatter, serializer
from json_dom.tree.kinds import ContentTag, NodeKind
from json_dom.tree.scalars import render_scalar, scalar_tag

__all__ = ["Node"]


@dataclass(slots=True, weakref_slot=True, eq=False)
class Node:
    """A node in the JSON document tree.

    Nodes compare and hash by identity, so they can be collected in sets and
    used as dict keys.

    Attributes:
        kind:        DOCUMENT, ELEMENT or TEXT.
        label:       Object key for named ELEMENTs; "" for anonymous ELEMENTs
                     (array slots) and the DOCUMENT; the literal scalar text
                     for TEXT nodes.
        content_tag: Composite kind or exact scalar sub-type of the content.
                     TEXT leaves carry the same tag as their container.
        payload:     Original scalar value; only meaningful on TEXT nodes.
        excluded:    Soft-deletion flag consulted by projections only.
        depth:       0 for the root, parent depth + 1 otherwise.
    """

    kind: NodeKind
    label: str = ""
    content_tag: ContentTag = ContentTag.NULL
    payload: Any = None
    excluded: bool = False
    depth: int = 0

    _parent: weakref.ReferenceType[Node] | None = field(
        default=None, init=False, repr=False
    )
    _prev_sibling: weakref.ReferenceType[Node] | None = field(
        default=None, init=False, repr=False
    )
    _next_sibling: Node | None = field(default=None, init=False, repr=False)
    _first_child: Node | None = field(default=None, init=False, repr=False)
    _last_child: weakref.ReferenceType[Node] | None = field(
        default=None, init=False, repr=False
    )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Node | None:
        """The parent node, or None for the root (or a detached subtree)."""
        return self._parent() if self._parent is not None else None

    @property
    def prev_sibling(self) -> Node | None:
        return self._prev_sibling() if self._prev_sibling is not None else None

    @property
    def next_sibling(self) -> Node | None:
        return self._next_sibling

    @property
    def first_child(self) -> Node | None:
        return self._first_child

    @property
    def last_child(self) -> Node | None:
        return self._last_child() if self._last_child is not None else None

    def children(self) -> list[Node]:
        """Return the immediate children, first to last. Empty for leaves."""
        result: list[Node] = []
        child = self._first_child
        while child is not None:
            result.append(child)
            child = child._next_sibling
        return result

    def descendants(self) -> Iterator[Node]:
        """Yield every node below this one in pre-order (self excluded)."""
        child = self._first_child
        while child is not None:
            yield child
            yield from child.descendants()
            child = child._next_sibling

    def first_child_named(self, label: str) -> Node | None:
        """Return the first immediate child whose label equals ``label``.

        Only direct children are scanned, in document order.
        """
        child = self._first_child
        while child is not None:
            if child.label == label:
                return child
            child = child._next_sibling
        return None

    def ancestor_at(self, level: int) -> Node:
        """Return the ancestor at depth ``level``.

        Args:
            level: Target depth; must satisfy ``0 <= level < self.depth``.

        Returns:
            The ancestor node at that depth (``0`` is the document root).

        Raises:
            OutOfRangeError: If no ancestor exists at ``level``, including the
                case where a parent link has been released because the caller
                no longer holds the root.
        """
        if not 0 <= level < self.depth:
            msg = f"no ancestor at depth {level} for a node at depth {self.depth}"
            raise OutOfRangeError(msg)

        node = self
        while node.depth > level:
            parent = node.parent
            if parent is None:
                msg = f"ancestor chain ends at depth {node.depth} before {level}"
                raise OutOfRangeError(msg)
            node = parent
        return node

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def text(self) -> str:
        """Concatenate the labels of all TEXT descendants, depth first.

        A TEXT node returns its own label; a node with no TEXT below it
        returns "".
        """
        if self.kind is NodeKind.TEXT:
            return self.label
        return "".join(
            node.label for node in self.descendants() if node.kind is NodeKind.TEXT
        )

    def value(self) -> Any:
        """Return the node's content as a native value.

        Composites are rebuilt as lists/dicts from their children, always
        skipping excluded children. A scalar container returns its TEXT
        child's payload, and a TEXT node its own payload.
        """
        if self.content_tag is ContentTag.ARRAY:
            return [child.value() for child in self.children() if not child.excluded]
        if self.content_tag is ContentTag.OBJECT:
            return {
                child.label: child.value()
                for child in self.children()
                if not child.excluded
            }
        if self._first_child is not None:
            return self._first_child.payload
        return self.payload

    def is_excluded(self) -> bool:
        return self.excluded

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_value(self, value: Any) -> None:
        """Replace the scalar payload of this leaf (or of its sole TEXT child).

        The tag is re-derived from ``value``'s runtime type (NULL for None),
        the label is re-rendered, and the container's tag is updated to match.

        Raises:
            ShapeMismatchError: If this node neither is a TEXT node nor has
                exactly one child that is a TEXT node.
            UnsupportedScalarTypeError: If ``value``'s type has no scalar tag.
                The node is left unchanged.
        """
        if self.kind is not NodeKind.TEXT:
            child = self._first_child
            if (
                child is None
                or child._next_sibling is not None
                or child.kind is not NodeKind.TEXT
            ):
                msg = f"set_value needs a scalar node, got a {self.content_tag} node"
                raise ShapeMismatchError(msg)
            child.set_value(value)
            return

        tag = scalar_tag(value)
        if tag is None:
            msg = f"set_value does not support {type(value).__name__} values"
            raise UnsupportedScalarTypeError(msg)

        self.payload = value
        self.content_tag = tag
        self.label = render_scalar(value, tag)
        parent = self.parent
        if parent is not None:
            parent.content_tag = tag

    def set_excluded(self, excluded: bool) -> None:
        """Mark or unmark the node as excluded from projections."""
        self.excluded = excluded

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------

    def to_value(self, apply_exclusion: bool = False) -> Any:
        """Project this subtree to a native value. See ``serializer.to_value``."""
        return serializer.to_value(self, apply_exclusion)

    def to_record_array(self, apply_exclusion: bool = False) -> list[dict[str, Any]]:
        """Project an array of objects to a list of dicts.

        See ``serializer.to_record_array``.
        """
        return serializer.to_record_array(self, apply_exclusion)

    def to_xml(self) -> str:
        """Render the subtree as debug markup. See ``formatter.to_xml``."""
        return formatter.to_xml(self)

    # ------------------------------------------------------------------
    # Construction (TreeBuilder only)
    # ------------------------------------------------------------------

    def _append_child(self, child: Node) -> Node:
        """Link ``child`` as the new last child and return it."""
        child._parent = weakref.ref(self)
        child.depth = self.depth + 1
        last = self.last_child
        if last is None:
            self._first_child = child
        else:
            last._next_sibling = child
            child._prev_sibling = weakref.ref(last)
        self._last_child = weakref.ref(child)
        return child
