"""TreeBuilder: converts JSON text or a native value into a Node tree.

Two entry points share one recursive build core:

- ``parse_text`` decodes raw JSON with standard JSON numeric semantics (every
  number becomes a 64-bit float) and keeps object members in source order.
- ``parse_value`` takes an already-typed value, e.g. records whose fields are
  numpy fixed-width scalars, tags each leaf with its exact sub-type, and
  orders object members by key for determinism.

Build rule:
- Arrays tag their container ``array`` and add one anonymous ELEMENT per item.
- Objects tag their container ``object`` and add one named ELEMENT per member.
- Scalars tag their container with the scalar's tag and add a single TEXT
  leaf holding the payload and its rendered text. ``null`` renders as "".
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO, Any

import numpy as np

from json_dom.errors import JSONSyntaxError
from json_dom.tree.kinds import ContentTag, NodeKind
from json_dom.tree.nodes import Node
from json_dom.tree.scalars import render_scalar, scalar_tag

__all__ = ["JsonSource", "TreeBuilder"]

logger = logging.getLogger(__name__)

# Anything parse_text can read JSON text from
JsonSource = bytes | bytearray | str | IO[bytes] | IO[str]


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not a valid JSON value"
    raise ValueError(msg)


def _finite_number(text: str) -> float:
    number = float(text)
    if math.isinf(number):
        msg = f"number {text!r} is out of range for a 64-bit float"
        raise ValueError(msg)
    return number


@dataclass
class TreeBuilder:
    """Builds Node trees from JSON text or native values.

    The builder is stateless; one instance can build any number of trees.

    Example::

        builder = TreeBuilder()
        doc = builder.parse_text(b'{"name": "John", "age": 31}')
        doc.first_child_named("age").text()   # "31"
        doc.first_child_named("age").value()  # 31.0
    """

    def parse_text(self, source: JsonSource) -> Node:
        """Parse JSON text into a tree.

        Args:
            source: JSON text as bytes, bytearray or str, or a readable
                    file-like object producing either.

        Returns:
            The DOCUMENT node of the new tree.

        Raises:
            JSONSyntaxError: If the text is not valid JSON. ``NaN`` and
                ``Infinity`` literals, and numbers too large for a 64-bit
                float, are rejected.
        """
        raw = source.read() if hasattr(source, "read") else source
        try:
            value = json.loads(
                raw,
                parse_float=_finite_number,
                parse_int=_finite_number,
                parse_constant=_reject_constant,
            )
        except ValueError as exc:
            msg = f"malformed JSON text: {exc}"
            raise JSONSyntaxError(msg) from exc

        document = Node(kind=NodeKind.DOCUMENT)
        self._populate(document, value, sort_keys=False)
        logger.debug("Parsed JSON text into a %s document", document.content_tag)
        return document

    def parse_value(self, value: Any) -> Node:
        """Build a tree from an already-typed native value.

        Mappings become objects, lists, tuples and numpy arrays become arrays.
        Scalars without a tag (e.g. ``Decimal``, ``datetime``) are kept as
        ``opaque`` leaves rendered with ``str()``; this never fails.

        Args:
            value: Any native value, typically a list of record dicts.

        Returns:
            The DOCUMENT node of the new tree.
        """
        document = Node(kind=NodeKind.DOCUMENT)
        self._populate(document, value, sort_keys=True)
        logger.debug("Built a %s document from a native value", document.content_tag)
        return document

    def _populate(self, container: Node, value: Any, *, sort_keys: bool) -> None:
        """Attach ``value`` beneath ``container`` and tag the container.

        Args:
            container: The DOCUMENT or ELEMENT receiving the value.
            value:     The value to attach.
            sort_keys: Order object members by key instead of by iteration.
        """
        if isinstance(value, Mapping):
            container.content_tag = ContentTag.OBJECT
            # Keys that stringify alike collapse to one member; the last wins.
            members = {str(key): item for key, item in value.items()}
            if len(members) < len(value):
                merged = len(value) - len(members)
                logger.debug("Merged %d colliding object keys", merged)
            items: Any = sorted(members.items()) if sort_keys else members.items()
            for label, item in items:
                element = Node(kind=NodeKind.ELEMENT, label=label)
                container._append_child(element)  # noqa: SLF001
                self._populate(element, item, sort_keys=sort_keys)
            return

        if isinstance(value, (list, tuple)) or (
            isinstance(value, np.ndarray) and value.ndim > 0
        ):
            container.content_tag = ContentTag.ARRAY
            for item in value:
                element = Node(kind=NodeKind.ELEMENT)
                container._append_child(element)  # noqa: SLF001
                self._populate(element, item, sort_keys=sort_keys)
            return

        if isinstance(value, np.ndarray):
            # 0-d array: unwrap the numpy scalar it holds
            value = value[()]

        tag = scalar_tag(value)
        if tag is None:
            logger.debug("No scalar tag for %s, storing opaque", type(value).__name__)
            tag = ContentTag.OPAQUE

        container.content_tag = tag
        leaf = Node(
            kind=NodeKind.TEXT,
            label=render_scalar(value, tag),
            content_tag=tag,
            payload=value,
        )
        container._append_child(leaf)  # noqa: SLF001
