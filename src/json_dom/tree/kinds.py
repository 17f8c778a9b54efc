"""NodeKind and ContentTag StrEnums for the JSON document tree.

``NodeKind`` says what role a node plays in the tree; ``ContentTag`` records
what kind of value a node holds, down to the exact scalar sub-type, so that
projections can restore it.
"""

from __future__ import annotations

from enum import StrEnum, auto


class NodeKind(StrEnum):
    """Enumeration of the three structural node kinds.

    - DOCUMENT -> "document" : the tree root, depth 0, exactly one per tree
    - ELEMENT  -> "element"  : a named (object member) or anonymous (array
      slot) container holding one child value
    - TEXT     -> "text"     : a leaf holding a scalar payload
    """

    DOCUMENT = auto()
    ELEMENT = auto()
    TEXT = auto()


class ContentTag(StrEnum):
    """The composite kind or exact scalar sub-type of a node's content.

    ``INT`` is a Python built-in ``int``; the sized integer and float members
    name the numpy scalar type of the same name. ``FLOAT64`` also covers the
    built-in ``float``. ``OPAQUE`` is the construction-time fallback for any
    other scalar.
    """

    ARRAY = auto()
    OBJECT = auto()

    STRING = auto()
    BOOL = auto()
    NULL = auto()

    INT = auto()
    INT8 = auto()
    INT16 = auto()
    INT32 = auto()
    INT64 = auto()

    UINT8 = auto()
    UINT16 = auto()
    UINT32 = auto()
    UINT64 = auto()

    FLOAT32 = auto()
    FLOAT64 = auto()

    OPAQUE = auto()

    @property
    def is_container(self) -> bool:
        """True for ARRAY and OBJECT."""
        return self in _CONTAINER_TAGS

    @property
    def is_numeric(self) -> bool:
        """True for every integer and floating-point tag."""
        return self in NUMERIC_TAGS


_CONTAINER_TAGS = frozenset({ContentTag.ARRAY, ContentTag.OBJECT})

NUMERIC_TAGS = frozenset(
    {
        ContentTag.INT,
        ContentTag.INT8,
        ContentTag.INT16,
        ContentTag.INT32,
        ContentTag.INT64,
        ContentTag.UINT8,
        ContentTag.UINT16,
        ContentTag.UINT32,
        ContentTag.UINT64,
        ContentTag.FLOAT32,
        ContentTag.FLOAT64,
    }
)
