"""Scalar-type tagging utilities shared by the builder, nodes and serializer.

Maps a scalar's runtime type to its ``ContentTag``, renders scalars to the
literal text stored on TEXT nodes, and coerces payloads back to the exact
native sub-type on projection.

Numbers are rendered in the shortest positional decimal form that round-trips
(``format_float``), so ``365823929453.0`` renders as ``"365823929453"`` and
``0.5`` as ``"0.5"``; exponent notation is never used.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from json_dom.errors import BooleanParseError
from json_dom.tree.kinds import ContentTag

__all__ = [
    "coerce_scalar",
    "format_float",
    "parse_bool",
    "render_scalar",
    "scalar_tag",
]

# numpy dtype name -> tag. float16, longdouble and complex types are absent on
# purpose: they have no tag and fall back to OPAQUE during construction.
_NUMPY_TAGS: dict[str, ContentTag] = {
    "bool": ContentTag.BOOL,
    "int8": ContentTag.INT8,
    "int16": ContentTag.INT16,
    "int32": ContentTag.INT32,
    "int64": ContentTag.INT64,
    "uint8": ContentTag.UINT8,
    "uint16": ContentTag.UINT16,
    "uint32": ContentTag.UINT32,
    "uint64": ContentTag.UINT64,
    "float32": ContentTag.FLOAT32,
    "float64": ContentTag.FLOAT64,
}

# tag -> native type produced on projection
_NATIVE_TYPES: dict[ContentTag, type] = {
    ContentTag.INT: int,
    ContentTag.INT8: np.int8,
    ContentTag.INT16: np.int16,
    ContentTag.INT32: np.int32,
    ContentTag.INT64: np.int64,
    ContentTag.UINT8: np.uint8,
    ContentTag.UINT16: np.uint16,
    ContentTag.UINT32: np.uint32,
    ContentTag.UINT64: np.uint64,
    ContentTag.FLOAT32: np.float32,
    ContentTag.FLOAT64: float,
}

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def scalar_tag(value: Any) -> ContentTag | None:
    """Return the ContentTag for a scalar value, or None if no tag fits.

    Dispatch order matters: bool MUST be checked before int (bool subclasses
    int), and str before numpy generics (``numpy.str_`` is both).

    Args:
        value: Any Python or numpy scalar, or None.

    Returns:
        The matching tag, ``ContentTag.NULL`` for None, or None when the type
        is not a recognised scalar (containers included).
    """
    if value is None:
        return ContentTag.NULL
    if isinstance(value, bool):
        return ContentTag.BOOL
    if isinstance(value, str):
        return ContentTag.STRING
    if isinstance(value, np.generic):
        return _NUMPY_TAGS.get(value.dtype.name)
    if isinstance(value, int):
        return ContentTag.INT
    if isinstance(value, float):
        return ContentTag.FLOAT64
    return None


def format_float(value: float | np.floating[Any]) -> str:
    """Render a float in its shortest round-trip positional form.

    Trailing zeros and a trailing decimal point are trimmed. numpy picks the
    shortest digits for the value's own precision, so ``np.float32(0.1)``
    renders as ``"0.1"``.

    Args:
        value: A Python float or numpy floating scalar.

    Returns:
        Decimal text without exponent, e.g. ``"365823929453"`` or ``"-0.25"``.
    """
    return np.format_float_positional(value, unique=True, trim="-")


def render_scalar(value: Any, tag: ContentTag) -> str:
    """Render a scalar as the literal text stored on its TEXT node.

    Args:
        value: The scalar payload.
        tag:   The payload's tag (as returned by ``scalar_tag``, or OPAQUE).

    Returns:
        ``""`` for null, ``"true"``/``"false"`` for bools, shortest decimal
        for floats, ``str()`` for everything else.
    """
    if tag is ContentTag.NULL:
        return ""
    if tag is ContentTag.BOOL:
        return "true" if value else "false"
    if tag in (ContentTag.FLOAT32, ContentTag.FLOAT64):
        return format_float(value)
    if tag.is_numeric:
        return str(int(value))
    return str(value)


def coerce_scalar(value: Any, tag: ContentTag) -> Any:
    """Return ``value`` as the exact native type for a numeric tag.

    Values that already have the right type are returned unchanged, so a
    ``numpy.float64`` payload stays a ``numpy.float64`` under FLOAT64.

    Args:
        value: The stored payload.
        tag:   A numeric ContentTag.

    Returns:
        The payload converted to the tag's native type.

    Raises:
        KeyError: If ``tag`` is not numeric.
    """
    native = _NATIVE_TYPES[tag]
    if isinstance(value, native) and not isinstance(value, bool):
        return value
    return native(value)


def parse_bool(text: str) -> bool:
    """Parse a boolean literal.

    Accepts ``1 t T TRUE true True`` and ``0 f F FALSE false False``.

    Raises:
        BooleanParseError: For any other text.
    """
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    msg = f"invalid boolean literal: {text!r}"
    raise BooleanParseError(msg)
