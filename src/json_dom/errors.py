"""Exception hierarchy for json-dom.

Every error raised by the package derives from ``JsonDomError`` and also from
the closest built-in exception, so callers can catch either:

- ``JSONSyntaxError``            (``ValueError``): malformed JSON text.
- ``UnsupportedScalarTypeError`` (``TypeError``):  ``set_value`` with a value
  that has no scalar tag.
- ``ShapeMismatchError``         (``ValueError``): a projection or mutation
  called on a node of the wrong shape.
- ``OutOfRangeError``            (``IndexError``): ``ancestor_at`` with no
  ancestor at the requested depth.
- ``BooleanParseError``          (``ValueError``): a bool leaf whose text is
  not a boolean literal.
"""

from __future__ import annotations

__all__ = [
    "BooleanParseError",
    "JSONSyntaxError",
    "JsonDomError",
    "OutOfRangeError",
    "ShapeMismatchError",
    "UnsupportedScalarTypeError",
]


class JsonDomError(Exception):
    """Base class for all json-dom errors."""


class JSONSyntaxError(JsonDomError, ValueError):
    """Raised by ``parse_text`` when the input is not valid JSON."""


class UnsupportedScalarTypeError(JsonDomError, TypeError):
    """Raised by ``set_value`` when the value's type maps to no scalar tag."""


class ShapeMismatchError(JsonDomError, ValueError):
    """Raised when a node does not have the shape an operation requires."""


class OutOfRangeError(JsonDomError, IndexError):
    """Raised by ``ancestor_at`` when no ancestor exists at the given depth."""


class BooleanParseError(JsonDomError, ValueError):
    """Raised when a bool-tagged leaf's text is not a boolean literal."""
