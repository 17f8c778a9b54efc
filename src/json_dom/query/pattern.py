"""Pattern compiler for the structural path language.

Grammar: the pattern is split on ``/``. An empty token (produced by ``//``,
or by a leading ``/``) switches the axis of the next real token to
DESCENDANT; otherwise the axis is CHILD. A real token is either a literal
label, matched exactly, or the wildcard ``*``, matching any label.

    "*/asset_id"                        child *, child asset_id
    "//layers//exportOptions//asset_id" descendant layers, descendant
                                        exportOptions, descendant asset_id
    "*/layers//exportOptions"           child *, child layers, descendant
                                        exportOptions

A pattern whose last token is empty (``"a//"``, ``"a/"``, ``""``) leaves a
descendant axis with nothing to apply to. It compiles to a pattern flagged
``malformed``, which evaluates to no matches instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

from json_dom.tree.kinds import NodeKind

if TYPE_CHECKING:
    from json_dom.tree.nodes import Node

__all__ = ["WILDCARD", "Axis", "CompiledPattern", "Step", "compile_pattern"]

logger = logging.getLogger(__name__)

SEPARATOR = "/"
WILDCARD = "*"


class Axis(StrEnum):
    """How a step moves from a context node to its candidates.

    - CHILD      -> "child"      : immediate children only
    - DESCENDANT -> "descendant" : any depth below, the context node excluded
    """

    CHILD = auto()
    DESCENDANT = auto()


@dataclass(frozen=True, slots=True)
class Step:
    """One token of a compiled pattern together with its axis."""

    axis: Axis
    label: str

    @property
    def is_wildcard(self) -> bool:
        return self.label == WILDCARD

    def matches(self, node: Node) -> bool:
        """True if ``node`` is an ELEMENT this step selects.

        TEXT leaves are never selected; they carry payloads, not keys.
        """
        if node.kind is not NodeKind.ELEMENT:
            return False
        return self.is_wildcard or node.label == self.label


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A pattern string compiled into its ordered steps.

    Attributes:
        pattern:   The source pattern.
        steps:     Steps in application order.
        malformed: True when the pattern ends in an empty token; such a
                   pattern matches nothing.
    """

    pattern: str
    steps: tuple[Step, ...]
    malformed: bool = False


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a path pattern into steps.

    Args:
        pattern: e.g. ``"*/layers//exportOptions//asset_id"``.

    Returns:
        The compiled pattern. Never raises for malformed slash sequences;
        see ``CompiledPattern.malformed``.
    """
    steps: list[Step] = []
    axis = Axis.CHILD
    for token in pattern.split(SEPARATOR):
        if not token:
            axis = Axis.DESCENDANT
            continue
        steps.append(Step(axis=axis, label=token))
        axis = Axis.CHILD

    # A descendant axis still pending here was never followed by a token.
    malformed = axis is Axis.DESCENDANT
    if malformed:
        logger.debug("Pattern %r ends without a token and matches nothing", pattern)
    return CompiledPattern(pattern=pattern, steps=tuple(steps), malformed=malformed)
