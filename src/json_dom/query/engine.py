"""QueryEngine: evaluates path patterns against a Node tree.

Evaluation keeps a context list, starting with the root. Each step replaces
the context with the ELEMENTs it selects from every context node: immediate
children for a CHILD step, the whole subtree below for a DESCENDANT step.
The new context is deduplicated by node identity, keeping first-encountered
order, before the next step runs. A node reached through several sub-paths
(e.g. an ``asset_id`` under two nested ``exportOptions``) therefore appears
once, and chained descendant steps never multiply work.

Matching is transparent across composite kinds: an anonymous array slot and
a named object member expose their children to the next step the same way.

Each engine caches compiled patterns in its own ``LRUCache``; two engines
never share cache state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from cachetools import LRUCache

from json_dom.query.config import QueryConfig
from json_dom.query.pattern import Axis, CompiledPattern, Step, compile_pattern

if TYPE_CHECKING:
    from json_dom.tree.nodes import Node

__all__ = ["QueryEngine"]

logger = logging.getLogger(__name__)


class QueryEngine:
    """Compiles and evaluates path patterns.

    Example::

        from json_dom import parse_text
        from json_dom.query import QueryEngine

        doc = parse_text(b'[{"id": 1, "asset_id": 1}, {"id": 2, "asset_id": 2}]')
        engine = QueryEngine()
        [n.value() for n in engine.find(doc, "*/asset_id")]   # [1.0, 2.0]

    Args:
        config: Engine settings. Defaults to ``QueryConfig()`` when None.
    """

    def __init__(self, config: QueryConfig | None = None) -> None:
        self._config: QueryConfig = config if config is not None else QueryConfig()
        self._cache: LRUCache[str, CompiledPattern] = LRUCache(
            maxsize=self._config.cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_cache_size(self) -> int:
        """The maximum number of compiled patterns this engine can hold."""
        return int(self._cache.maxsize)

    @property
    def cache_size(self) -> int:
        """The current number of compiled patterns in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, pattern: str) -> CompiledPattern:
        """Return the compiled form of ``pattern``, compiling on a cache miss."""
        compiled = self._cache.get(pattern)
        if compiled is None:
            logger.debug("Compile cache miss for pattern %r", pattern)
            compiled = compile_pattern(pattern)
            self._cache[pattern] = compiled
        return compiled

    def find(self, root: Node, pattern: str | CompiledPattern) -> list[Node]:
        """Return every node matching ``pattern`` below ``root``.

        Args:
            root:    The node evaluation starts from, usually the DOCUMENT.
            pattern: A pattern string or an already compiled pattern.

        Returns:
            Matching nodes, duplicate-free, in first-encountered order.
            Malformed patterns yield ``[]``. Excluded nodes are matched like
            any other.
        """
        if isinstance(pattern, CompiledPattern):
            compiled = pattern
        else:
            compiled = self.compile(pattern)
        if compiled.malformed:
            return []

        context: list[Node] = [root]
        for step in compiled.steps:
            context = _unique(_select(step, context))
            if not context:
                break
        return context

    def find_one(self, root: Node, pattern: str | CompiledPattern) -> Node | None:
        """Return the first node matching ``pattern``, or None."""
        matches = self.find(root, pattern)
        return matches[0] if matches else None


def _select(step: Step, context: Iterable[Node]) -> Iterator[Node]:
    """Yield the nodes ``step`` selects from each context node, in order."""
    for node in context:
        candidates = node.children() if step.axis is Axis.CHILD else node.descendants()
        for candidate in candidates:
            if step.matches(candidate):
                yield candidate


def _unique(nodes: Iterable[Node]) -> list[Node]:
    # Nodes hash by identity, so this keeps the first occurrence of each node.
    return list(dict.fromkeys(nodes))
