"""query subpackage: public API for the structural path language.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_dom import parse_text
    from json_dom.query import QueryConfig, QueryEngine

    engine = QueryEngine(config=QueryConfig(cache_size=32))
    doc = parse_text(b'{"layers": [{"exportOptions": {"asset_id": 7}}]}')
    engine.find(doc, "//exportOptions//asset_id")[0].text()   # "7"
"""

from __future__ import annotations

from json_dom.query.config import QueryConfig
from json_dom.query.engine import QueryEngine
from json_dom.query.pattern import Axis, CompiledPattern, Step, compile_pattern

__all__ = [
    "Axis",
    "CompiledPattern",
    "QueryConfig",
    "QueryEngine",
    "Step",
    "compile_pattern",
]
