"""QueryConfig: immutable settings for a QueryEngine.

Kept separate from the pattern grammar, which is fixed; the config only
governs infrastructure such as the compiled-pattern cache.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Immutable configuration for ``QueryEngine``.

    Attributes:
        cache_size: Maximum number of compiled patterns each engine keeps in
            its LRU cache (>= 1). The least recently used pattern is evicted
            silently when the cache is full. Default 128.
    """

    cache_size: int = 128

    def __post_init__(self) -> None:
        if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int):
            msg = f"cache_size must be an int, got {type(self.cache_size).__name__}"
            raise TypeError(msg)
        if self.cache_size < 1:
            msg = f"cache_size must be >= 1, got {self.cache_size}"
            raise ValueError(msg)
