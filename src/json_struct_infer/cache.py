"""TransliterationCache: LRU-backed caching proxy for any TransliterationBackend.

Wraps any TransliterationBackend-conformant object and transparently caches
per-character results in memory. Cached characters bypass the backend on
subsequent ``transliterate()`` calls. LRU eviction occurs silently when
``max_size`` is exceeded; no error is raised.

Each ``TransliterationCache`` instance maintains its own ``LRUCache``; there
is no class-level shared state, so two generation runs never interfere with
each other.

Example::

    from json_struct_infer.backends import UnidecodeBackend
    from json_struct_infer.cache import TransliterationCache

    cache = TransliterationCache(UnidecodeBackend(), max_size=1024)
    cache.transliterate("中")   # hits the backend
    cache.transliterate("中")   # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_struct_infer.protocols import TransliterationBackend


class TransliterationCache:
    """LRU-backed caching proxy around any TransliterationBackend.

    Satisfies the ``TransliterationBackend`` Protocol structurally.

    Args:
        backend: Any object with a ``transliterate(char: str) -> str`` method.
        max_size: Maximum number of characters to hold in memory. Defaults
            to 1024.
    """

    def __init__(self, backend: TransliterationBackend, max_size: int = 1024) -> None:
        # Store as Any at runtime: structural duck-typing, no Protocol coupling.
        self._backend: Any = backend
        self._cache: LRUCache[str, str] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def transliterate(self, char: str) -> str:
        """Return the backend's rendering of ``char``, computing it at most once."""
        try:
            return self._cache[char]
        except KeyError:
            pass
        result = str(self._backend.transliterate(char))
        self._cache[char] = result
        return result
