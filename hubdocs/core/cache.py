"""Thread-safe compute-if-absent cache.

Concurrent first-time lookups for the same key may each run the factory, but
only the first stored value is kept and every caller receives that value.
"""

import logging
import threading
from typing import Awaitable, Callable, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_logger = logging.getLogger(__name__)


class DescriptorCache(Generic[K, V]):
    """Process-lifetime cache with get-or-add semantics."""

    def __init__(self, name: str = "descriptors"):
        self.name = name
        self._values: Dict[K, V] = {}
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        return self._values.get(key)

    def get_or_add(self, key: K, factory: Callable[[K], V]) -> V:
        """Return the cached value for ``key``, computing it when absent.

        Args:
            key: Cache key
            factory: Pure function producing the value for ``key``

        Returns:
            The value stored in the cache
        """
        try:
            return self._values[key]
        except KeyError:
            pass

        value = factory(key)
        return self._store(key, value)

    async def get_or_add_async(self, key: K, factory: Callable[[K], Awaitable[V]]) -> V:
        """Async variant of :meth:`get_or_add` for awaitable factories."""
        try:
            return self._values[key]
        except KeyError:
            pass

        value = await factory(key)
        return self._store(key, value)

    def _store(self, key: K, value: V) -> V:
        with self._lock:
            stored = self._values.setdefault(key, value)
        if stored is not value:
            _logger.debug(f"Discarded duplicate {self.name} build for {key!r}")
        return stored

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)


__all__ = ["DescriptorCache"]
