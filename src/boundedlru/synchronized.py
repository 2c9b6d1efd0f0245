import threading
from typing import Any, Dict, Generic, Iterator, Optional, Tuple, Union

from .lru_cache import MISS, CacheEntry, CacheInfo, K, LRUCache, V


class SynchronizedLRUCache(Generic[K, V]):
    """
    A thread-safe wrapper around `LRUCache`.

    Every operation runs under a single re-entrant lock, since reads reorder the cache
    just like writes do. Hold `lock` to make several operations atomic:

        with cache.lock:
            if not cache.contains_key(key):
                cache.put(key, compute(key))

    Args:
        capacity: Capacity of the cache to create. Ignored when `cache` is given.
        cache: An existing cache to wrap. The caller must not use it directly afterwards.
    """

    def __init__(self, capacity: Optional[int] = None, cache: Optional[LRUCache[K, V]] = None):
        self._cache: LRUCache[K, V] = cache if cache is not None else LRUCache(capacity)
        self._mutex = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._mutex

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    def get(self, key: K, default: Any = MISS) -> Union[V, Any]:
        with self._mutex:
            return self._cache.get(key, default)

    def put(self, key: K, value: V) -> None:
        with self._mutex:
            self._cache.put(key, value)

    def peek(self, key: K, default: Any = MISS) -> Union[V, Any]:
        with self._mutex:
            return self._cache.peek(key, default)

    def remove(self, key: K, default: Any = MISS) -> Union[V, Any]:
        with self._mutex:
            return self._cache.remove(key, default)

    def contains_key(self, key: K) -> bool:
        with self._mutex:
            return self._cache.contains_key(key)

    def size(self) -> int:
        with self._mutex:
            return self._cache.size()

    def clear(self) -> None:
        with self._mutex:
            self._cache.clear()

    def snapshot(self) -> Tuple[CacheEntry, ...]:
        with self._mutex:
            return self._cache.snapshot()

    def items(self) -> Dict[K, V]:
        with self._mutex:
            return self._cache.items()

    def info(self) -> CacheInfo:
        with self._mutex:
            return self._cache.info()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._mutex:
            return key in self._cache

    def __iter__(self) -> Iterator[K]:
        with self._mutex:
            return iter(self._cache)

    def __repr__(self) -> str:
        with self._mutex:
            return f"{type(self).__name__}(capacity={self._cache.capacity}, {self._cache.items()!r})"
