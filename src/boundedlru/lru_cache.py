"""
A module providing a bounded LRU (Least Recently Used) cache implementation.

The cache stores up to `capacity` key-value pairs of any type. Every read hit and
every write marks the key as most recently used, and inserting a new key into a full
cache evicts exactly one entry: the least recently used one.

Two structures back the cache: a dict index mapping each key to its node, and a
circular doubly linked list of those nodes ordered from least to most recently used.
Lookups, updates, moves and evictions are all O(1).

The cache is not thread-safe. See `boundedlru.synchronized` for a locked wrapper.
"""

import logging
from typing import Any, Dict, Generic, Hashable, Iterator, NamedTuple, Optional, Tuple, TypeVar, Union

from typing_extensions import TypedDict

from . import config
from .errors import InvalidCapacityError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


log = logging.getLogger(__name__)


class _Miss:
    """Type of the `MISS` sentinel. There is only ever one instance."""

    _instance: Optional["_Miss"] = None

    def __new__(cls) -> "_Miss":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"

    def __reduce__(self) -> str:
        return "MISS"


MISS = _Miss()
"""Returned by `LRUCache.get` when the key is not cached. Compare with `is`."""


class CacheEntry(NamedTuple):
    """A point-in-time (key, value) pair, as returned by `LRUCache.snapshot`."""

    key: Any
    value: Any


class CacheInfo(TypedDict):
    capacity: int
    size: int
    hits: int
    misses: int
    evictions: int


class _Node:
    __slots__ = ("prev", "next", "key", "value")

    def __init__(self, key: Any = None, value: Any = None):
        # A fresh node links to itself, which is exactly what the list root needs.
        self.prev: "_Node" = self
        self.next: "_Node" = self
        self.key = key
        self.value = value


class LRUCache(Generic[K, V]):
    """
    A bounded Least Recently Used (LRU) cache.

    Items are considered "used" when they are added, updated or retrieved with `get`.
    When the cache holds `capacity` items, adding a new key first evicts the least
    recently used item. Updating an existing key never evicts anything.

    Args:
        capacity: Maximum number of items to store. Must be a positive integer. If not
            specified, the value of `BOUNDEDLRU_DEFAULT_CAPACITY` is used (see
            `boundedlru.config`).

    Raises:
        InvalidCapacityError: If `capacity` is not a positive integer.
    """

    def __init__(self, capacity: Optional[int] = None):
        if capacity is None:
            capacity = config.default_capacity()
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacityError(capacity)

        self._capacity = capacity
        self._index: Dict[K, _Node] = {}
        # root.next is the least recently used node, root.prev the most recently used.
        self._root = _Node()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K, default: Any = MISS) -> Union[V, Any]:
        """
        Retrieves a value from the cache.
        If the key exists, the item is marked as most recently used.

        Args:
            key: The key to look up.
            default: Returned when the key is not cached. Defaults to `MISS`.

        Returns:
            The cached value, or `default` on a miss. A miss leaves the cache untouched.
        """
        node = self._index.get(key)
        if node is None:
            self._misses += 1
            return default

        self._hits += 1
        self._move_to_end(node)
        return node.value

    def put(self, key: K, value: V) -> None:
        """
        Stores a value in the cache.
        If the key already exists, the value is replaced and marked as most recently used.
        Otherwise, if the cache is full, the least recently used item is evicted first.

        Args:
            key: The key to store.
            value: The value to store.
        """
        node = self._index.get(key)
        if node is not None:
            node.value = value
            self._move_to_end(node)
            return

        if len(self._index) >= self._capacity:
            self._evict()

        node = _Node(key, value)
        self._index[key] = node
        self._append(node)

    def peek(self, key: K, default: Any = MISS) -> Union[V, Any]:
        """Returns the value for `key` without marking it as used, or `default`."""
        node = self._index.get(key)
        if node is None:
            return default
        return node.value

    def remove(self, key: K, default: Any = MISS) -> Union[V, Any]:
        """
        Removes `key` from the cache. Explicit removals are not counted as evictions.

        Returns:
            The removed value, or `default` if the key was not cached.
        """
        node = self._index.pop(key, None)
        if node is None:
            return default
        self._unlink(node)
        return node.value

    def contains_key(self, key: K) -> bool:
        """Checks whether `key` is cached. Does not mark it as used."""
        return key in self._index

    def size(self) -> int:
        """Returns the number of items in the cache."""
        return len(self._index)

    def clear(self) -> None:
        """Removes all items from the cache. Hit, miss and eviction counts are kept."""
        self._index.clear()
        self._root.prev = self._root.next = self._root

    def snapshot(self) -> Tuple[CacheEntry, ...]:
        """
        Returns the cache contents ordered from least to most recently used.
        Taking a snapshot does not change the order.
        """
        return tuple(CacheEntry(node.key, node.value) for node in self._nodes())

    def items(self) -> Dict[K, V]:
        """Returns a copy of the cache contents as a dict, in least to most recently used order."""
        return {node.key: node.value for node in self._nodes()}

    def info(self) -> CacheInfo:
        return CacheInfo(
            capacity=self._capacity,
            size=len(self._index),
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
        )

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        # Iterate over a copy so callers may modify the cache while iterating.
        return iter([node.key for node in self._nodes()])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, {self.items()!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._root.next
        while node is not self._root:
            yield node
            node = node.next

    def _evict(self) -> None:
        node = self._root.next
        self._unlink(node)
        del self._index[node.key]
        self._evictions += 1
        log.debug("Evicted %r from LRU cache (capacity %d)", node.key, self._capacity)

    def _append(self, node: _Node) -> None:
        last = self._root.prev
        last.next = node
        node.prev = last
        node.next = self._root
        self._root.prev = node

    def _move_to_end(self, node: _Node) -> None:
        if node is self._root.prev:
            return
        self._unlink(node)
        self._append(node)

    @staticmethod
    def _unlink(node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
