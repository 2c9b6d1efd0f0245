"""
A bounded key/value cache with least-recently-used eviction. `boundedlru` is
distributed as a library on PyPI.

### Quickstart

Install the library with pip.

```bash
pip install boundedlru
```

Then create a cache and use it:

```python
from boundedlru import MISS, LRUCache

cache = LRUCache[str, int](capacity=2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")  # 1, and "a" is now the most recently used key
cache.put("c", 3)  # evicts "b"
cache.get("b") is MISS  # True
```

Use `SynchronizedLRUCache` when several threads share a cache. Caches constructed
without a capacity use `BOUNDEDLRU_DEFAULT_CAPACITY` (default 128).
"""

from .errors import InvalidCapacityError
from .lru_cache import MISS, CacheEntry, CacheInfo, LRUCache
from .synchronized import SynchronizedLRUCache
from .version import VERSION

__all__ = [
    "MISS",
    "VERSION",
    "CacheEntry",
    "CacheInfo",
    "InvalidCapacityError",
    "LRUCache",
    "SynchronizedLRUCache",
]
