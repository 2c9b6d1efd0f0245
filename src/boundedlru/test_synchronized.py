import threading

import pytest
from boundedlru.errors import InvalidCapacityError
from boundedlru.lru_cache import MISS, LRUCache
from boundedlru.synchronized import SynchronizedLRUCache


def test_synchronized_basic_operations():
    """Test the wrapper exposes the same behavior as the plain cache"""
    cache = SynchronizedLRUCache[str, int](capacity=3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert cache.get("a") == 1
    cache.put("d", 4)

    assert cache.snapshot() == (("c", 3), ("a", 1), ("d", 4))
    assert not cache.contains_key("b")
    assert "d" in cache
    assert len(cache) == cache.size() == 3
    assert cache.capacity == 3
    assert cache.peek("c") == 3
    assert cache.remove("c") == 3
    assert cache.get("c") is MISS
    assert list(cache) == ["a", "d"]
    assert cache.items() == {"a": 1, "d": 4}
    assert cache.info()["evictions"] == 1
    assert repr(cache) == "SynchronizedLRUCache(capacity=3, {'a': 1, 'd': 4})"

    cache.clear()
    assert cache.size() == 0


def test_synchronized_wraps_existing_cache():
    inner = LRUCache[str, int](capacity=2)
    inner.put("a", 1)
    cache = SynchronizedLRUCache(cache=inner)
    assert cache.capacity == 2
    assert cache.get("a") == 1


def test_synchronized_rejects_invalid_capacity():
    with pytest.raises(InvalidCapacityError):
        SynchronizedLRUCache(0)


def test_synchronized_concurrent_writers():
    """Test the capacity invariant holds with many threads writing at once"""
    cache = SynchronizedLRUCache[int, int](capacity=50)
    num_threads = 8
    per_thread = 500
    start = threading.Barrier(num_threads)
    sizes = []

    def writer(offset):
        start.wait()
        for i in range(per_thread):
            key = offset * per_thread + i
            cache.put(key, key)
            cache.get(key - 1)
            sizes.append(cache.size())

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(num_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert max(sizes) <= 50
    assert cache.size() == 50
    snapshot = cache.snapshot()
    assert len({entry.key for entry in snapshot}) == 50
    assert all(entry.key == entry.value for entry in snapshot)
    info = cache.info()
    assert info["evictions"] == num_threads * per_thread - 50


def test_lock_groups_operations():
    cache = SynchronizedLRUCache[str, int](capacity=2)
    with cache.lock:
        if not cache.contains_key("a"):
            cache.put("a", 1)
        assert cache.get("a") == 1
