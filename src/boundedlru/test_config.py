import logging

import pytest
from boundedlru import config
from boundedlru.lru_cache import LRUCache


def test_default_capacity_without_env(monkeypatch):
    monkeypatch.delenv(config.DEFAULT_CAPACITY_ENV, raising=False)
    assert config.default_capacity() == config.DEFAULT_CAPACITY
    assert LRUCache().capacity == config.DEFAULT_CAPACITY


def test_default_capacity_from_env(monkeypatch):
    monkeypatch.setenv(config.DEFAULT_CAPACITY_ENV, "2")
    cache = LRUCache()
    assert cache.capacity == 2
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert list(cache) == ["b", "c"]


def test_explicit_capacity_wins_over_env(monkeypatch):
    monkeypatch.setenv(config.DEFAULT_CAPACITY_ENV, "2")
    assert LRUCache(5).capacity == 5


@pytest.mark.parametrize("raw", ["0", "-3", "ten", "1.5"])
def test_invalid_env_falls_back_with_warning(monkeypatch, caplog, raw):
    monkeypatch.setenv(config.DEFAULT_CAPACITY_ENV, raw)
    with caplog.at_level(logging.WARNING, logger="boundedlru.config"):
        assert config.default_capacity() == config.DEFAULT_CAPACITY
    assert config.DEFAULT_CAPACITY_ENV in caplog.text


def test_blank_env_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv(config.DEFAULT_CAPACITY_ENV, "  ")
    with caplog.at_level(logging.WARNING, logger="boundedlru.config"):
        assert config.default_capacity() == config.DEFAULT_CAPACITY
    assert caplog.records == []


def test_eviction_is_logged(caplog):
    cache = LRUCache[str, int](capacity=1)
    with caplog.at_level(logging.DEBUG, logger="boundedlru.lru_cache"):
        cache.put("a", 1)
        cache.put("b", 2)
    assert "Evicted 'a'" in caplog.text
