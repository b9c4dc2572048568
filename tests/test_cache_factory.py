"""Tests for the cache factory."""

import pytest

from core_structures.config import settings
from core_structures.in_memory_cache import InvalidCapacityError, LRUCache, create_cache


def test_create_cache_with_explicit_capacity():
    cache = create_cache(5)
    assert isinstance(cache, LRUCache)
    assert cache.capacity == 5


def test_create_cache_falls_back_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "lru_default_capacity", 7)
    assert create_cache().capacity == 7


def test_create_cache_returns_independent_instances():
    first = create_cache(2)
    second = create_cache(2)
    first.put("k", 1)
    assert "k" not in second


def test_create_cache_rejects_invalid_capacity():
    with pytest.raises(InvalidCapacityError):
        create_cache(0)
