"""In-memory cache with least-recently-used eviction."""

from core_structures.in_memory_cache.base import BaseCache
from core_structures.in_memory_cache.cache_factory import create_cache
from core_structures.in_memory_cache.exceptions import InvalidCapacityError
from core_structures.in_memory_cache.lru_cache import LRUCache

__all__ = [
    "create_cache",
    "BaseCache",
    "LRUCache",
    "InvalidCapacityError",
]
