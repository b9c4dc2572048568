"""Factory for creating cache instances."""

from typing import Optional

import structlog

from core_structures.config import settings
from core_structures.in_memory_cache.base import BaseCache
from core_structures.in_memory_cache.lru_cache import LRUCache

logger = structlog.get_logger(__name__)


def create_cache(capacity: Optional[int] = None) -> BaseCache:
    """
    Create an LRU cache instance.
    
    Args:
        capacity: Maximum number of keys the cache can hold.
                  Defaults to settings.lru_default_capacity when omitted.
    
    Returns:
        A cache instance implementing the BaseCache interface
    
    Raises:
        InvalidCapacityError: If capacity is not a positive integer
    
    Example:
        cache = create_cache()      # settings.lru_default_capacity entries
        cache = create_cache(500)   # 500 entries
    """
    if capacity is None:
        capacity = settings.lru_default_capacity
    
    cache = LRUCache(capacity)
    logger.info("Created in-memory cache", eviction_policy="LRU", capacity=capacity)
    return cache
