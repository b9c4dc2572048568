"""Base cache interface for in-memory cache implementations."""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional

from core_structures.in_memory_cache.exceptions import InvalidCapacityError


class BaseCache(ABC):
    """
    Abstract base class for fixed-capacity cache implementations.
    
    Implementations are not synchronized. Callers sharing a cache between
    threads must guard every call with one lock of their own.
    """
    
    def __init__(self, capacity: int):
        """
        Initialize the cache.
        
        Args:
            capacity: Maximum number of keys the cache can hold
        
        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(capacity)
        
        self._capacity = capacity
    
    @abstractmethod
    def get(self, key: Hashable, default: Optional[Any] = None) -> Optional[Any]:
        """
        Get a value from the cache by key.
        
        Args:
            key: The key to look up
            default: Returned when the key is not cached
        
        Returns:
            The value associated with the key, or default if not found
        """
        pass
    
    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Set a key-value pair in the cache.
        
        Args:
            key: The key to store
            value: The value to store
        """
        pass
    
    @abstractmethod
    def invalidate(self, key: Hashable) -> None:
        """
        Remove a key from the cache.
        
        Args:
            key: The key to remove
        """
        pass
    
    @abstractmethod
    def clear(self) -> None:
        """Clear all entries from the cache."""
        pass
    
    @abstractmethod
    def size(self) -> int:
        """
        Get the current number of keys in the cache.
        
        Returns:
            The number of keys currently in the cache
        """
        pass
    
    def __len__(self) -> int:
        return self.size()
    
    @property
    def capacity(self) -> int:
        """Get the maximum number of keys the cache can hold."""
        return self._capacity
