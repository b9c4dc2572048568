"""LRU (Least Recently Used) cache implementation."""

from typing import Any, Hashable, List, Optional, Tuple

import structlog

from core_structures.in_memory_cache.base import BaseCache
from core_structures.metrics import record_cache_event

logger = structlog.get_logger(__name__)


class Node:
    """Node for doubly linked list in LRU cache."""
    
    __slots__ = ("key", "value", "prev", "next")
    
    def __init__(self, key: Hashable = None, value: Any = None):
        self.key = key
        self.value = value
        self.prev: Optional['Node'] = None
        self.next: Optional['Node'] = None


class LRUCache(BaseCache):
    """
    LRU (Least Recently Used) cache implementation.
    
    Uses a hash map for O(1) key lookup and a doubly linked list
    to maintain access order for O(1) eviction. The list runs from
    the most recently used entry (after the head sentinel) to the
    least recently used one (before the tail sentinel).
    """
    
    def __init__(self, capacity: int):
        """
        Initialize LRU cache.
        
        Args:
            capacity: Maximum number of keys the cache can hold
        """
        super().__init__(capacity)
        self._cache: dict[Hashable, Node] = {}
        # Dummy head and tail nodes for easier list manipulation
        self._head = Node()
        self._tail = Node()
        self._head.next = self._tail
        self._tail.prev = self._head
    
    def get(self, key: Hashable, default: Optional[Any] = None) -> Optional[Any]:
        """
        Get a value from the cache by key.
        
        Moves the accessed node to the head (most recently used).
        A miss leaves the cache untouched.
        
        Args:
            key: The key to look up
            default: Returned when the key is not cached
        
        Returns:
            The value associated with the key, or default if not found
        """
        node = self._cache.get(key)
        if node is None:
            record_cache_event("miss")
            return default
        
        self._move_to_head(node)
        record_cache_event("hit")
        return node.value
    
    def put(self, key: Hashable, value: Any) -> None:
        """
        Set a key-value pair in the cache.
        
        If key exists, updates value and moves to head.
        If key doesn't exist, evicts the least recently used item when
        the cache is at capacity, then adds a new node at the head.
        
        Args:
            key: The key to store
            value: The value to store
        """
        node = self._cache.get(key)
        if node is not None:
            node.value = value
            self._move_to_head(node)
            return
        
        if len(self._cache) >= self._capacity:
            self._evict_lru()
        
        node = Node(key, value)
        self._cache[key] = node
        self._add_to_head(node)
    
    def invalidate(self, key: Hashable) -> None:
        """
        Remove a key from the cache.
        
        Args:
            key: The key to remove
        """
        node = self._cache.pop(key, None)
        if node is None:
            return
        
        self._remove_node(node)
        logger.debug("Invalidated cache key", key=key)
    
    def clear(self) -> None:
        """Clear all entries from the cache."""
        dropped = len(self._cache)
        self._cache.clear()
        # Reset head and tail pointers
        self._head.next = self._tail
        self._tail.prev = self._head
        logger.info("Cleared LRU cache", dropped=dropped, capacity=self._capacity)
    
    def size(self) -> int:
        """
        Get the current number of keys in the cache.
        
        Returns:
            The number of keys currently in the cache
        """
        return len(self._cache)
    
    def items(self) -> List[Tuple[Hashable, Any]]:
        """
        Snapshot the cached entries without touching their recency.
        
        Returns:
            (key, value) pairs from most to least recently used
        """
        entries = []
        node = self._head.next
        while node is not self._tail:
            entries.append((node.key, node.value))
            node = node.next
        return entries
    
    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache
    
    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"LRUCache(capacity={self._capacity}, [{body}])"
    
    def _add_to_head(self, node: Node) -> None:
        """
        Insert a node right after the head sentinel (most recently used).
        
        Args:
            node: The node to insert
        """
        node.prev = self._head
        node.next = self._head.next
        self._head.next.prev = node
        self._head.next = node
    
    def _remove_node(self, node: Node) -> None:
        """
        Unlink a node from the linked list.
        
        Args:
            node: The node to remove
        """
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None
    
    def _move_to_head(self, node: Node) -> None:
        """Move a node to the head of the linked list (most recently used)."""
        if self._head.next is node:
            return
        self._remove_node(node)
        self._add_to_head(node)
    
    def _evict_lru(self) -> None:
        """Evict the least recently used item (tail of the list)."""
        lru_node = self._tail.prev
        if lru_node is self._head:
            # Cache is empty
            return
        
        self._remove_node(lru_node)
        del self._cache[lru_node.key]
        record_cache_event("eviction")
        logger.debug("Evicted least recently used key", key=lru_node.key, capacity=self._capacity)
