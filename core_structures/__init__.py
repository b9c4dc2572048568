"""LRU cache and AVL tree engines."""

from core_structures.config import settings
from core_structures.logging_config import configure_logging
from core_structures.in_memory_cache import (
    BaseCache,
    InvalidCapacityError,
    LRUCache,
    create_cache,
)
from core_structures.trees import AVLTree, InvalidValueError

__all__ = [
    "settings",
    "configure_logging",
    "BaseCache",
    "LRUCache",
    "create_cache",
    "InvalidCapacityError",
    "AVLTree",
    "InvalidValueError",
]
