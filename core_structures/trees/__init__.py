"""Self-balancing search trees."""

from core_structures.trees.avl_tree import AVLTree
from core_structures.trees.exceptions import InvalidValueError

__all__ = [
    "AVLTree",
    "InvalidValueError",
]
