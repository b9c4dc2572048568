#!/usr/bin/env python
"""Printed walkthroughs of the LRU cache and the AVL tree."""

import logging

from core_structures.config import settings
from core_structures.logging_config import configure_logging
from core_structures.in_memory_cache import LRUCache
from core_structures.trees import AVLTree


def print_cache(cache: LRUCache) -> None:
    """Print the cache from most to least recently used."""
    entries = " ".join(f"({key},{value})" for key, value in cache.items())
    print(f"Current Cache (MRU to LRU): {entries}")


def run_lru_cache_demo() -> LRUCache:
    """Walk through puts, a recency bump, evictions and an update."""
    print("=" * 60)
    print("LRU CACHE")
    print("=" * 60)
    
    cache = LRUCache(3)
    
    cache.put(1, 100)
    print_cache(cache)  # (1,100)
    cache.put(2, 200)
    print_cache(cache)  # (2,200) (1,100)
    cache.put(3, 300)
    print_cache(cache)  # (3,300) (2,200) (1,100)
    
    print(f"Get key 1: {cache.get(1, -1)}")
    print_cache(cache)  # (1,100) (3,300) (2,200)
    
    # Cache is full, key 2 is the least recently used
    cache.put(4, 400)
    print_cache(cache)  # (4,400) (1,100) (3,300)
    
    print(f"Get key 2 (evicted): {cache.get(2, -1)}")
    
    cache.put(1, 150)
    print_cache(cache)  # (1,150) (4,400) (3,300)
    
    cache.put(5, 500)
    print_cache(cache)  # (5,500) (1,150) (4,400)
    
    return cache


def run_avl_tree_demo() -> AVLTree:
    """Walk through rotations, searches, deletes and sequential inserts."""
    print("=" * 60)
    print("AVL TREE")
    print("=" * 60)
    
    tree: AVLTree[int] = AVLTree()
    tree.insert(10)
    tree.insert(20)
    tree.insert(30)  # single left rotation
    tree.insert(40)
    tree.insert(50)  # single left rotation
    tree.insert(25)  # right-left rotation
    
    print(f"Inorder Traversal: {tree.inorder()}")
    print(f"Level Order Traversal: {tree.level_order()}")
    print(f"Height of tree: {tree.height()}")
    print(f"Is valid AVL tree: {tree.is_valid_avl()}")
    
    print(f"Search for 25: {tree.search(25)}")
    print(f"Search for 55: {tree.search(55)}")
    
    print("\nAfter deleting 20:")
    tree.delete(20)
    print(f"Inorder Traversal: {tree.inorder()}")
    print(f"Is valid AVL tree: {tree.is_valid_avl()}")
    
    print("\nAfter deleting 30:")
    tree.delete(30)
    print(f"Inorder Traversal: {tree.inorder()}")
    print(f"Height of tree: {tree.height()}")
    print(f"Is valid AVL tree: {tree.is_valid_avl()}")
    
    # A plain BST would degrade into a list of height 10 here
    print("\nSequential inserts 1..10:")
    sequential = AVLTree(range(1, 11))
    print(f"Level Order Traversal: {sequential.level_order()}")
    print(f"Height of balanced tree with 10 elements: {sequential.height()}")
    print(f"Is valid AVL tree: {sequential.is_valid_avl()}")
    
    return tree


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")
    configure_logging(json_output=settings.log_json)
    run_lru_cache_demo()
    print()
    run_avl_tree_demo()


if __name__ == "__main__":
    main()
