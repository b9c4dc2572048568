"""AVL (Adelson-Velsky and Landis) tree implementation."""

from collections import deque
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

import structlog

from core_structures.metrics import record_rotation
from core_structures.trees.exceptions import InvalidValueError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Node(Generic[T]):
    """Tree node holding one value and the cached height of its subtree."""
    
    __slots__ = ("data", "left", "right", "height")
    
    def __init__(self, data: T):
        self.data = data
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None
        # New nodes are leaves
        self.height = 1


class AVLTree(Generic[T]):
    """
    Self-balancing binary search tree of unique, totally ordered values.
    
    For every node the heights of the two subtrees differ by at most one,
    which keeps search, insert and delete at O(log n). Heights follow the
    convention that an absent subtree has height 0, so a single node has
    height 1.
    
    Insert and delete recurse down the tree and hand back the (possibly
    rotated) subtree root, which the parent reassigns to its child link.
    """
    
    def __init__(self, values: Optional[Iterable[T]] = None):
        """
        Initialize the tree.
        
        Args:
            values: Optional values inserted one by one, in order
        """
        self._root: Optional[Node[T]] = None
        self._size = 0
        if values is not None:
            for value in values:
                self.insert(value)
    
    def insert(self, value: T) -> None:
        """
        Insert a value, rebalancing along the insertion path.
        
        Inserting a value that is already present leaves the tree unchanged.
        
        Args:
            value: The value to insert
        
        Raises:
            InvalidValueError: If value is None
        """
        if value is None:
            raise InvalidValueError("insert")
        self._root = self._insert(self._root, value)
    
    def search(self, value: T) -> bool:
        """
        Check whether a value is stored in the tree.
        
        Args:
            value: The value to look for
        
        Returns:
            True if the value is present, False otherwise
        """
        if value is None:
            # None is never stored
            return False
        node = self._root
        while node is not None:
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return True
        return False
    
    def delete(self, value: T) -> None:
        """
        Delete a value, rebalancing along the deletion path.
        
        Deleting a value that is not present leaves the tree unchanged.
        
        Args:
            value: The value to delete
        
        Raises:
            InvalidValueError: If value is None
        """
        if value is None:
            raise InvalidValueError("delete")
        self._root = self._delete(self._root, value)
    
    def height(self) -> int:
        """Height of the root: 0 for an empty tree, 1 for a single node."""
        return self._height(self._root)
    
    def is_empty(self) -> bool:
        """True when the tree holds no values."""
        return self._root is None
    
    def clear(self) -> None:
        """Drop every node."""
        dropped = self._size
        self._root = None
        self._size = 0
        logger.info("Cleared AVL tree", dropped=dropped)
    
    def inorder(self) -> List[T]:
        """Values in ascending order."""
        return list(self)
    
    def level_order(self) -> List[T]:
        """Values breadth-first, left to right on each level."""
        values: List[T] = []
        if self._root is None:
            return values
        
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            values.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return values
    
    def is_valid_avl(self) -> bool:
        """
        Check the BST order, the balance factor and every cached height.
        
        Meant for tests and debugging: a False result means the tree
        itself is broken, not that the caller misused it.
        """
        return self._validate(self._root, None, None) >= 0
    
    def __len__(self) -> int:
        """Number of stored values."""
        return self._size
    
    def __contains__(self, value: Any) -> bool:
        """Same as search()."""
        return self.search(value)
    
    def __iter__(self) -> Iterator[T]:
        """Yield values in ascending order without building a list."""
        stack: List[Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right
    
    def __repr__(self) -> str:
        return f"AVLTree({self.inorder()!r})"
    
    def _insert(self, node: Optional[Node[T]], value: T) -> Node[T]:
        """
        Insert into the subtree rooted at node.
        
        Returns:
            The new root of the subtree after insertion and rebalancing
        """
        if node is None:
            self._size += 1
            return Node(value)
        
        if value < node.data:
            node.left = self._insert(node.left, value)
        elif value > node.data:
            node.right = self._insert(node.right, value)
        else:
            # Duplicate values are ignored
            return node
        
        self._update_height(node)
        balance = self._balance(node)
        
        # The inserted value tells which grandchild grew
        if balance > 1 and value < node.left.data:
            return self._rebalance_left_left(node, "insert")
        if balance < -1 and value > node.right.data:
            return self._rebalance_right_right(node, "insert")
        if balance > 1 and value > node.left.data:
            return self._rebalance_left_right(node, "insert")
        if balance < -1 and value < node.right.data:
            return self._rebalance_right_left(node, "insert")
        
        return node
    
    def _delete(self, node: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        """
        Delete from the subtree rooted at node.
        
        Returns:
            The new root of the subtree after deletion and rebalancing
        """
        if node is None:
            return None
        
        if value < node.data:
            node.left = self._delete(node.left, value)
        elif value > node.data:
            node.right = self._delete(node.right, value)
        else:
            # No children or a single child: promote the child
            if node.left is None:
                self._size -= 1
                return node.right
            if node.right is None:
                self._size -= 1
                return node.left
            
            # Two children: take over the in-order successor's value,
            # then remove the successor from the right subtree
            node.data = self._min_value(node.right)
            node.right = self._delete(node.right, node.data)
        
        self._update_height(node)
        balance = self._balance(node)
        
        # The deleted value is gone, so the heavy child's own balance decides
        if balance > 1 and self._balance(node.left) >= 0:
            return self._rebalance_left_left(node, "delete")
        if balance > 1 and self._balance(node.left) < 0:
            return self._rebalance_left_right(node, "delete")
        if balance < -1 and self._balance(node.right) <= 0:
            return self._rebalance_right_right(node, "delete")
        if balance < -1 and self._balance(node.right) > 0:
            return self._rebalance_right_left(node, "delete")
        
        return node
    
    def _rebalance_left_left(self, node: Node[T], phase: str) -> Node[T]:
        self._log_rotation("LL", phase, node)
        return self._rotate_right(node)
    
    def _rebalance_right_right(self, node: Node[T], phase: str) -> Node[T]:
        self._log_rotation("RR", phase, node)
        return self._rotate_left(node)
    
    def _rebalance_left_right(self, node: Node[T], phase: str) -> Node[T]:
        self._log_rotation("LR", phase, node)
        node.left = self._rotate_left(node.left)
        return self._rotate_right(node)
    
    def _rebalance_right_left(self, node: Node[T], phase: str) -> Node[T]:
        self._log_rotation("RL", phase, node)
        node.right = self._rotate_right(node.right)
        return self._rotate_left(node)
    
    def _rotate_right(self, y: Node[T]) -> Node[T]:
        """
        Rotate the subtree rooted at y to the right.
                
                y                x
               / \\              / \\
              x   T3   -->     T1  y
             / \\                  / \\
            T1  T2               T2  T3
        
        Returns:
            x, the new root of the subtree
        """
        x = y.left
        t2 = x.right
        
        x.right = y
        y.left = t2
        
        # y is now x's child, so it must be updated first
        self._update_height(y)
        self._update_height(x)
        return x
    
    def _rotate_left(self, x: Node[T]) -> Node[T]:
        """
        Rotate the subtree rooted at x to the left.
              
              x                 y
             / \\               / \\
            T1  y     -->     x   T3
               / \\           / \\
              T2  T3        T1  T2
        
        Returns:
            y, the new root of the subtree
        """
        y = x.right
        t2 = y.left
        
        y.left = x
        x.right = t2
        
        self._update_height(x)
        self._update_height(y)
        return y
    
    def _validate(self, node: Optional[Node[T]], low: Optional[T], high: Optional[T]) -> int:
        """
        Validate a subtree whose values must lie strictly between low and high.
        
        Returns:
            The subtree height, or -1 if any invariant is broken
        """
        if node is None:
            return 0
        
        if (low is not None and not low < node.data) or \
           (high is not None and not node.data < high):
            return -1
        
        left_height = self._validate(node.left, low, node.data)
        if left_height < 0:
            return -1
        right_height = self._validate(node.right, node.data, high)
        if right_height < 0:
            return -1
        
        if abs(left_height - right_height) > 1:
            return -1
        expected = 1 + max(left_height, right_height)
        if node.height != expected:
            return -1
        return expected
    
    @staticmethod
    def _log_rotation(case: str, phase: str, node: Node[T]) -> None:
        record_rotation(case, phase)
        logger.debug("Rebalancing AVL subtree", case=case, phase=phase, pivot=node.data)
    
    @staticmethod
    def _min_value(node: Node[T]) -> T:
        while node.left is not None:
            node = node.left
        return node.data
    
    @staticmethod
    def _height(node: Optional[Node[T]]) -> int:
        return 0 if node is None else node.height
    
    @classmethod
    def _update_height(cls, node: Node[T]) -> None:
        node.height = 1 + max(cls._height(node.left), cls._height(node.right))
    
    @classmethod
    def _balance(cls, node: Optional[Node[T]]) -> int:
        """Height of the left subtree minus height of the right subtree."""
        if node is None:
            return 0
        return cls._height(node.left) - cls._height(node.right)
