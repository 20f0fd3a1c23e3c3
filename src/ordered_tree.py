"""Unbalanced binary search tree mapping unique keys to values.

Depth depends only on insertion order. Inserting keys in sorted order builds
a linked list, so every operation is linear in the worst case. All walks are
iterative, which keeps degenerate trees clear of the recursion limit.
"""

import logging
import sys
from collections import deque
from copy import deepcopy
from typing import (
    Deque, Generic, Iterator, List, Optional, TextIO, Tuple, TypeVar,
)

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')


class OrderedTree(Generic[K, V]):
    class Node:
        def __init__(self, key, value) -> None:
            self.key = key
            self.value = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

    # Marks the end of a depth in the level-order queue.
    _DELIMITER = None

    def __init__(self, entry: Optional[Tuple[K, V]] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        if entry is not None:
            key, value = entry
            self._root = OrderedTree.Node(key, value)
            self._size = 1

    # -- copy and move ----------------------------------------------------

    def copy(self) -> 'OrderedTree[K, V]':
        """Return a tree with the same shape and entries.

        Nodes are cloned; values are shared by reference.
        """
        clone: OrderedTree[K, V] = OrderedTree()
        clone._root = self._clone_nodes(self._root)
        clone._size = self._size
        return clone

    def move(self) -> 'OrderedTree[K, V]':
        """Hand every node over to a new tree and leave this one empty."""
        target: OrderedTree[K, V] = OrderedTree()
        target._root, target._size = self._root, self._size
        self._root, self._size = None, 0
        return target

    def copy_from(self, other: 'OrderedTree[K, V]') -> 'OrderedTree[K, V]':
        if other is self:
            return self
        root = self._clone_nodes(other._root)
        self.clear()
        self._root, self._size = root, other._size
        logger.debug("copied %d entries into tree", self._size)
        return self

    def move_from(self, other: 'OrderedTree[K, V]') -> 'OrderedTree[K, V]':
        if other is self:
            return self
        self.clear()
        self._root, self._size = other._root, other._size
        other._root, other._size = None, 0
        logger.debug("moved %d entries into tree", self._size)
        return self

    # -- queries ----------------------------------------------------------

    def root(self) -> Tuple[K, V]:
        if self._root is None:
            raise ValueError("root from empty tree")
        return self._root.key, self._root.value

    def min(self) -> Tuple[K, V]:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._find_min(self._root)
        return node.key, node.value

    def max(self) -> Tuple[K, V]:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._find_max(self._root)
        return node.key, node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def contains(self, key: K) -> bool:
        return self._find_node(key) is not None

    def find(self, key: K) -> V:
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def get_or(self, key: K, default: V) -> V:
        node = self._find_node(key)
        if node is None:
            return default
        return node.value

    def replace(self, key: K, value: V) -> None:
        """Overwrite the value stored under an existing key."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        node.value = value

    # -- mutation ---------------------------------------------------------

    def insert(self, key: K, value: V) -> None:
        """Add a new entry. An existing key is left untouched, value included."""
        if self._root is None:
            self._root = OrderedTree.Node(key, value)
            self._size += 1
            return

        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = OrderedTree.Node(key, value)
                    self._size += 1
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = OrderedTree.Node(key, value)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def erase(self, key: K) -> None:
        """Remove the entry for key, if any.

        A node with two children takes over its in-order successor's entry,
        then the successor's key is erased from the right subtree. The erased
        node object therefore survives and the successor node is unlinked.
        """
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None:
            if key < node.key:
                parent, node, is_left_child = node, node.left, True
            elif key > node.key:
                parent, node, is_left_child = node, node.right, False
            elif node.left is not None and node.right is not None:
                successor = self._find_min(node.right)
                node.key, node.value = successor.key, successor.value
                key = successor.key
                parent, node, is_left_child = node, node.right, False
            else:
                replacement = node.left if node.left is not None else node.right
                if parent is None:
                    self._root = replacement
                elif is_left_child:
                    parent.left = replacement
                else:
                    parent.right = replacement
                node.left = node.right = None
                self._size -= 1
                return

    def clear(self) -> None:
        if self._root is None:
            return
        released = 0
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack[-1]
            if node.left is not None:
                stack.append(node.left)
                node.left = None
            elif node.right is not None:
                stack.append(node.right)
                node.right = None
            else:
                stack.pop()
                released += 1
        self._root = None
        self._size = 0
        logger.debug("cleared %d nodes", released)

    # -- traversal --------------------------------------------------------

    def levels(self) -> Iterator[Tuple[int, List[Tuple[K, V]]]]:
        """Yield (depth, entries) per depth, left to right, root first."""
        if self._root is None:
            return

        queue: Deque[Optional[OrderedTree.Node]] = deque([self._root, self._DELIMITER])
        depth = 0
        level: List[Tuple[K, V]] = []
        while True:
            node = queue.popleft()
            if node is self._DELIMITER:
                yield depth, level
                if not queue:
                    return
                queue.append(self._DELIMITER)
                depth += 1
                level = []
            else:
                level.append((node.key, node.value))
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)

    def level_by_level(self, out: Optional[TextIO] = None) -> None:
        """Write each depth's values on one line, separated by spaces."""
        if out is None:
            out = sys.stdout
        for _, level in self.levels():
            out.write(" ".join(str(value) for _, value in level))
            out.write("\n")

    def in_order(self) -> List[Tuple[K, V]]:
        result: List[Tuple[K, V]] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append((node.key, node.value))
            node = node.right
        return result

    def height(self) -> int:
        height = 0
        for _ in self.levels():
            height += 1
        return height

    # -- helpers ----------------------------------------------------------

    def _find_node(self, key: K) -> Optional[Node]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    @staticmethod
    def _clone_nodes(source: Optional[Node]) -> Optional[Node]:
        if source is None:
            return None
        root = OrderedTree.Node(source.key, source.value)
        pending = [(source, root)]
        while pending:
            src, dst = pending.pop()
            if src.left is not None:
                dst.left = OrderedTree.Node(src.left.key, src.left.value)
                pending.append((src.left, dst.left))
            if src.right is not None:
                dst.right = OrderedTree.Node(src.right.key, src.right.value)
                pending.append((src.right, dst.right))
        return root

    # -- protocol ---------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __getitem__(self, key: K) -> V:
        return self.find(key)

    def __copy__(self) -> 'OrderedTree[K, V]':
        return self.copy()

    def __deepcopy__(self, memo) -> 'OrderedTree[K, V]':
        clone = self.copy()
        stack = [clone._root] if clone._root is not None else []
        while stack:
            node = stack.pop()
            node.key = deepcopy(node.key, memo)
            node.value = deepcopy(node.value, memo)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return clone

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"
