"""Self-balancing (AVL) binary search tree with a fixed node budget."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False, repr=False)
class TreeNode(Generic[T]):
    """A tree element with links to its parent and children."""

    data: T
    parent: Optional["TreeNode[T]"] = None
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None
    balance: int = 0

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r}, balance={self.balance})"


def _rotate_left(a: TreeNode) -> TreeNode:
    b = a.right
    a.right = b.left
    b.left = a

    b.parent = a.parent
    a.parent = b
    if a.right is not None:
        a.right.parent = a
    return b


def _rotate_right(a: TreeNode) -> TreeNode:
    b = a.left
    a.left = b.right
    b.right = a

    b.parent = a.parent
    a.parent = b
    if a.left is not None:
        a.left.parent = a
    return b


def _rotate_left_left(node: TreeNode) -> TreeNode:
    balance = node.right.balance
    node = _rotate_left(node)
    node.balance = balance - 1
    node.left.balance = 1 - balance
    return node


def _rotate_right_right(node: TreeNode) -> TreeNode:
    balance = node.left.balance
    node = _rotate_right(node)
    node.balance = balance + 1
    node.right.balance = -1 - balance
    return node


def _rotate_left_right(node: TreeNode) -> TreeNode:
    balance = node.left.right.balance
    node.left = _rotate_left(node.left)
    node = _rotate_right(node)
    node.balance = 0
    node.left.balance = -1 if balance == 1 else 0
    node.right.balance = 1 if balance == -1 else 0
    return node


def _rotate_right_left(node: TreeNode) -> TreeNode:
    balance = node.right.left.balance
    node.right = _rotate_right(node.right)
    node = _rotate_left(node)
    node.balance = 0
    node.left.balance = -1 if balance == 1 else 0
    node.right.balance = 1 if balance == -1 else 0
    return node


def _rebalance(parent: TreeNode, new_balance: int) -> Optional[TreeNode]:
    """Rotate ``parent`` if it became unbalanced; return the new subtree root."""
    if new_balance <= -2:
        if parent.left.balance >= 1:
            return _rotate_left_right(parent)
        return _rotate_right_right(parent)
    if new_balance >= 2:
        if parent.right.balance <= -1:
            return _rotate_right_left(parent)
        return _rotate_left_left(parent)
    return None


class Tree(Generic[T]):
    """Ordered tree holding at most ``capacity`` elements; duplicates allowed."""

    __slots__ = ("_capacity", "_compare", "_root", "_size")

    def __init__(self, capacity: int,
                 comparator: Optional[Comparator] = None) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._compare: Comparator = comparator or _natural_order
        self._root: Optional[TreeNode[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield the elements in ascending order."""
        stack: list[TreeNode[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __repr__(self) -> str:
        return f"Tree(capacity={self._capacity}, items={list(self)!r})"

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._root is None

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    def height(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        level = [self._root] if self._root is not None else []
        depth = 0
        while level:
            depth += 1
            level = [child for node in level
                     for child in (node.left, node.right) if child is not None]
        return depth

    def insert(self, element: T) -> TreeNode[T]:
        """Add ``element`` and return its node; raise OverflowError when full."""
        if self._size >= self._capacity:
            raise OverflowError("tree is full")
        node = TreeNode(element)
        self._insert_node(node)
        self._size += 1
        return node

    def find(self, element: T) -> Optional[TreeNode[T]]:
        """Return a node whose data compares equal to ``element``, or None."""
        current = self._root
        while current is not None:
            difference = self._compare(element, current.data)
            if difference < 0:
                current = current.left
            elif difference > 0:
                current = current.right
            else:
                break
        return current

    def erase(self, node: TreeNode[T]) -> None:
        """Remove the element held by ``node`` from the tree."""
        if not self._owns(node):
            raise ValueError("node does not belong to this tree")

        child: Optional[TreeNode[T]] = None
        parent = node.parent
        erased = False

        if node.left is not None and node.right is not None:
            parent = node
            current = node.right
            while current.left is not None:
                parent = current
                current = current.left
            child = current.right
            node.data = current.data
            sacrifice = current
        else:
            current = node
            sacrifice = node
            child = node.right if node.right is not None else node.left

        while parent is not None:
            old_balance = parent.balance
            new_balance = old_balance + (1 if parent.left is current else -1)
            ancestor = parent.parent
            propagate = False

            if not erased:
                erased = True
                if child is not None:
                    child.parent = parent
                if parent.left is current:
                    parent.left = child
                else:
                    parent.right = child

            root = _rebalance(parent, new_balance)
            if root is None:
                if not new_balance:
                    propagate = True
                parent.balance = new_balance
            elif ancestor is not None:
                if old_balance and not root.balance:
                    propagate = True
                if ancestor.left is parent:
                    ancestor.left = root
                else:
                    ancestor.right = root
                parent = root
            else:
                self._root = root
                break

            if not propagate:
                break
            current = parent
            parent = ancestor

        if sacrifice is self._root:
            if child is not None:
                child.parent = None
            self._root = child

        sacrifice.parent = sacrifice.left = sacrifice.right = None
        sacrifice.balance = 0
        self._size -= 1

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def _owns(self, node: TreeNode[T]) -> bool:
        top = node
        while top.parent is not None:
            top = top.parent
        return top is self._root and self._root is not None

    def _insert_node(self, node: TreeNode[T]) -> None:
        current = self._root
        parent: Optional[TreeNode[T]] = None
        left = False

        while current is not None:
            parent = current
            left = self._compare(node.data, current.data) < 0
            current = current.left if left else current.right

        if parent is None:
            self._root = node
            return

        node.parent = parent
        current = node
        if left:
            parent.left = node
        else:
            parent.right = node

        while parent is not None:
            new_balance = parent.balance + (-1 if parent.left is current else 1)
            ancestor = parent.parent
            propagate = False

            root = _rebalance(parent, new_balance)
            if root is None:
                if new_balance:
                    propagate = True
                parent.balance = new_balance
            elif ancestor is not None:
                if ancestor.left is parent:
                    ancestor.left = root
                else:
                    ancestor.right = root
                parent = root
            else:
                self._root = root
                break

            if not propagate:
                break
            current = parent
            parent = ancestor