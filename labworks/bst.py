"""Binary search tree with parent links and in-order traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator


class SearchOrder(Enum):
    """Direction walked when looking for a leaf to take a deleted value's place.

    SUCCESSOR follows right links; PREDECESSOR follows left links.
    """

    SUCCESSOR = auto()
    PREDECESSOR = auto()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    data: Any
    parent: TreeNode | None = field(default=None, repr=False)
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the left."""

    def __init__(self) -> None:
        self._root: TreeNode | None = None

    @property
    def root(self) -> TreeNode | None:
        """The root node, or None when the tree is empty."""
        return self._root

    def insert(self, data: Any) -> None:
        """Insert a value; values not greater than a node go to its left."""
        if self._root is None:
            self._root = TreeNode(data)
            return
        node = self._root
        while True:
            if node.data >= data:
                if node.left is None:
                    node.left = TreeNode(data, parent=node)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(data, parent=node)
                    return
                node = node.right

    def search(self, data: Any) -> bool:
        """Return True if a value equal to data is in the tree."""
        return self._find(data) is not None

    def __contains__(self, data: Any) -> bool:
        return self.search(data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.traverse_in_order(self._root))

    def delete(self, data: Any) -> bool:
        """Remove one value equal to data; return False if there is none."""
        node = self._find(data)
        if node is None:
            return False

        if self._take_extreme_leaf(node, node.left, SearchOrder.SUCCESSOR):
            return True

        if node.left is not None:
            left_max = node.left
            while left_max.right is not None:
                left_max = left_max.right
            if node.right is not None:
                node.right.parent = left_max
            left_max.right = node.right
            node.left.parent = node.parent
            self._replace(node, node.left)
            return True

        if self._take_extreme_leaf(node, node.right, SearchOrder.PREDECESSOR):
            return True

        if node.right is not None:
            node.right.parent = node.parent
            self._replace(node, node.right)
            return True

        self._replace(node, None)
        return True

    @staticmethod
    def traverse_in_order(start_node: TreeNode | None) -> list[Any]:
        """Return the values of the subtree at start_node in order."""
        result: list[Any] = []
        stack: list[TreeNode] = []
        node = start_node
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def _find(self, data: Any) -> TreeNode | None:
        node = self._root
        while node is not None:
            if node.data == data:
                return node
            node = node.left if node.data > data else node.right
        return None

    def _replace(self, node: TreeNode, replacement: TreeNode | None) -> None:
        parent = node.parent
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def _take_extreme_leaf(
        self, target: TreeNode, start: TreeNode | None, order: SearchOrder
    ) -> bool:
        """Move the value of the extreme leaf below start into target.

        Walks right (SUCCESSOR) or left (PREDECESSOR) from start. Succeeds only
        when the node reached is a leaf, which is then removed.
        """
        if start is None:
            return False
        forward = (lambda n: n.right) if order is SearchOrder.SUCCESSOR else (lambda n: n.left)
        backward = (lambda n: n.left) if order is SearchOrder.SUCCESSOR else (lambda n: n.right)
        node = start
        while forward(node) is not None:
            node = forward(node)
        if backward(node) is not None:
            return False
        target.data, node.data = node.data, target.data
        self._replace(node, None)
        return True