"""Doubly linked list with positional insertion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class Node:
    """A list node linked to its neighbours."""

    data: Any
    previous: Node | None = field(default=None, repr=False)
    next: Node | None = None


class DoublyLinkedList:
    """Doubly linked list that keeps a count of its nodes."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._count = 0

    def insert(self, data: Any, index: int | None = None) -> None:
        """Insert before position index, or append when index is None or past the end."""
        self._count += 1
        if self._head is None:
            self._head = Node(data)
            return

        node = self._head
        steps = index if index is not None else self._count
        for _ in range(steps):
            if node.next is None:
                node.next = Node(data, previous=node)
                return
            node = node.next

        if node is self._head:
            new_node = Node(data, next=self._head)
            self._head.previous = new_node
            self._head = new_node
            return

        before = node.previous
        new_node = Node(data, previous=before, next=node)
        before.next = new_node
        node.previous = new_node

    def delete(self, data: Any) -> bool:
        """Remove the first node holding data; return False if there is none."""
        node = self._head
        while node is not None and node.data != data:
            node = node.next
        if node is None:
            return False

        self._count -= 1
        if node is self._head:
            self._head = node.next
            if self._head is not None:
                self._head.previous = None
            return True

        node.previous.next = node.next
        if node.next is not None:
            node.next.previous = node.previous
        return True

    def search(self, data: Any) -> bool:
        """Return True if some node holds data."""
        return any(node.data == data for node in self)

    def __contains__(self, data: Any) -> bool:
        return self.search(data)

    def __iter__(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __getitem__(self, index: int) -> Node:
        if not 0 <= index < self._count:
            raise IndexError("list index out of range")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def __len__(self) -> int:
        return self._count