"""Singly linked list with positional get/add/remove."""

from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar

from .errors import InvalidPositionError

T = TypeVar("T")


@dataclass
class LinkedNode(Generic[T]):
    value: T
    next: Optional["LinkedNode[T]"] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """Chain of nodes where each node owns its successor.

    Reaching a position is an O(n) walk from the head; once the position
    is found, splicing a node in or out is O(1).

    The structural rules are strict: ``add`` only splices between two
    existing nodes (or in front of the head), and ``remove`` needs a node
    after the one being removed, so the last node can never be unlinked.
    Every rejected call raises ``InvalidPositionError`` before touching the
    chain.
    """

    def __init__(self, head: Optional[LinkedNode[T]] = None) -> None:
        self.head = head
        self.length = 0
        current = head
        while current is not None:
            self.length += 1
            current = current.next

    def get(self, position: int) -> T:
        return self.get_node(position).value

    def get_node(self, position: int) -> LinkedNode[T]:
        node = self._node_at(position)
        if node is None:
            raise InvalidPositionError(
                f"No node at position {position} (length={self.length})"
            )
        return node

    def add(self, value: T, position: int) -> None:
        if position == 0:
            self.head = LinkedNode(value=value, next=self.head)
            self.length += 1
            return

        previous = self._node_at(position - 1)
        if previous is None or previous.next is None:
            raise InvalidPositionError(f"Cannot add at position {position}")
        previous.next = LinkedNode(value=value, next=previous.next)
        self.length += 1

    def remove(self, position: int) -> None:
        if position == 0:
            if self.head is None or self.head.next is None:
                raise InvalidPositionError("Cannot remove position 0 without a following node")
            self.head = self.head.next
            self.length -= 1
            return

        previous = self._node_at(position - 1)
        if previous is None or previous.next is None or previous.next.next is None:
            raise InvalidPositionError(f"Cannot remove position {position}")
        previous.next = previous.next.next
        self.length -= 1

    def _node_at(self, position: int) -> Optional[LinkedNode[T]]:
        if position < 0:
            return None
        current = self.head
        for _ in range(position):
            if current is None:
                return None
            current = current.next
        return current

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
