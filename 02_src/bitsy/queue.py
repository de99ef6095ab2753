"""FIFO queue on top of a dynamic sequence."""

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """Enqueue appends at the back in amortized O(1).

    Dequeue takes from the front of the backing list, which shifts every
    remaining element, so it costs O(n).
    """

    def __init__(self) -> None:
        self._items: List[T] = []
        self.length = 0

    def enqueue(self, value: T) -> None:
        if value is None:
            raise ValueError("Cannot enqueue None")
        self._items.append(value)
        self.length += 1

    def dequeue(self) -> Optional[T]:
        if self.length == 0:
            return None
        self.length -= 1
        return self._items.pop(0)

    def peek(self) -> Optional[T]:
        if self.length == 0:
            return None
        return self._items[0]

    def is_empty(self) -> bool:
        return self.length == 0

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"Queue({self._items!r})"
