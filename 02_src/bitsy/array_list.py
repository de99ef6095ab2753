"""Ordered list over a preallocated, fixed-capacity block of slots."""

import logging
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from .errors import CapacityExceededError, OutOfBoundsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 100


@dataclass
class ListSlot(Generic[T]):
    element: Optional[T] = None
    occupied: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.occupied


class List(Generic[T]):
    """Growable sequence that never reallocates its backing memory.

    The memory is allocated once, up front, and ``length`` marks where the
    logical end of the list sits inside it. Access, push and pop at the end
    are O(1); unshift and shift slide every element and are O(length).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"List capacity must be positive, got {capacity}")
        self._memory: list[ListSlot[T]] = [ListSlot() for _ in range(capacity)]
        self.length = 0

    @property
    def capacity(self) -> int:
        return len(self._memory)

    def get(self, address: int) -> T:
        if address < 0 or address >= self.length:
            raise OutOfBoundsError(
                f"Address {address} is outside the list (length={self.length})"
            )
        return self._memory[address].element  # type: ignore[return-value]

    def push(self, value: T) -> None:
        self._reject_none("push", value)
        self._ensure_room("push", value)
        self._memory[self.length] = ListSlot(element=value, occupied=True)
        self.length += 1

    def pop(self) -> Optional[T]:
        if self.length == 0:
            return None
        last_address = self.length - 1
        value = self._memory[last_address].element
        self._memory[last_address] = ListSlot()
        self.length -= 1
        return value

    def unshift(self, value: T) -> None:
        self._reject_none("unshift", value)
        self._ensure_room("unshift", value)
        # Carry each slot one address to the right, starting from the front.
        previous = ListSlot(element=value, occupied=True)
        for address in range(self.length):
            current = self._memory[address]
            self._memory[address] = previous
            previous = current
        self._memory[self.length] = previous
        self.length += 1

    def shift(self) -> Optional[T]:
        if self.length == 0:
            return None
        value = self._memory[0].element
        for address in range(self.length - 1):
            self._memory[address] = self._memory[address + 1]
        self._memory[self.length - 1] = ListSlot()
        self.length -= 1
        return value

    @staticmethod
    def _reject_none(operation: str, value: Optional[T]) -> None:
        # None is reserved for "no value" from pop and shift.
        if value is None:
            raise ValueError(f"Cannot {operation} None into a List")

    def _ensure_room(self, operation: str, value: T) -> None:
        if self.length < self.capacity:
            return
        logger.debug("Refusing %s of %r: list is full (capacity=%d)", operation, value, self.capacity)
        raise CapacityExceededError(
            f"Cannot {operation} {value!r}: list is full (capacity={self.capacity})"
        )

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        for address in range(self.length):
            yield self._memory[address].element  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"List({list(self)!r}, length={self.length})"
