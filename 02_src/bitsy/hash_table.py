"""Fixed-size hash table that ignores collisions."""

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 100


@dataclass
class HashTableSlot(Generic[V]):
    element: Optional[V] = None
    occupied: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.occupied


class HashTable(Generic[K, V]):
    """Keys are hashed straight to a slot address.

    Slots store only values, never keys. Two keys that hash to the same
    address share the slot and the later ``set`` replaces the earlier value;
    there is no chaining, probing or resizing.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"HashTable capacity must be positive, got {capacity}")
        self._memory: List[HashTableSlot[V]] = [HashTableSlot() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._memory)

    def hash_key(self, key: K) -> int:
        if isinstance(key, str):
            data = key.encode("utf-8")
        elif isinstance(key, bytes):
            data = key
        else:
            # hash() follows equality, so 1, 1.0 and True share a slot.
            return hash(key) % self.capacity

        digest = 0
        for byte in data:
            digest = ((digest << 5) - digest + byte) & 0xFFFFFFFF
        return digest % self.capacity

    def get(self, key: K) -> Optional[V]:
        address = self.hash_key(key)
        return self._memory[address].element

    def set(self, key: K, value: V) -> None:
        if value is None:
            raise ValueError(f"Cannot store None under key {key!r}")
        address = self.hash_key(key)
        if self._memory[address].occupied:
            logger.debug("Overwriting occupied slot %d with value for key %r", address, key)
        self._memory[address] = HashTableSlot(element=value, occupied=True)

    def remove(self, key: K) -> None:
        address = self.hash_key(key)
        if not self._memory[address].is_empty:
            self._memory[address] = HashTableSlot()
            logger.debug("Cleared slot %d for key %r", address, key)
