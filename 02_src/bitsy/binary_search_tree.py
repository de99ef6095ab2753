"""Unbalanced binary search tree."""

import logging
from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BinaryTreeNode(Generic[T]):
    value: T
    left: Optional["BinaryTreeNode[T]"] = None
    right: Optional["BinaryTreeNode[T]"] = None


class BinarySearchTree(Generic[T]):
    """Ordered binary tree: smaller values go left, larger values go right.

    No rebalancing is done, so search and insert cost O(height), which
    degrades to O(n) when values arrive already sorted. Equal values are
    never stored twice.
    """

    def __init__(self, root: Optional[BinaryTreeNode[T]] = None) -> None:
        self.root = root

    def contains(self, value: T) -> bool:
        current = self.root
        while current is not None:
            if value > current.value:  # type: ignore[operator]
                current = current.right
            elif value < current.value:  # type: ignore[operator]
                current = current.left
            else:
                return True
        return False

    def add(self, value: T) -> None:
        if self.root is None:
            self.root = BinaryTreeNode(value=value)
            return

        current = self.root
        while True:
            if value > current.value:  # type: ignore[operator]
                if current.right is None:
                    current.right = BinaryTreeNode(value=value)
                    return
                current = current.right
            elif value < current.value:  # type: ignore[operator]
                if current.left is None:
                    current.left = BinaryTreeNode(value=value)
                    return
                current = current.left
            else:
                logger.debug("Value %r already in tree, skipping", value)
                return

    def height(self) -> int:
        if self.root is None:
            return 0
        tallest = 0
        stack: List[Tuple[BinaryTreeNode[T], int]] = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return tallest

    def __iter__(self) -> Iterator[T]:
        # In-order walk with an explicit stack: yields values in ascending order.
        stack: List[BinaryTreeNode[T]] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]
