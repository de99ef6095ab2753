"""General tree where every node may have any number of children."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TreeNode(Generic[T]):
    value: T
    children: List["TreeNode[T]"] = field(default_factory=list)


class Tree(Generic[T]):
    def __init__(self, root: Optional[TreeNode[T]] = None) -> None:
        self.root = root

    def traverse(self, visit: Callable[[TreeNode[T]], None]) -> None:
        """Call ``visit`` on every node, parents before their children."""
        for node in self.walk():
            visit(node)

    def walk(self) -> Iterator[TreeNode[T]]:
        """Lazily yield nodes in the same pre-order as ``traverse``."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def add(self, value: T, parent_value: T) -> None:
        if self.root is None:
            self.root = TreeNode(value=value)
            return

        parents: List[TreeNode[T]] = []

        def collect(node: TreeNode[T]) -> None:
            if node.value == parent_value:
                parents.append(node)

        self.traverse(collect)
        if not parents:
            logger.debug("No node with value %r, %r was not added", parent_value, value)
            return
        for parent in parents:
            parent.children.append(TreeNode(value=value))

    def values(self) -> List[T]:
        return [node.value for node in self.walk()]

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())
