"""Directed graph stored as a node list with per-node adjacency lists."""

import logging
from dataclasses import asdict
from typing import Generic, Iterator, List, Optional, TypeVar

from .errors import InvalidLineError
from .graph_model import GraphNode, GraphPayload

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Graph(Generic[T]):
    """Owns every node; lines between nodes are integer handles.

    A line stores the index of its end node in ``nodes`` rather than the
    node itself, so edges never own what they point at.
    """

    def __init__(self) -> None:
        self.nodes: List[GraphNode[T]] = []

    def add_node(self, value: T) -> GraphNode[T]:
        node = GraphNode(index=len(self.nodes), value=value)
        self.nodes.append(node)
        return node

    def find(self, value: T) -> Optional[GraphNode[T]]:
        for node in self.nodes:
            if node.value == value:
                return node
        return None

    def add_line(self, start_value: T, end_value: T) -> None:
        start_node = self.find(start_value)
        end_node = self.find(end_value)
        if start_node is None or end_node is None:
            logger.debug("Rejected line %r -> %r", start_value, end_value)
            missing = start_value if start_node is None else end_value
            raise InvalidLineError(f"Unknown line endpoint: {missing!r}")
        start_node.lines.append(end_node.index)

    def lines_of(self, node: GraphNode[T]) -> List[GraphNode[T]]:
        return [self.nodes[index] for index in node.lines]

    def to_json(self) -> GraphPayload:
        return {"nodes": [asdict(node) for node in self.nodes]}  # type: ignore[misc]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[GraphNode[T]]:
        return iter(self.nodes)
