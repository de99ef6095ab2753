"""Graph data model primitives."""

from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

from typing_extensions import TypedDict

T = TypeVar("T")


@dataclass
class GraphNode(Generic[T]):
    index: int
    value: T
    # Handles into the owning graph's node list, one per outgoing line.
    lines: List[int] = field(default_factory=list)


class GraphNodePayload(TypedDict):
    index: int
    value: Any
    lines: List[int]


class GraphPayload(TypedDict):
    nodes: List[GraphNodePayload]
