"""Fundamental containers built over fixed, addressable memory."""

from .array_list import List, ListSlot
from .binary_search_tree import BinarySearchTree, BinaryTreeNode
from .errors import (
    CapacityExceededError,
    DataStructureError,
    InvalidLineError,
    InvalidPositionError,
    OutOfBoundsError,
)
from .graph import Graph
from .graph_model import GraphNode, GraphNodePayload, GraphPayload
from .hash_table import HashTable, HashTableSlot
from .linked_list import LinkedList, LinkedNode
from .queue import Queue
from .tree import Tree, TreeNode

__all__ = [
    "List",
    "ListSlot",
    "LinkedList",
    "LinkedNode",
    "Queue",
    "BinarySearchTree",
    "BinaryTreeNode",
    "Tree",
    "TreeNode",
    "Graph",
    "GraphNode",
    "GraphNodePayload",
    "GraphPayload",
    "HashTable",
    "HashTableSlot",
    "DataStructureError",
    "OutOfBoundsError",
    "InvalidPositionError",
    "CapacityExceededError",
    "InvalidLineError",
]
