"""
events.py — Traversal Event Processors
======================================
A traversal doesn't know what the caller wants to *do* with the nodes it
finds.  It fires events at an EventProcessor instead:

    process_node(node)  – a node was reached for the first time
    process_edge(edge)  – an edge was reached

Only node events are fired by the current DFS.  `process_edge` is part
of the contract so processors can be written against it, but no
traversal calls it yet.
"""

from abc import ABC, abstractmethod
from typing import Hashable, List

from graph.edge import Edge


class EventProcessor(ABC):
    """Contract for objects that react to traversal events."""

    @abstractmethod
    def process_edge(self, edge: Edge) -> None:
        """Handle a newly reached edge."""

    @abstractmethod
    def process_node(self, node: Hashable) -> None:
        """Handle a newly reached node."""


# ---------------------------------------------------------------------------
# Stock processors
# ---------------------------------------------------------------------------
class NodeCounter(EventProcessor):
    """Counts every node reached.  Used by ImmutableGraph.is_connected()."""

    def __init__(self):
        self.num_nodes_found: int = 0

    def process_edge(self, edge: Edge) -> None:
        raise NotImplementedError("NodeCounter only counts nodes.")

    def process_node(self, node: Hashable) -> None:
        self.num_nodes_found += 1


class NodeRecorder(EventProcessor):
    """
    Records events in the order they arrive.

    Attributes:
        visited : Nodes in discovery order.
        edges   : Edges in the order they were reached.
    """

    def __init__(self):
        self.visited: List[Hashable] = []
        self.edges:   List[Edge]     = []

    def process_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def process_node(self, node: Hashable) -> None:
        self.visited.append(node)

    def __len__(self) -> int:
        return len(self.visited)
