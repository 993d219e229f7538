"""Abstract contracts for undirected simple graphs and their builders."""

from abc import ABC, abstractmethod
from typing import Hashable

from graph.events import EventProcessor


class SimpleGraph(ABC):
    """
    Standard operations of an undirected, simple graph.  *Simple* means no
    loops (an edge from a node to itself) and no multi-edges (more than
    one edge between the same pair of nodes).
    """

    @abstractmethod
    def dfs(self, root: Hashable, event_processor: EventProcessor) -> None:
        """Depth-first traversal from `root`, firing events at `event_processor`."""

    @abstractmethod
    def num_vertices(self) -> int:
        """Return the number of vertices in the graph."""

    @abstractmethod
    def num_edges(self) -> int:
        """Return the number of edges in the graph."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Return True if every node is reachable from every other node."""


class Builder(ABC):
    """
    Staging area for a SimpleGraph.  Every mutator returns the builder
    itself so calls can be chained, and raises ValueError on bad input
    without touching the graph being built.
    """

    @abstractmethod
    def add_node(self, node: Hashable) -> "Builder":
        """Add an unconnected node.  Fails on None or a node already present."""

    @abstractmethod
    def connect(self, left: Hashable, right: Hashable) -> "Builder":
        """
        Connect `left` and `right`, adding either node if it isn't present yet.
        Fails on None, on left == right, or if the two are already connected.
        """

    @abstractmethod
    def delete(self, node: Hashable) -> "Builder":
        """Remove `node` and every edge touching it.  Fails on None or an absent node."""

    @abstractmethod
    def build(self) -> SimpleGraph:
        """Snapshot the current state.  The builder stays usable afterwards."""
