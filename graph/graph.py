"""
graph.py — Immutable Simple Graph
=================================
Read-only snapshot produced by GraphBuilder.build().

Responsibilities:
  1. Structural queries            (num_vertices, num_edges, is_connected)
  2. Adjacency queries             (neighbours, degree, edges, …)
  3. Traversal entry point         (dfs → EventProcessor)

Design decisions:
  - The constructor copies the adjacency it is given into a private dict
    of tuples and only ever exposes it through a MappingProxyType.  No
    list, set or dict that the graph reads from is reachable by callers,
    so nothing can mutate a graph after construction.
  - Tuples keep each node's neighbour order, which is the order DFS
    visits children in.
  - No locks.  A graph is never written after __init__, so concurrent
    readers are safe.
"""

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, Iterable, Iterator, Mapping, Tuple

from algorithms.dfs import dfs as _dfs
from graph.base import SimpleGraph
from graph.edge import Edge
from graph.events import EventProcessor, NodeCounter

logger = logging.getLogger(__name__)


class ImmutableGraph(SimpleGraph):
    """
    Obtain graphs from GraphBuilder.build().  The constructor trusts its
    input to be symmetric and loop-free and does not re-check it.

    Attributes:
        _adj : read-only {node: (neighbour, …)} in insertion order.
    """

    def __init__(self, adjacency: Mapping[Hashable, Iterable[Hashable]]):
        self._adj: Mapping[Hashable, Tuple[Hashable, ...]] = MappingProxyType(
            {node: tuple(nbrs) for node, nbrs in adjacency.items()}
        )

    # ==================================================================
    # STRUCTURAL QUERIES
    # ==================================================================
    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        endpoints = sum(len(nbrs) for nbrs in self._adj.values())
        # every edge is seen once from each end
        assert endpoints % 2 == 0, f"adjacency is not symmetric ({endpoints} endpoints)"
        return endpoints // 2

    def is_connected(self) -> bool:
        """
        DFS from an arbitrary node and check that it reaches all of them.

        An empty graph is not connected, and neither is a single node.
        """
        if len(self._adj) <= 1:
            return False
        root = next(iter(self._adj))
        counter = NodeCounter()
        self.dfs(root, counter)
        logger.debug("Connectivity check reached %d of %d node(s)", counter.num_nodes_found, len(self._adj))
        return counter.num_nodes_found == len(self._adj)

    # ==================================================================
    # TRAVERSAL
    # ==================================================================
    def dfs(self, root: Hashable, event_processor: EventProcessor) -> None:
        """
        Fire `process_node` once per node reachable from `root`, in
        depth-first discovery order.  `process_edge` is not fired.

        `root` must be in the graph.
        """
        for node in _dfs(self._adj, root):
            event_processor.process_node(node)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def nodes(self) -> Tuple[Hashable, ...]:
        return tuple(self._adj)

    def neighbours(self, node: Hashable) -> Tuple[Hashable, ...]:
        return self._adj[node]

    def degree(self, node: Hashable) -> int:
        return len(self._adj[node])

    def edges(self) -> Iterator[Edge]:
        """Every edge once, ordered by first endpoint then neighbour order."""
        seen = set()
        for node, nbrs in self._adj.items():
            seen.add(node)
            for nbr in nbrs:
                if nbr not in seen:
                    yield Edge(node, nbr)

    def node_links(self) -> Dict[Hashable, FrozenSet[Hashable]]:
        """Detached {node: frozenset(neighbours)} copy, mainly for assertions."""
        return {node: frozenset(nbrs) for node, nbrs in self._adj.items()}

    # ==================================================================
    # Dunder
    # ==================================================================
    def __contains__(self, node) -> bool:
        return node in self._adj

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"ImmutableGraph(nodes={self.num_vertices()}, edges={self.num_edges()})"
