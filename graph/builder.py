"""
builder.py — Mutable Graph Builder
==================================
The only place a simple graph can be changed.  Call build() to take an
ImmutableGraph snapshot; the builder stays usable afterwards and later
edits never leak into snapshots already taken.

Design decisions:
  - Adjacency is `{node: {neighbour: None}}`.  A dict-of-dicts is an
    insertion-ordered set, which keeps DFS order reproducible.
  - Every mutator validates first and mutates second, so a ValueError
    always leaves the builder exactly as it was.
  - Mutators return `self` for chaining:
        GraphBuilder().connect("a", "b").connect("b", "c").build()
"""

import logging
from typing import Dict, Hashable, Set

from graph.base import Builder
from graph.graph import ImmutableGraph

logger = logging.getLogger(__name__)


class GraphBuilder(Builder):
    """
    Attributes:
        _adj : {node: {neighbour: None}}, kept symmetric and loop-free.
    """

    def __init__(self):
        self._adj: Dict[Hashable, Dict[Hashable, None]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Hashable) -> "GraphBuilder":
        if node is None:
            raise ValueError("Can't add None node.")
        if node in self._adj:
            raise ValueError(f"Won't add duplicate node. node='{node}'.")
        self._adj[node] = {}
        logger.debug("Added node %r", node)
        return self

    def delete(self, node: Hashable) -> "GraphBuilder":
        if node is None:
            raise ValueError("Can't delete None node.")
        if node not in self._adj:
            raise ValueError(f"Can't delete node that is not already in graph. node='{node}'.")
        neighbours = self._adj.pop(node)
        # symmetry means only the deleted node's neighbours can point back at it
        for nbr in neighbours:
            del self._adj[nbr][node]
        logger.debug("Deleted node %r and %d edge(s)", node, len(neighbours))
        return self

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def connect(self, left: Hashable, right: Hashable) -> "GraphBuilder":
        if left is None:
            raise ValueError("Left node is None!")
        if right is None:
            raise ValueError("Right node is None!")
        if left is right or left == right:
            raise ValueError(
                f"Simple graphs can't connect nodes with themselves. left='{left}', right='{right}'."
            )
        if self.nodes_share_edge(left, right):
            raise ValueError(
                f"Node left is already connected to right. left='{left}', right='{right}'."
            )

        # missing endpoints are added only once every check has passed
        self._adj.setdefault(left, {})[right] = None
        self._adj.setdefault(right, {})[left] = None
        logger.debug("Connected %r ↔ %r", left, right)
        return self

    def nodes_share_edge(self, left: Hashable, right: Hashable) -> bool:
        # a node not yet in the graph can't share an edge with anything
        return right in self._adj.get(left, ())

    # ==================================================================
    # SNAPSHOT
    # ==================================================================
    def build(self) -> ImmutableGraph:
        graph = ImmutableGraph(self._adj)
        logger.debug("Built %r", graph)
        return graph

    # ==================================================================
    # INSPECTION
    # ==================================================================
    def node_links(self) -> Dict[Hashable, Set[Hashable]]:
        """Detached copy of the adjacency map; editing it changes nothing."""
        return {node: set(nbrs) for node, nbrs in self._adj.items()}

    def __contains__(self, node) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"GraphBuilder(nodes={len(self._adj)})"
