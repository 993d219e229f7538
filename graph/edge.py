"""
edge.py — Undirected Edge
=========================
Connects two nodes of a simple graph.  Used as the payload of edge-visit
events handed to an EventProcessor.

Design decisions:
  - `left` and `right` are the caller's node objects themselves.  The
    graph never inspects them beyond equality and hashing.
  - Edges are undirected: Edge(a, b) == Edge(b, a) and both hash equal.
  - No weight, no state, no meta.  Simple graphs have nothing to carry.
"""

from typing import Hashable, Optional, Tuple


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        left  : First endpoint, as passed to the constructor.
        right : Second endpoint.
    """

    __slots__ = ("left", "right")

    def __init__(self, left: Hashable, right: Hashable):
        if left is None or right is None:
            raise ValueError(f"Edge endpoints can't be None. left='{left}', right='{right}'.")
        if left is right or left == right:
            raise ValueError(f"Simple graph edges can't be loops. node='{left}'.")
        self.left:  Hashable = left
        self.right: Hashable = right

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def nodes(self) -> Tuple[Hashable, Hashable]:
        return (self.left, self.right)

    def connects(self, node_a: Hashable, node_b: Hashable) -> bool:
        """True if this edge links node_a ↔ node_b (either order)."""
        return (self.left == node_a and self.right == node_b) or (
            self.left == node_b and self.right == node_a
        )

    def other_end(self, node: Hashable) -> Optional[Hashable]:
        """Given one endpoint, return the other. None if node isn't an endpoint."""
        if node == self.left:
            return self.right
        if node == self.right:
            return self.left
        return None

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.left!r} ↔ {self.right!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.connects(other.left, other.right)

    def __hash__(self) -> int:
        return hash(frozenset((self.left, self.right)))
