"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields each node exactly once, in depth-first discovery order.

The stack holds one *iterator* per ancestry level, not plain nodes.  A
plain node isn't enough because we'd lose track of its remaining
siblings, and a list of children isn't enough because we'd lose track
of which sibling we're on.  An iterator remembers both, so when a
subtree is exhausted we resume the parent exactly where we left off.
"""

import logging
from typing import Generator, Hashable, Iterable, Iterator, List, Mapping, Set

logger = logging.getLogger(__name__)

# sentinel, since None may be a legitimate element of a foreign mapping
_EXHAUSTED = object()


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    adjacency: Mapping[Hashable, Iterable[Hashable]],
    root: Hashable,
) -> Generator[Hashable, None, None]:
    """
    Iterative DFS over `adjacency` starting at `root`.

    `root` must be a key of `adjacency`; a missing root surfaces as the
    mapping's KeyError.  Child order follows each adjacency entry's
    iteration order, so insertion-ordered adjacency gives a reproducible
    traversal.
    """

    visited: Set[Hashable] = {root}
    ancestry: List[Iterator[Hashable]] = [iter(adjacency[root])]
    yield root

    while ancestry:
        # peek, don't pop: the parent may still have unvisited siblings
        children = ancestry[-1]
        child = next(children, _EXHAUSTED)
        if child is _EXHAUSTED:
            ancestry.pop()
            continue
        if child in visited:
            continue

        visited.add(child)
        yield child
        ancestry.append(iter(adjacency[child]))

    logger.debug("DFS from %r discovered %d node(s)", root, len(visited))
