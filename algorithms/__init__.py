"""
algorithms/
-----------
Traversal generators.  They work on any `{node: iterable_of_neighbours}`
mapping and know nothing about builders or event processors.

    from algorithms import dfs
"""

from algorithms.dfs import dfs

__all__ = [
    "dfs",
]
