"""
graph/
-----
Core data layer.  Public API:

    from graph import GraphBuilder, ImmutableGraph
    from graph import Edge, EventProcessor, NodeCounter, NodeRecorder
"""

from graph.edge    import Edge
from graph.events  import EventProcessor, NodeCounter, NodeRecorder
from graph.base    import SimpleGraph, Builder
from graph.graph   import ImmutableGraph
from graph.builder import GraphBuilder

__all__ = [
    "Edge",
    "EventProcessor", "NodeCounter", "NodeRecorder",
    "SimpleGraph",    "Builder",
    "ImmutableGraph", "GraphBuilder",
]
