"""Unit tests for Edge and the stock event processors."""

from dataclasses import dataclass

import pytest

from graph import Edge, EventProcessor, GraphBuilder, NodeCounter, NodeRecorder


@dataclass(frozen=True)
class DummyNode:
    """Minimal caller-defined node: hashable, compared by id only."""

    id: str


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
def test_edge_is_undirected():
    assert Edge("a", "b") == Edge("b", "a")
    assert hash(Edge("a", "b")) == hash(Edge("b", "a"))
    assert Edge("a", "b") != Edge("a", "c")


def test_edge_helpers():
    edge = Edge("a", "b")
    assert edge.nodes == ("a", "b")
    assert edge.connects("b", "a")
    assert not edge.connects("a", "c")
    assert edge.other_end("a") == "b"
    assert edge.other_end("b") == "a"
    assert edge.other_end("c") is None


def test_edge_rejects_loop_and_none():
    with pytest.raises(ValueError):
        Edge("a", "a")
    with pytest.raises(ValueError):
        Edge(None, "a")
    nan = float("nan")
    with pytest.raises(ValueError):
        Edge(nan, nan)


def test_edge_repr():
    assert repr(Edge("a", "b")) == "Edge('a' ↔ 'b')"


# ---------------------------------------------------------------------------
# Event processors
# ---------------------------------------------------------------------------
def test_event_processor_is_abstract():
    with pytest.raises(TypeError):
        EventProcessor()


def test_node_counter_counts_nodes_and_rejects_edges():
    counter = NodeCounter()
    counter.process_node("a")
    counter.process_node("b")
    assert counter.num_nodes_found == 2
    with pytest.raises(NotImplementedError):
        counter.process_edge(Edge("a", "b"))


def test_node_recorder_records_in_order():
    recorder = NodeRecorder()
    recorder.process_node("b")
    recorder.process_node("a")
    recorder.process_edge(Edge("a", "b"))
    assert recorder.visited == ["b", "a"]
    assert recorder.edges == [Edge("a", "b")]
    assert len(recorder) == 2


def test_custom_processor_receives_caller_nodes():
    class Collector(EventProcessor):
        def __init__(self):
            self.ids = []

        def process_edge(self, edge):
            pass

        def process_node(self, node):
            self.ids.append(node.id)

    a, b, c = DummyNode("A"), DummyNode("B"), DummyNode("C")
    graph = GraphBuilder().connect(a, b).connect(b, c).build()
    collector = Collector()
    graph.dfs(a, collector)
    assert collector.ids == ["A", "B", "C"]


def test_equal_caller_nodes_are_the_same_vertex():
    b = GraphBuilder().add_node(DummyNode("A"))
    with pytest.raises(ValueError):
        b.add_node(DummyNode("A"))
    with pytest.raises(ValueError):
        b.connect(DummyNode("A"), DummyNode("A"))
