"""Shared graph shapes for the test suite."""

import pytest

from graph import GraphBuilder


@pytest.fixture
def builder():
    return GraphBuilder()


@pytest.fixture
def wheel_builder():
    """Star of center → rim1/rim2/rim3, with the rim nodes connected in a ring."""
    b = GraphBuilder()
    b.add_node("center")
    b.connect("center", "rim1")
    b.connect("center", "rim2")
    b.connect("center", "rim3")
    b.connect("rim1", "rim2")
    b.connect("rim2", "rim3")
    b.connect("rim3", "rim1")
    return b


@pytest.fixture
def empty_graph():
    return GraphBuilder().build()


@pytest.fixture
def one_dot_graph():
    return GraphBuilder().add_node("center").build()


@pytest.fixture
def two_dots_graph():
    return GraphBuilder().add_node("left").add_node("right").build()


@pytest.fixture
def two_bars_graph():
    return GraphBuilder().connect("left", "right").connect("rim1", "rim2").build()


@pytest.fixture
def wheel_graph(wheel_builder):
    return wheel_builder.build()
