"""Assertion helpers shared by the test modules."""


def assert_symmetric(node_links):
    for node, nbrs in node_links.items():
        assert node not in nbrs
        for nbr in nbrs:
            assert node in node_links[nbr]
