import pytest

from digraphs import Graph


def graph_of(nodes, edges, printer=str):
    graph = Graph(printer)
    graph.add_nodes(nodes)
    graph.add_edges(edges)
    return graph


@pytest.fixture
def cycle():
    return graph_of("ABC", [("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def path():
    return graph_of("ABC", [("A", "B"), ("B", "C")])


@pytest.fixture
def mixed():
    return graph_of(
        [1, 2, 3, 4, 5], [(1, 2), (2, 1), (2, 3), (3, 4), (4, 5), (5, 4)]
    )


@pytest.fixture
def empty():
    return Graph(str)


@pytest.fixture(params=["cycle", "path", "mixed", "empty"])
def any_graph(request):
    return request.getfixturevalue(request.param)
