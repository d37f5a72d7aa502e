import pytest

from algokit.graphs import Edge, Graph, kruskal, spanning_tree_report


@pytest.fixture
def sample_graph():
    graph = Graph(6)
    for src, dest in [(0, 1), (0, 2), (1, 2), (1, 4), (1, 3), (2, 4), (3, 4)]:
        graph.add_edge(src, dest)
    return graph


def test_bfs_order_of_sample(sample_graph):
    assert sample_graph.bfs(0) == [0, 2, 1, 4, 3]


def test_bfs_visits_component_once(sample_graph):
    order = sample_graph.bfs(3)
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert order[0] == 3
    assert len(order) == len(set(order))


def test_bfs_isolated_vertex(sample_graph):
    assert sample_graph.bfs(5) == [5]


def test_neighbours_most_recent_first():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.neighbours(0) == [2, 1]
    assert graph.neighbours(1) == [0]


def test_invalid_vertices(sample_graph):
    with pytest.raises(ValueError):
        sample_graph.add_edge(0, 6)
    with pytest.raises(ValueError):
        sample_graph.bfs(-1)


def test_kruskal_triangle():
    matrix = [[0, 1, 3], [1, 0, 2], [3, 2, 0]]
    assert kruskal(matrix) == [Edge(1, 0, 1), Edge(2, 1, 2)]


def test_kruskal_connected_graph_has_n_minus_one_edges():
    matrix = [
        [0, 4, 0, 0, 8],
        [4, 0, 8, 0, 11],
        [0, 8, 0, 7, 0],
        [0, 0, 7, 0, 2],
        [8, 11, 0, 2, 0],
    ]
    tree = kruskal(matrix)
    assert len(tree) == len(matrix) - 1
    weights = [edge.w for edge in tree]
    assert weights == sorted(weights)
    touched = {edge.u for edge in tree} | {edge.v for edge in tree}
    assert touched == set(range(len(matrix)))


def test_kruskal_disconnected_graph():
    matrix = [[0, 5, 0, 0], [5, 0, 0, 0], [0, 0, 0, 6], [0, 0, 6, 0]]
    assert kruskal(matrix) == [Edge(1, 0, 5), Edge(3, 2, 6)]


def test_kruskal_rejects_non_square():
    with pytest.raises(ValueError):
        kruskal([[0, 1], [1]])


def test_report_format():
    report = spanning_tree_report([Edge(1, 0, 1), Edge(2, 1, 2)])
    assert report == "\nB - A : 1\nC - B : 2\nSpanning tree cost: 3"


def test_report_of_empty_tree():
    assert spanning_tree_report([]) == "\nSpanning tree cost: 0"