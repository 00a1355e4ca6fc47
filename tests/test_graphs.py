import pytest

from dsakit.graphs import DirectedGraph, UndirectedGraph, bfs_order, dfs_order


def _undirected(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


BFS_EDGES = [(0, 1), (1, 2), (1, 3), (0, 4)]
DFS_EDGES = [(0, 2), (2, 4), (0, 1), (0, 3)]


def test_bfs_source_example():
    assert bfs_order(_undirected(6, BFS_EDGES), 0) == [0, 1, 4, 2, 3]


def test_dfs_source_example():
    assert dfs_order(_undirected(5, DFS_EDGES), 0) == [0, 2, 4, 1, 3]


def test_mapping_and_list_adjacency_agree():
    as_list = _undirected(6, BFS_EDGES)
    as_map = {i: nbrs for i, nbrs in enumerate(as_list) if nbrs}
    assert bfs_order(as_map, 0) == bfs_order(as_list, 0)
    assert dfs_order(as_map, 0) == dfs_order(as_list, 0)


def test_traversals_cover_component_once():
    adjacency = _undirected(7, [(0, 1), (1, 2), (2, 0), (3, 4), (5, 6)])
    for order_fn in (bfs_order, dfs_order):
        order = order_fn(adjacency, 0)
        assert order[0] == 0
        assert sorted(order) == [0, 1, 2]
        assert len(set(order)) == len(order)


def test_dfs_handles_long_chain():
    n = 5000
    adjacency = _undirected(n, [(i, i + 1) for i in range(n - 1)])
    assert dfs_order(adjacency, 0) == list(range(n))


def test_graph_methods_match_functions():
    graph = UndirectedGraph(6)
    for u, v in BFS_EDGES:
        graph.add_edge(u, v)
    adjacency = _undirected(6, BFS_EDGES)
    assert graph.bfs(0) == bfs_order(adjacency, 0)
    assert graph.dfs(1) == dfs_order(adjacency, 1)


def test_directed_source_example_has_cycle():
    graph = DirectedGraph(4)
    for u, v in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(u, v)
    assert graph.is_cyclic() is True


def test_directed_acyclic():
    graph = DirectedGraph(4)
    for u, v in [(0, 1), (0, 2), (1, 2), (2, 3)]:
        graph.add_edge(u, v)
    assert graph.is_cyclic() is False


def test_directed_self_loop_is_cycle():
    graph = DirectedGraph(2)
    graph.add_edge(1, 1)
    assert graph.is_cyclic() is True


def test_directed_diamond_is_not_cycle():
    graph = DirectedGraph(4)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3)]:
        graph.add_edge(u, v)
    assert graph.is_cyclic() is False


def test_undirected_source_examples():
    g1 = UndirectedGraph(5)
    for u, v in [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]:
        g1.add_edge(u, v)
    assert g1.is_cyclic() is True

    g2 = UndirectedGraph(3)
    for u, v in [(0, 1), (1, 2)]:
        g2.add_edge(u, v)
    assert g2.is_cyclic() is False


def test_undirected_cycle_in_second_component():
    graph = UndirectedGraph(6)
    for u, v in [(0, 1), (2, 3), (3, 4), (4, 2)]:
        graph.add_edge(u, v)
    assert graph.is_cyclic() is True


def test_empty_graphs_have_no_cycle():
    assert DirectedGraph(0).is_cyclic() is False
    assert UndirectedGraph(3).is_cyclic() is False


def test_add_edge_out_of_range():
    with pytest.raises(ValueError):
        DirectedGraph(2).add_edge(0, 2)
    with pytest.raises(ValueError):
        UndirectedGraph(2).add_edge(-1, 0)


def test_traversal_start_out_of_range():
    with pytest.raises(ValueError):
        UndirectedGraph(3).bfs(3)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        DirectedGraph(-1)