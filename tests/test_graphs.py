import pytest

from dsakit.graphs import (
    bfs_distances,
    bfs_levels,
    bfs_order,
    build_undirected,
    count_strongly_connected,
    dfs,
    eventual_safe_nodes,
    main,
    shortest_path,
)

EDGES = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (5, 6)]


@pytest.fixture
def graph():
    return build_undirected(7, EDGES)


def test_build_undirected_is_symmetric(graph):
    for u, v in EDGES:
        assert v in graph[u]
        assert u in graph[v]
    assert sum(len(children) for children in graph) == 2 * len(EDGES)


def test_build_undirected_rejects_bad_node():
    with pytest.raises(ValueError):
        build_undirected(2, [(0, 2)])


def test_bfs_distances_path_graph():
    adj = build_undirected(5, [(i, i + 1) for i in range(4)])
    assert bfs_distances(adj, 0) == list(range(5))


def test_bfs_distances_invariants(graph):
    dist = bfs_distances(graph, 0)
    assert dist[0] == 0
    assert dist[5] is None and dist[6] is None
    for u, v in EDGES:
        if dist[u] is not None:
            assert abs(dist[u] - dist[v]) <= 1


def test_bfs_levels_match_distances(graph):
    dist = bfs_distances(graph, 0)
    for depth, level in enumerate(bfs_levels(graph, 0)):
        assert all(dist[node] == depth for node in level)


def test_bfs_order_flattens_levels(graph):
    levels = bfs_levels(graph, 0)
    assert bfs_order(graph, 0) == [node for level in levels for node in level]
    assert bfs_order(graph, 0)[0] == 0


def test_bfs_bad_source(graph):
    with pytest.raises(IndexError):
        bfs_distances(graph, 7)


def test_shortest_path_is_valid_and_minimal(graph):
    path = shortest_path(graph, 0, 4)
    assert path[0] == 0 and path[-1] == 4
    assert len(path) == bfs_distances(graph, 0)[4] + 1
    for a, b in zip(path, path[1:]):
        assert b in graph[a]


def test_shortest_path_unreachable(graph):
    assert shortest_path(graph, 0, 6) is None


def test_shortest_path_to_self(graph):
    assert shortest_path(graph, 3, 3) == [3]


def test_dfs_visits_same_nodes_as_bfs(graph):
    order = dfs(graph, 0)
    assert order[0] == 0
    assert sorted(order) == sorted(bfs_order(graph, 0))
    assert len(set(order)) == len(order)


def test_dfs_goes_deep_first():
    adj = build_undirected(4, [(0, 1), (1, 2), (0, 3)])
    assert dfs(adj, 0) == [0, 1, 2, 3]


def test_eventual_safe_nodes_example():
    graph = [[1, 2], [2, 3], [5], [0], [5], [], []]
    assert eventual_safe_nodes(graph) == [2, 4, 5, 6]


def test_eventual_safe_nodes_acyclic_all_safe():
    graph = [[1, 2], [2], [], [0]]
    assert eventual_safe_nodes(graph) == [0, 1, 2, 3]


def test_eventual_safe_nodes_self_loop():
    assert eventual_safe_nodes([[0], []]) == [1]


def test_count_strongly_connected_example():
    adj = [[2, 3], [0], [1], [4], []]
    assert count_strongly_connected(adj) == 3


def test_count_strongly_connected_dag_and_cycle():
    assert count_strongly_connected([[1], [2], []]) == len([[1], [2], []])
    assert count_strongly_connected([[1], [2], [0]]) == 1


def test_main_prints_path(tmp_path, capsys):
    source = tmp_path / "graph.txt"
    source.write_text("4\n0 1\n1 2\n2 3\n0 3\n")
    assert main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    path = shortest_path(build_undirected(4, [(0, 1), (1, 2), (2, 3), (0, 3)]), 0, 3)
    assert lines[0] == str(len(path))
    assert lines[1].split() == [str(node + 1) for node in path]


def test_main_unreachable(tmp_path, capsys):
    source = tmp_path / "graph.txt"
    source.write_text("3\n0 1\n1 0\n0 1\n")
    main([str(source)])
    out = capsys.readouterr().out
    assert out.strip() == "IMPOSSIBLE TO REACH n-1 node since no path available"


def test_main_rejects_short_input(tmp_path):
    source = tmp_path / "graph.txt"
    source.write_text("3\n0 1\n")
    with pytest.raises(SystemExit):
        main([str(source)])