import pytest

from algolab.graph_paths import (
    dag_shortest_paths,
    dijkstra,
    topo_sort_dfs,
    topo_sort_kahn,
    unit_shortest_paths,
)

WEIGHTED = [
    [(1, 4), (2, 1)],
    [(3, 1)],
    [(1, 2), (3, 5)],
    [(4, 3)],
    [],
    [(0, 1)],
]

DAG = [
    [1, 2],
    [3],
    [3, 4],
    [5],
    [5],
    [],
    [4],
]


def _is_topological(adjacency, order):
    position = {vertex: index for index, vertex in enumerate(order)}
    return all(
        position[u] < position[v]
        for u, neighbours in enumerate(adjacency)
        for v in neighbours
    )


def _respects_edges(adjacency, dist):
    for u, edges in enumerate(adjacency):
        if dist[u] == -1:
            continue
        for v, w in edges:
            if dist[v] == -1 or dist[v] > dist[u] + w:
                return False
    return True


def test_dijkstra_example():
    graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
    assert dijkstra(graph, 0) == [0, 3, 1]


def test_dijkstra_source_zero_and_unreachable():
    dist = dijkstra(WEIGHTED, 0)
    assert dist[0] == 0
    assert dist[5] == -1
    assert _respects_edges(WEIGHTED, dist)


def test_dijkstra_matches_bfs_on_unit_weights():
    unweighted = [[1, 2], [3], [3, 4], [5], [5], [], [0]]
    weighted = [[(v, 1) for v in neighbours] for neighbours in unweighted]
    for source in range(len(unweighted)):
        assert dijkstra(weighted, source) == unit_shortest_paths(unweighted, source)


def test_dijkstra_rejects_bad_source():
    with pytest.raises(ValueError):
        dijkstra(WEIGHTED, len(WEIGHTED))


def test_topo_orders_are_valid():
    for order in (topo_sort_kahn(DAG), topo_sort_dfs(DAG)):
        assert sorted(order) == list(range(len(DAG)))
        assert _is_topological(DAG, order)


def test_topo_kahn_leaves_out_cycle():
    cyclic = [[1], [2], [1], []]
    order = topo_sort_kahn(cyclic)
    assert 1 not in order
    assert 2 not in order
    assert sorted(order) == [0, 3]


def test_topo_dfs_lists_every_vertex_on_cycle():
    cyclic = [[1], [2], [0]]
    assert sorted(topo_sort_dfs(cyclic)) == [0, 1, 2]


def test_topo_dfs_handles_long_chain():
    n = 4000
    chain = [[i + 1] for i in range(n - 1)] + [[]]
    assert topo_sort_dfs(chain) == list(range(n))


def test_dag_shortest_paths_with_negative_edge():
    graph = [[(1, 5), (2, 2)], [], [(1, -4)]]
    assert dag_shortest_paths(graph, 0) == [0, -2, 2]


def test_dag_shortest_paths_matches_dijkstra():
    weighted = [[(v, (u + v) % 4 + 1) for v in neighbours] for u, neighbours in enumerate(DAG)]
    for source in range(len(DAG)):
        assert dag_shortest_paths(weighted, source) == dijkstra(weighted, source)


def test_dag_shortest_paths_unreachable_and_bad_source():
    weighted = [[(1, 3)], [], []]
    assert dag_shortest_paths(weighted, 0)[2] == -1
    with pytest.raises(ValueError):
        dag_shortest_paths(weighted, -1)


def test_unit_shortest_paths_directed():
    graph = [[1], [2], [], [0]]
    dist = unit_shortest_paths(graph, 0)
    assert dist[0] == 0
    assert dist[3] == -1
    assert dist[2] == dist[1] + 1


def test_unit_shortest_paths_edge_invariant():
    dist = unit_shortest_paths(DAG, 0)
    for u, neighbours in enumerate(DAG):
        if dist[u] == -1:
            continue
        for v in neighbours:
            assert dist[v] != -1
            assert dist[v] <= dist[u] + 1


def test_unit_shortest_paths_bad_source():
    with pytest.raises(ValueError):
        unit_shortest_paths([[]], 1)