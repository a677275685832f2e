from algodrills.graph_search import (
    adjacency_bfs,
    adjacency_dfs,
    bfs_order,
    dfs_order,
    infected_count,
    return_distances,
)

SAMPLE_GRAPH = [
    [2, 4],
    [2, 3, 4],
    [0, 1, 4],
    [1, 4],
    [0, 1, 2, 3],
]

NETWORK_EDGES = [(1, 2), (2, 3), (1, 5), (5, 2), (5, 6), (4, 7)]


def _chain(length):
    return [(node, node + 1) for node in range(1, length)]


def test_adjacency_dfs_sample():
    assert adjacency_dfs(SAMPLE_GRAPH, 0) == [0, 2, 1, 3, 4]


def test_adjacency_bfs_sample():
    assert adjacency_bfs(SAMPLE_GRAPH, 0) == [0, 2, 4, 1, 3]


def test_adjacency_orders_cover_same_nodes():
    assert sorted(adjacency_dfs(SAMPLE_GRAPH, 3)) == sorted(adjacency_bfs(SAMPLE_GRAPH, 3))
    assert sorted(adjacency_dfs(SAMPLE_GRAPH, 3)) == list(range(len(SAMPLE_GRAPH)))


def test_dfs_on_chain_follows_chain():
    assert dfs_order(6, _chain(6), 1) == list(range(1, 7))


def test_bfs_on_chain_follows_chain():
    assert bfs_order(6, _chain(6), 1) == list(range(1, 7))


def test_bfs_on_star_visits_leaves_in_order():
    edges = [(1, 5), (1, 3), (1, 4), (1, 2)]
    assert bfs_order(5, edges, 1) == [1, 2, 3, 4, 5]


def test_dfs_goes_deep_before_wide():
    edges = [(1, 2), (1, 3), (2, 4)]
    order = dfs_order(4, edges, 1)
    assert order.index(4) < order.index(3)
    assert bfs_order(4, edges, 1).index(3) < bfs_order(4, edges, 1).index(4)


def test_nodes_beyond_count_are_ignored():
    assert dfs_order(2, [(1, 2), (2, 3)], 1) == [1, 2]
    assert bfs_order(2, [(1, 2), (2, 3)], 1) == [1, 2]


def test_isolated_start():
    assert dfs_order(3, [(2, 3)], 1) == [1]


def test_long_chain_does_not_overflow_stack():
    length = 5000
    assert dfs_order(length, _chain(length), 1)[-1] == length


def test_infected_count_matches_dfs():
    assert infected_count(7, NETWORK_EDGES) == len(dfs_order(7, NETWORK_EDGES, 1)) - 1


def test_infected_count_chain():
    assert infected_count(9, _chain(9)) == 8


def test_infected_count_no_links():
    assert infected_count(5, []) == 0


def test_return_distances_example():
    roads = [[1, 2], [1, 4], [2, 4], [2, 5], [4, 5]]
    assert return_distances(5, roads, [1, 3, 5], 5) == [2, -1, 0]


def test_return_distances_on_chain():
    roads = [[a, b] for a, b in _chain(7)]
    sources = [1, 4, 7, 3]
    destination = 5
    assert return_distances(7, roads, sources, destination) == [
        abs(source - destination) for source in sources
    ]


def test_return_distances_keeps_source_order_and_repeats():
    roads = [[1, 2], [2, 3]]
    first = return_distances(3, roads, [3, 1, 3], 2)
    assert first[0] == first[2]
    assert len(first) == 3