import random

import pytest

from implication_graph import FrozenGraph, ImplicationGraph
from tarjan import TarjanSccFinder, find_sccs


def reachable(digraph, start):
    seen = {start}
    todo = [start]
    while todo:
        v = todo.pop()
        for to in digraph[v]:
            if to not in seen:
                seen.add(to)
                todo.append(to)
    return seen


def random_graph(seed, num_vars=8, num_clauses=14):
    rng = random.Random(seed)
    graph = ImplicationGraph()
    for _ in range(num_clauses):
        a = rng.randint(1, num_vars) * rng.choice([1, -1])
        b = rng.randint(1, num_vars) * rng.choice([1, -1])
        graph.insert_clause(a, b)
    return graph


def test_isolated_vertex_is_singleton():
    assert find_sccs({1: set()}) == [[1]]


def test_cycle_is_one_component():
    sccs = find_sccs({1: {2}, 2: {3}, 3: {1}})
    assert len(sccs) == 1
    assert sorted(sccs[0]) == [1, 2, 3]


def test_chain_closes_sink_first():
    sccs = find_sccs({1: {2}, 2: {3}, 3: set()})
    assert sccs == [[3], [2], [1]]


def test_cross_edge_into_closed_component_does_not_merge():
    # 3 closes before 4 is reached from 1; 4 -> 3 must not pull 4 into {3}
    digraph = {1: {2, 4}, 2: {3}, 3: set(), 4: {3}}
    sccs = find_sccs(digraph)
    assert sorted(map(sorted, sccs)) == [[1], [2], [3], [4]]


def test_missing_vertex_fails_fast():
    with pytest.raises(KeyError):
        find_sccs({1: {2}})


def test_memoized():
    graph = ImplicationGraph()
    graph.insert_clause(1, 2)
    finder = TarjanSccFinder(graph)
    first = finder.find_sccs()
    assert finder.find_sccs() is first


def test_accepts_builder_frozen_and_mapping():
    graph = ImplicationGraph()
    graph.insert_clause(1, -2)
    graph.insert_clause(2, 3)
    expected = find_sccs(graph)
    assert find_sccs(graph.freeze()) == expected
    assert find_sccs(graph.digraph) == expected


@pytest.mark.parametrize("seed", range(20))
def test_partition_covers_every_vertex_once(seed):
    graph = random_graph(seed)
    sccs = find_sccs(graph)
    members = [lit for scc in sccs for lit in scc]
    assert len(members) == len(set(members))
    assert set(members) == set(graph.digraph)


@pytest.mark.parametrize("seed", range(20))
def test_components_are_mutually_reachable_and_maximal(seed):
    graph = random_graph(seed)
    digraph = graph.digraph
    reach = {v: reachable(digraph, v) for v in digraph}
    component_of = {lit: i for i, scc in enumerate(find_sccs(graph)) for lit in scc}

    for u in digraph:
        for v in digraph:
            mutual = v in reach[u] and u in reach[v]
            assert mutual == (component_of[u] == component_of[v])


@pytest.mark.parametrize("seed", range(20))
def test_components_emitted_in_reverse_topological_order(seed):
    graph = random_graph(seed)
    component_of = {lit: i for i, scc in enumerate(find_sccs(graph)) for lit in scc}
    for u, targets in graph.digraph.items():
        for v in targets:
            assert component_of[v] <= component_of[u]


def test_long_chain_does_not_recurse():
    n = 20000
    graph = ImplicationGraph()
    for i in range(1, n):
        graph.insert_clause(-i, i + 1)
    sccs = find_sccs(graph)
    assert len(sccs) == 2 * n
    assert all(len(scc) == 1 for scc in sccs)


def test_long_cycle_is_single_component():
    n = 20000
    digraph = {i: {i % n + 1} for i in range(1, n + 1)}
    sccs = find_sccs(digraph)
    assert len(sccs) == 1
    assert len(sccs[0]) == n


def test_frozen_graph_ids_follow_key_order():
    frozen = FrozenGraph({5: {-3}, -3: set(), 7: {5}})
    assert [frozen.literal(i) for i in range(len(frozen))] == [5, -3, 7]
    assert frozen.adjacency == [[1], [], [0]]
    assert frozen.num_edges == 2


def test_finder_keeps_only_graph_and_result():
    finder = TarjanSccFinder({1: {2}, 2: {1}, 3: set()})
    finder.find_sccs()
    assert set(vars(finder)) == {"graph", "scc_pop_order"}
