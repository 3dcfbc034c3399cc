import pytest

from drillbook.graphs import (
    count_connected_components,
    has_cycle_directed,
    has_cycle_undirected,
    shortest_path_length,
    subtree_sizes,
    tree_depths,
    tree_diameter,
)


def _path(n):
    return [(i, i + 1) for i in range(1, n)]


def _star(n):
    return [(1, i) for i in range(2, n + 1)]


SAMPLE_TREE = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (6, 7)]


def test_components_without_edges_equal_vertex_count():
    assert count_connected_components(6, []) == 6


def test_components_of_connected_graph():
    assert count_connected_components(5, _path(5)) == 1


def test_components_never_grow_when_edges_added():
    base = [(1, 2), (4, 5)]
    before = count_connected_components(6, base)
    after = count_connected_components(6, base + [(2, 4)])
    assert after == before - 1


def test_components_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        count_connected_components(3, [(1, 4)])


def test_undirected_cycle_triangle():
    assert has_cycle_undirected(3, [(1, 2), (2, 3), (3, 1)]) is True


def test_undirected_no_cycle_in_path():
    assert has_cycle_undirected(5, _path(5)) is False


def test_undirected_self_loop_is_cycle():
    assert has_cycle_undirected(2, [(1, 2), (2, 2)]) is True


def test_undirected_only_component_of_vertex_one():
    assert has_cycle_undirected(5, [(1, 2), (3, 4), (4, 5), (5, 3)]) is False


def test_directed_cycle():
    assert has_cycle_directed(3, [(1, 2), (2, 3), (3, 1)]) is True


def test_directed_acyclic():
    assert has_cycle_directed(4, [(1, 2), (1, 3), (2, 4), (3, 4)]) is False


def test_directed_cycle_not_reachable_from_first_vertex():
    assert has_cycle_directed(3, [(2, 3), (3, 2)]) is True


def test_directed_reverse_edge_only_makes_cycle_when_both_ways():
    assert has_cycle_directed(2, [(1, 2)]) is False
    assert has_cycle_directed(2, [(1, 2), (2, 1)]) is True


def test_shortest_path_matches_tree_depth_on_path():
    n = 6
    assert shortest_path_length(n, _path(n)) == tree_depths(n, _path(n))[-1]


def test_shortest_path_prefers_shortcut():
    edges = _path(5) + [(1, 5)]
    assert shortest_path_length(5, edges) == 1


def test_shortest_path_single_vertex():
    assert shortest_path_length(1, []) == 0


def test_shortest_path_unreachable():
    assert shortest_path_length(4, [(1, 2), (3, 4)]) is None


def test_diameter_of_star():
    assert tree_diameter(6, _star(6)) == 2


def test_diameter_of_path_equals_deepest_vertex():
    n = 7
    assert tree_diameter(n, _path(n)) == max(tree_depths(n, _path(n)))


def test_diameter_at_least_max_depth():
    assert tree_diameter(7, SAMPLE_TREE) >= max(tree_depths(7, SAMPLE_TREE))


def test_diameter_single_vertex():
    assert tree_diameter(1, []) == 0


def test_depths_of_star():
    depths = tree_depths(5, _star(5))
    assert depths[0] == 0
    assert set(depths[1:]) == {1}


def test_depths_children_one_deeper_than_parent():
    depths = tree_depths(7, SAMPLE_TREE)
    for parent, child in SAMPLE_TREE:
        assert depths[child - 1] == depths[parent - 1] + 1


def test_subtree_root_holds_whole_tree():
    assert subtree_sizes(7, SAMPLE_TREE)[0] == 7


def test_subtree_leaves_have_size_one():
    sizes = subtree_sizes(5, _star(5))
    assert set(sizes[1:]) == {1}


def test_subtree_sizes_sum_equals_ancestor_counts():
    sizes = subtree_sizes(7, SAMPLE_TREE)
    depths = tree_depths(7, SAMPLE_TREE)
    assert sum(sizes) == sum(depth + 1 for depth in depths)


def test_subtree_sizes_on_path_are_descending():
    n = 5
    sizes = subtree_sizes(n, _path(n))
    assert sizes == sorted(sizes, reverse=True)
    assert sizes[0] == n


@pytest.mark.parametrize(
    "func", [tree_diameter, tree_depths, subtree_sizes]
)
def test_tree_functions_reject_wrong_edge_count(func):
    with pytest.raises(ValueError):
        func(4, [(1, 2)])


@pytest.mark.parametrize(
    "func", [tree_diameter, tree_depths, subtree_sizes]
)
def test_tree_functions_reject_disconnected(func):
    with pytest.raises(ValueError):
        func(4, [(1, 2), (3, 4), (4, 3)])


@pytest.mark.parametrize(
    "func", [tree_diameter, tree_depths, subtree_sizes]
)
def test_tree_functions_reject_empty_tree(func):
    with pytest.raises(ValueError):
        func(0, [])