"""Tests for treeflip.oeis.sequences."""
from treeflip.oeis.sequences import (
    A000055,
    A000081,
    TABLE_MAX_N,
    count_rooted_trees,
    count_unrooted_trees,
    rooted_tree_count,
    unrooted_tree_count,
)


def test_table_values():
    assert A000081[1:] == (1, 1, 2, 4, 9, 20, 48, 115, 286, 719, 1842)
    assert A000055[1:] == (1, 1, 1, 2, 3, 6, 11, 23, 47, 106, 235)
    assert TABLE_MAX_N == 11


def test_lookup_out_of_range():
    assert rooted_tree_count(-1) == 0
    assert rooted_tree_count(12) == 0
    assert unrooted_tree_count(-1) == 0
    assert unrooted_tree_count(12) == 0
    assert rooted_tree_count(0) == 0
    assert unrooted_tree_count(0) == 1


def test_recurrences_reproduce_tables():
    for n in range(TABLE_MAX_N + 1):
        assert count_rooted_trees(n) == A000081[n]
        assert count_unrooted_trees(n) == A000055[n]


def test_recurrences_beyond_table():
    # A000081(12..14), A000055(12..14)
    assert [count_rooted_trees(n) for n in (12, 13, 14)] == [4766, 12486, 32973]
    assert [count_unrooted_trees(n) for n in (12, 13, 14)] == [551, 1301, 3159]
