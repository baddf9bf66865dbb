"""Tests for treeflip.trees.generator."""
import threading

import pytest

import treeflip.trees.generator as gen_mod
from treeflip.trees.generator import (
    TreeCache,
    default_cache,
    generate,
    integer_partitions,
    iter_subtree_choices,
)
from treeflip.trees.canonical import is_canonical, parse_canonical, canonical_form
from treeflip.oeis.sequences import A000081

# Shared across this module so the larger n are only built once.
_CACHE = TreeCache()


# --- partitions ---

def test_partitions_of_4():
    assert list(integer_partitions(4)) == [(4,), (3, 1), (2, 2), (2, 1, 1), (1, 1, 1, 1)]


def test_partitions_of_0():
    assert list(integer_partitions(0)) == [()]


def test_partitions_bounded_part():
    assert list(integer_partitions(4, 2)) == [(2, 2), (2, 1, 1), (1, 1, 1, 1)]


def test_partition_counts():
    # p(n) for n = 1..10
    expected = [1, 2, 3, 5, 7, 11, 15, 22, 30, 42]
    assert [len(list(integer_partitions(n))) for n in range(1, 11)] == expected


# --- subtree choices ---

def test_choices_equal_parts_are_multisets():
    pools = {3: generate(3, cache=_CACHE)}  # two trees of size 3
    picks = list(iter_subtree_choices((3, 3), pools))
    # multisets of size 2 from 2 items: {a,a}, {a,b}, {b,b}
    assert len(picks) == 3


def test_choices_mixed_parts():
    pools = {3: generate(3, cache=_CACHE), 1: generate(1, cache=_CACHE)}
    picks = list(iter_subtree_choices((3, 1, 1), pools))
    assert len(picks) == 2
    assert all(len(p) == 3 for p in picks)


# --- generate ---

def test_generate_nonpositive():
    assert generate(0) == []
    assert generate(-3) == []


def test_generate_small_scenarios():
    assert [t.canonical() for t in generate(1, cache=_CACHE)] == ["()"]
    assert [t.canonical() for t in generate(2, cache=_CACHE)] == ["(())"]
    assert [t.canonical() for t in generate(3, cache=_CACHE)] == ["((()))", "(()())"]
    assert {t.canonical() for t in generate(4, cache=_CACHE)} == {
        "(((())))",
        "((()()))",
        "((())())",
        "(()()())",
    }


@pytest.mark.parametrize("n", range(1, 12))
def test_generate_counts_match_a000081(n):
    assert len(generate(n, cache=_CACHE)) == A000081[n]


@pytest.mark.parametrize("n", range(1, 10))
def test_generated_trees_are_well_formed(n):
    trees = generate(n, cache=_CACHE)
    forms = [t.canonical() for t in trees]
    # strict dedup
    assert len(set(forms)) == len(forms)
    for t, form in zip(trees, forms):
        assert t.node_count() == n
        assert is_canonical(form)
        # fixed point through the parser
        assert canonical_form(parse_canonical(form)) == form
        # node ids are 0..n-1 in pre-order
        assert [v.id for v in t.all_nodes()] == list(range(n))


def test_generate_memoizes_per_n():
    cache = TreeCache()
    first = generate(5, cache=cache)
    assert cache.sizes() == {1: 1, 2: 1, 3: 2, 4: 4, 5: 9}
    again = generate(5, cache=cache)
    assert first is not again
    assert all(a is b for a, b in zip(first, again))


def test_returned_list_does_not_alias_cache():
    cache = TreeCache()
    trees = generate(4, cache=cache)
    trees.clear()
    assert len(generate(4, cache=cache)) == 4


def test_cache_clear():
    cache = TreeCache()
    generate(3, cache=cache)
    assert 3 in cache
    assert len(cache) == 3
    cache.clear()
    assert 3 not in cache
    assert len(cache) == 0


def test_default_cache_used_when_omitted():
    generate(3)
    assert 3 in default_cache()


def test_generate_ceiling():
    with pytest.raises(ValueError):
        generate(6, max_nodes=5)
    assert len(generate(5, max_nodes=5, cache=_CACHE)) == 9


def test_generate_default_ceiling(monkeypatch):
    monkeypatch.setattr(gen_mod, "MAX_NODES", 4)
    with pytest.raises(ValueError):
        generate(5, cache=TreeCache())


def test_duplicate_candidate_is_fatal(monkeypatch):
    def doubled(partition, pools):
        pick = tuple(pools[p][0] for p in partition)
        return iter([pick, pick])

    monkeypatch.setattr(gen_mod, "iter_subtree_choices", doubled)
    with pytest.raises(RuntimeError):
        generate(3, cache=TreeCache())


def test_concurrent_generate_shares_one_result():
    cache = TreeCache()
    results = []

    def worker():
        results.append(generate(7, cache=cache))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert len(results) == 4
    assert all(len(r) == 48 for r in results)
    # every caller sees the same cached tree objects
    assert all(a is b for r in results[1:] for a, b in zip(results[0], r))


# --- configuration ---

def test_env_int_parses_and_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("TREEFLIP_TEST_LIMIT", "9")
    assert gen_mod._env_int("TREEFLIP_TEST_LIMIT", 14) == 9
    monkeypatch.setenv("TREEFLIP_TEST_LIMIT", "  ")
    assert gen_mod._env_int("TREEFLIP_TEST_LIMIT", 14) == 14
    monkeypatch.delenv("TREEFLIP_TEST_LIMIT")
    assert gen_mod._env_int("TREEFLIP_TEST_LIMIT", 14) == 14


def test_env_int_rejects_garbage_without_raising(monkeypatch, capsys):
    monkeypatch.setenv("TREEFLIP_TEST_LIMIT", "lots")
    assert gen_mod._env_int("TREEFLIP_TEST_LIMIT", 14) == 14
    assert "TREEFLIP_TEST_LIMIT" in capsys.readouterr().err


def test_generator_module_is_reachable():
    # the package re-exports generate() without hiding the module itself
    assert hasattr(gen_mod, "MAX_NODES")
    assert hasattr(gen_mod, "iter_subtree_choices")
