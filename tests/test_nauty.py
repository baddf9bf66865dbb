"""Tests for the nauty wrapper and the nauty-backed signature."""
import pytest

from treeflip.external.nauty import nauty_available, edgelist_to_g6, canon_g6
from treeflip.trees.node import RootedTree
from treeflip.trees.generator import TreeCache, generate
from treeflip.trees.clusters import group_into_clusters, nauty_signature, verify
from treeflip.oeis.sequences import A000055


# --- edgelist_to_g6 (always works, uses networkx) ---

def test_edgelist_to_g6_path():
    g6 = edgelist_to_g6([(0, 1), (1, 2)], 3)
    assert isinstance(g6, str)
    assert len(g6) > 0


def test_edgelist_to_g6_single_vertex():
    assert isinstance(edgelist_to_g6([], 1), str)


def test_canon_g6_without_nauty(monkeypatch):
    import treeflip.external.nauty as nauty_mod

    monkeypatch.setattr(nauty_mod, "_canon_cache", {})
    monkeypatch.setattr(nauty_mod, "NAUTY_SHORTG", "definitely-not-a-real-shortg")
    assert nauty_mod.nauty_available() is False
    with pytest.raises(RuntimeError):
        nauty_mod.canon_g6("Bw")


# --- canon_g6 (requires nauty) ---

@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_nauty_signature_ignores_root():
    a = RootedTree.from_canonical("(((())))")
    b = RootedTree.from_canonical("((())())")
    c = RootedTree.from_canonical("(()()())")
    assert nauty_signature(a) == nauty_signature(b)
    assert nauty_signature(a) != nauty_signature(c)


@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
@pytest.mark.parametrize("n", range(2, 9))
def test_nauty_clusters_match_a000055(n):
    trees = generate(n, cache=TreeCache())
    assert len(group_into_clusters(trees, key=nauty_signature)) == A000055[n]


@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_verify_with_nauty():
    assert verify(6, method="nauty", cache=TreeCache()) is True


@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_canon_g6_relabelled_path():
    g6_a = edgelist_to_g6([(0, 1), (1, 2), (2, 3)], 4)
    g6_b = edgelist_to_g6([(2, 0), (0, 3), (3, 1)], 4)
    assert canon_g6(g6_a) == canon_g6(g6_b)


# --- output parsing ---

def test_graph6_records_skip_banners_and_blanks():
    from treeflip.external.nauty import _graph6_records

    out = b">A shortg -q\n\n  Bw  \nC~ extra\nCr\n"
    assert list(_graph6_records(out)) == ["Bw", "Cr"]


def test_canon_g6_memoized(monkeypatch):
    import treeflip.external.nauty as nauty_mod

    monkeypatch.setitem(nauty_mod._canon_cache, "Bg", "Bw")
    monkeypatch.setattr(nauty_mod, "NAUTY_SHORTG", "definitely-not-a-real-shortg")
    # served from the memo without touching shortg
    assert nauty_mod.canon_g6(" Bg\n") == "Bw"
