"""Thin wrapper around nauty's ``shortg`` used as an isomorphism oracle.

Only canonical labelling is needed here: a tree's graph6 string is passed
through ``shortg -q`` and the single canonical graph6 line it prints is used
as the unrooted signature. Results are memoized per input string.
"""
from __future__ import annotations

import os
import shutil
import subprocess
from typing import Dict, Iterator

import networkx as nx


NAUTY_SHORTG = os.environ.get("NAUTY_SHORTG", "shortg")

_canon_cache: Dict[str, str] = {}


def nauty_available() -> bool:
    """Returns True iff shortg appears runnable."""
    return shutil.which(NAUTY_SHORTG) is not None


def edgelist_to_g6(edges: list[tuple[int, int]], n: int) -> str:
    """Convert an edge list on vertices {0..n-1} to a graph6 string."""
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(edges)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()


def _graph6_records(output: bytes) -> Iterator[str]:
    # shortg may interleave ">A ..." banners with the graphs it writes.
    for raw in output.decode("ascii", errors="replace").splitlines():
        record = raw.strip()
        if record and not record.startswith(">") and len(record.split()) == 1:
            yield record


def canon_g6(g6: str) -> str:
    """Canonical graph6 string for *g6*; isomorphic graphs map to the same one.

    Raises RuntimeError when shortg is missing or prints no graph.
    """
    key = g6.strip()
    hit = _canon_cache.get(key)
    if hit is not None:
        return hit
    if not nauty_available():
        raise RuntimeError(
            f"cannot canonicalize {key!r}: {NAUTY_SHORTG!r} not found "
            "(install nauty or point NAUTY_SHORTG at shortg)."
        )
    proc = subprocess.run(
        [NAUTY_SHORTG, "-q"],
        input=(key + "\n").encode("ascii"),
        capture_output=True,
        check=True,
    )
    records = list(_graph6_records(proc.stdout))
    if len(records) != 1:
        raise RuntimeError(
            f"expected one graph from shortg for {key!r}, got {len(records)}; "
            f"stderr={proc.stderr!r}"
        )
    _canon_cache[key] = records[0]
    return records[0]
