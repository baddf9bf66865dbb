"""
Command-line entry point.

Usage:
  treeflip table [--max-level 10]
  treeflip level 4 [--forms] [--clusters]
  treeflip verify [--max-n 8] [--method reroot|center|nauty]
"""
from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from treeflip.levels.mapping import MAX_LEVEL, in_range, level_clusters, summary
from treeflip.oeis.sequences import TABLE_MAX_N
from treeflip.trees.clusters import SIGNATURES, verify
from treeflip.utils.naming import tree_name


def _cmd_table(args: argparse.Namespace) -> int:
    print(f"{'level':>5} {'nodes':>5} {'terms':>6} {'clusters':>8}")
    for level in range(0, min(args.max_level, MAX_LEVEL) + 1):
        t0 = time.time()
        s = summary(level)
        print(f"{s.level:>5} {s.level + 1:>5} {s.term_count:>6} {s.cluster_count:>8}")
        print(f"[n={level + 1}] {time.time() - t0:.2f}s", file=sys.stderr)
    return 0


def _cmd_level(args: argparse.Namespace) -> int:
    if not in_range(args.level):
        print(f"level {args.level} has no terms (supported: 0..{MAX_LEVEL})")
        return 0

    s = summary(args.level)
    print(f"Level {s.level}: {s.term_count} terms in {s.cluster_count} clusters "
          f"({s.node_count} nodes below the root)")
    print("Cluster sizes:", list(s.cluster_sizes))

    if args.forms:
        print()
        for i, form in enumerate(s.tree_canonicals, 1):
            print(f"  {i:>4}  {form}")

    if args.clusters:
        print()
        for i, cluster in enumerate(level_clusters(args.level), 1):
            print(f"  cluster {i} [{tree_name(cluster[0])}] size={len(cluster)}")
            for tree in cluster:
                print(f"      {tree.canonical()}")
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    ok = verify(args.max_n, method=args.method, verbose=True)
    print("OK" if ok else "MISMATCH")
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="treeflip",
        description="Rooted trees (A000081) and their flip-transform clusters (A000055).",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p_table = sub.add_parser("table", help="term and cluster counts per level")
    p_table.add_argument("--max-level", type=int, default=6)
    p_table.set_defaults(func=_cmd_table)

    p_level = sub.add_parser("level", help="details of a single level")
    p_level.add_argument("level", type=int)
    p_level.add_argument("--forms", action="store_true", help="list every canonical form")
    p_level.add_argument("--clusters", action="store_true", help="list cluster membership")
    p_level.set_defaults(func=_cmd_level)

    p_verify = sub.add_parser("verify", help="check counts against the reference sequences")
    p_verify.add_argument("--max-n", type=int, default=8, choices=range(1, TABLE_MAX_N + 1),
                          metavar=f"1..{TABLE_MAX_N}")
    p_verify.add_argument("--method", choices=sorted(SIGNATURES), default="reroot")
    p_verify.set_defaults(func=_cmd_verify)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
