from .mapping import (
    MIN_LEVEL,
    MAX_LEVEL,
    LevelSummary,
    canonical_forms,
    cluster_count,
    cluster_sizes,
    clusters,
    in_range,
    level_clusters,
    level_trees,
    node_count,
    nodes_for_level,
    summaries,
    summary,
    term_count,
)

__all__ = [
    "MIN_LEVEL",
    "MAX_LEVEL",
    "LevelSummary",
    "canonical_forms",
    "cluster_count",
    "cluster_sizes",
    "clusters",
    "in_range",
    "level_clusters",
    "level_trees",
    "node_count",
    "nodes_for_level",
    "summaries",
    "summary",
    "term_count",
]
