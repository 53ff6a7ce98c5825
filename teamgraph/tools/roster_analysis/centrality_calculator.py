"""Closeness Centrality Calculation

Per node, a breadth-first shortest-path pass over unit-weight edges followed
by a closeness score over the reachable distances.

The default score is ``(total_node_count - 1) / sum_of_reachable_distances``.
The numerator counts every node in the graph while the denominator only sums
distances to nodes reachable from the source. On a disconnected graph the
score is therefore not standard closeness centrality and can exceed 1.0: two
separate pairs give every node a score of 3.0. This is the defined behaviour.
Pass ``scale_by_reachable=True`` to use the reachable node count instead.
"""

import time
from typing import Dict

import networkx as nx

from .roster_data_models import CentralityResult, RosterGraph
from teamgraph.core.logging_config import get_logger

logger = get_logger(__name__)


def closeness_for_node(graph: nx.Graph, node: int, scale_by_reachable: bool = False) -> float:
    """Closeness score of a single node; 0.0 when nothing else is reachable"""
    distances = nx.single_source_shortest_path_length(graph, node)
    total_distance = sum(distances.values())
    if total_distance <= 0:
        return 0.0

    if scale_by_reachable:
        numerator = len(distances) - 1
    else:
        numerator = graph.number_of_nodes() - 1
    return numerator / total_distance


def compute_closeness_centrality(roster_graph: RosterGraph, scale_by_reachable: bool = False) -> CentralityResult:
    """Closeness centrality for every node of the graph"""
    start_time = time.time()
    graph = roster_graph.graph

    scores: Dict[int, float] = {
        node: closeness_for_node(graph, node, scale_by_reachable)
        for node in graph.nodes
    }

    calculation_time = time.time() - start_time
    logger.debug("Closeness centrality computed for %d nodes in %.3fs", len(scores), calculation_time)

    return CentralityResult(
        scores=scores,
        node_names={node: roster_graph.node_name(node) for node in graph.nodes},
        scale_by_reachable=scale_by_reachable,
        calculation_time=calculation_time
    )
