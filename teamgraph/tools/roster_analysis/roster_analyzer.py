"""Roster Analysis Pipeline

Runs graph construction, component labeling and closeness centrality over a
roster and derives summary statistics from the results.
"""

import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import networkx as nx
import numpy as np
from scipy import stats

from .centrality_calculator import compute_closeness_centrality
from .component_counter import label_components
from .graph_builder import build_roster_graph
from .roster_data_models import (
    ComponentResult, PlayerRecord, RosterAnalysisResult, RosterGraph
)
from teamgraph.core.logging_config import get_logger, log_operation_end, log_operation_start

logger = get_logger(__name__)


class RosterAnalyzer:
    """Analyze a roster's teammate graph"""

    def __init__(self, duplicate_policy: str = "merge", edge_label: str = "teammate",
                 scale_by_reachable: bool = False):
        self.duplicate_policy = duplicate_policy
        self.edge_label = edge_label
        self.scale_by_reachable = scale_by_reachable

    @classmethod
    def from_config(cls, config) -> "RosterAnalyzer":
        """Create an analyzer from a ConfigurationManager"""
        return cls(
            duplicate_policy=config.graph_construction.duplicate_policy,
            edge_label=config.graph_construction.edge_label,
            scale_by_reachable=config.centrality.scale_by_reachable
        )

    def analyze(self, records: Sequence[PlayerRecord], source: Optional[str] = None) -> RosterAnalysisResult:
        """Build the graph and compute components and closeness centrality"""
        records = list(records)

        start = time.time()
        log_operation_start(logger, "graph construction", records=len(records),
                            duplicate_policy=self.duplicate_policy)
        roster_graph = build_roster_graph(records, self.duplicate_policy, self.edge_label)
        log_operation_end(logger, "graph construction", time.time() - start,
                          nodes=roster_graph.node_count, edges=roster_graph.edge_count)

        start = time.time()
        log_operation_start(logger, "component labeling", nodes=roster_graph.node_count)
        components = label_components(roster_graph)
        log_operation_end(logger, "component labeling", time.time() - start, components=components.count)

        start = time.time()
        log_operation_start(logger, "closeness centrality", nodes=roster_graph.node_count,
                            scale_by_reachable=self.scale_by_reachable)
        centrality = compute_closeness_centrality(roster_graph, self.scale_by_reachable)
        log_operation_end(logger, "closeness centrality", time.time() - start, nodes=len(centrality.scores))

        return RosterAnalysisResult(
            component_count=components.count,
            components=components,
            centrality=centrality,
            graph_statistics=self.calculate_graph_statistics(roster_graph, components),
            score_distribution=self.summarize_scores(list(centrality.scores.values())),
            metadata={
                "source": source,
                "records": len(records),
                "duplicate_policy": self.duplicate_policy,
                "scale_by_reachable": self.scale_by_reachable,
                "analyzed_at": datetime.now().isoformat()
            }
        )

    def calculate_graph_statistics(self, roster_graph: RosterGraph,
                                   components: ComponentResult) -> Dict[str, Any]:
        """Basic structural statistics of the teammate graph"""
        graph = roster_graph.graph
        simple_graph = nx.Graph(graph)

        return {
            "nodes": roster_graph.node_count,
            "edges": roster_graph.edge_count,
            "groups": len(roster_graph.group_sizes),
            "density": nx.density(simple_graph) if roster_graph.node_count > 1 else 0.0,
            "isolated_nodes": nx.number_of_isolates(graph),
            "connected_components": components.count,
            "largest_component_size": max(components.sizes) if components.sizes else 0,
            "component_sizes": sorted(components.sizes, reverse=True)
        }

    def summarize_scores(self, values: List[float]) -> Dict[str, float]:
        """Distribution of centrality values"""
        if not values:
            return {}

        array = np.asarray(values, dtype=float)
        spread = float(np.std(array))

        # skew/kurtosis are undefined for constant samples
        if spread > 0:
            skewness = float(stats.skew(array))
            kurtosis = float(stats.kurtosis(array))
        else:
            skewness = 0.0
            kurtosis = 0.0

        return {
            "mean": float(np.mean(array)),
            "median": float(np.median(array)),
            "std": spread,
            "min": float(np.min(array)),
            "max": float(np.max(array)),
            "skewness": skewness,
            "kurtosis": kurtosis
        }
