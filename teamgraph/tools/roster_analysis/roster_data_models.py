"""Roster Analysis Data Models

Data structures for roster graph analysis.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Tuple

import networkx as nx


@dataclass(frozen=True)
class PlayerRecord:
    """One roster row: an entity name and the group it belongs to"""
    name: str
    group: str


@dataclass
class RosterGraph:
    """Undirected teammate graph.

    Nodes are integer indices allocated in first-appearance order and carry
    a ``name`` attribute. Edges carry ``relationship`` and ``group``
    attributes for provenance only.
    """
    graph: nx.MultiGraph
    name_to_index: Dict[str, int]
    group_sizes: Dict[str, int] = field(default_factory=dict)

    @property
    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def node_name(self, index: int) -> str:
        return self.graph.nodes[index]["name"]

    def index_of(self, name: str) -> int:
        return self.name_to_index[name]

    def names(self) -> List[str]:
        return [self.node_name(index) for index in self.graph.nodes]


@dataclass
class ComponentResult:
    """Connected component labeling"""
    count: int
    labels: Dict[int, int]
    sizes: List[int]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "count": self.count,
            "labels": self.labels,
            "sizes": self.sizes
        }


@dataclass
class CentralityResult:
    """Closeness centrality scores keyed by node index"""
    scores: Dict[int, float]
    node_names: Dict[int, str]
    scale_by_reachable: bool = False
    calculation_time: float = 0.0

    @property
    def scores_by_name(self) -> Dict[str, float]:
        return {self.node_names[node]: score for node, score in self.scores.items()}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "metric": "closeness",
            "scale_by_reachable": self.scale_by_reachable,
            "scores": self.scores_by_name,
            "calculation_time": self.calculation_time,
            "node_count": len(self.scores)
        }


@dataclass
class RosterAnalysisResult:
    """Complete output of one roster analysis run"""
    component_count: int
    components: ComponentResult
    centrality: CentralityResult
    graph_statistics: Dict[str, Any]
    score_distribution: Dict[str, float]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def top_nodes(self, k: int = 0) -> List[Tuple[str, float]]:
        """Nodes ranked by score, highest first; ties broken by name.

        k <= 0 returns every node.
        """
        ranked = sorted(self.centrality.scores_by_name.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:k] if k > 0 else ranked

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "component_count": self.component_count,
            "component_sizes": self.components.sizes,
            "centrality": self.centrality.to_dict(),
            "graph_statistics": self.graph_statistics,
            "score_distribution": self.score_distribution,
            "metadata": self.metadata
        }
