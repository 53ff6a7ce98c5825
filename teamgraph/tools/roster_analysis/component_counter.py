"""Connected Component Counter

Labels the maximal connected subgraphs of the teammate graph.
"""

from typing import Dict, List

import networkx as nx

from .roster_data_models import ComponentResult, RosterGraph
from teamgraph.core.logging_config import get_logger

logger = get_logger(__name__)


def label_components(roster_graph: RosterGraph) -> ComponentResult:
    """Assign a component id to every node.

    Ids are allocated in node enumeration order of each component's first
    node. Isolated nodes form single-node components; the empty graph has
    none.
    """
    labels: Dict[int, int] = {}
    sizes: List[int] = []

    for component_id, members in enumerate(nx.connected_components(roster_graph.graph)):
        for node in members:
            labels[node] = component_id
        sizes.append(len(members))

    logger.debug("Labeled %d connected components over %d nodes", len(sizes), len(labels))
    return ComponentResult(count=len(sizes), labels=labels, sizes=sizes)


def count_components(roster_graph: RosterGraph) -> int:
    """Number of connected components, counting isolated nodes"""
    return label_components(roster_graph).count
