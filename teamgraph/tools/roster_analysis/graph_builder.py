"""Teammate Graph Builder

Builds the undirected co-membership graph from roster records: one node per
unique player name, one edge per pair of players sharing a team.
"""

from itertools import combinations
from typing import Dict, Iterable, List, Set, Tuple

import networkx as nx

from .roster_data_models import PlayerRecord, RosterGraph
from teamgraph.core.config_manager import DUPLICATE_POLICIES
from teamgraph.core.exceptions import GraphConstructionError
from teamgraph.core.logging_config import get_logger

logger = get_logger(__name__)


def build_roster_graph(records: Iterable[PlayerRecord], duplicate_policy: str = "merge",
                       edge_label: str = "teammate") -> RosterGraph:
    """Build the teammate graph from an ordered sequence of records.

    Every group induces a clique over its members. Groups of one member add
    no edges; their node stays isolated unless another group links it.

    Repeated names always resolve to the node created on first appearance.
    With ``duplicate_policy="first"`` the repeated record's group is ignored;
    with ``"merge"`` it adds a further membership (a repeated identical
    name/group pair is only counted once, so no self-loops arise).
    """
    if duplicate_policy not in DUPLICATE_POLICIES:
        raise GraphConstructionError(
            f"Unknown duplicate policy '{duplicate_policy}', expected one of {DUPLICATE_POLICIES}"
        )

    graph = nx.MultiGraph()
    name_to_index: Dict[str, int] = {}
    memberships: List[Tuple[int, str]] = []
    seen_memberships: Set[Tuple[int, str]] = set()
    duplicates = 0

    for record in records:
        index = name_to_index.get(record.name)
        if index is None:
            index = len(name_to_index)
            name_to_index[record.name] = index
            graph.add_node(index, name=record.name)
        else:
            duplicates += 1
            if duplicate_policy == "first":
                continue

        if (index, record.group) not in seen_memberships:
            seen_memberships.add((index, record.group))
            memberships.append((index, record.group))

    if duplicates:
        logger.info("Coalesced %d repeated player records (policy=%s)", duplicates, duplicate_policy)

    groups: Dict[str, List[int]] = {}
    for index, group in memberships:
        groups.setdefault(group, []).append(index)

    for group, members in groups.items():
        for first, second in combinations(members, 2):
            graph.add_edge(first, second, key=group, relationship=edge_label, group=group)

    logger.debug("Built teammate graph: %d nodes, %d edges, %d groups",
                 graph.number_of_nodes(), graph.number_of_edges(), len(groups))

    group_sizes = {group: len(members) for group, members in groups.items()}
    return RosterGraph(graph=graph, name_to_index=name_to_index, group_sizes=group_sizes)
