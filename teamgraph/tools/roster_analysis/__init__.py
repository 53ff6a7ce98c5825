"""Roster Analysis Components

Teammate graph construction, connected components and closeness centrality.
"""

from .roster_data_models import (
    PlayerRecord, RosterGraph, ComponentResult, CentralityResult, RosterAnalysisResult
)
from .graph_builder import build_roster_graph
from .component_counter import label_components, count_components
from .centrality_calculator import compute_closeness_centrality, closeness_for_node
from .roster_data_loader import RosterDataLoader
from .roster_analyzer import RosterAnalyzer
from .results_formatter import format_text, format_json

__all__ = [
    'PlayerRecord',
    'RosterGraph',
    'ComponentResult',
    'CentralityResult',
    'RosterAnalysisResult',
    'build_roster_graph',
    'label_components',
    'count_components',
    'compute_closeness_centrality',
    'closeness_for_node',
    'RosterDataLoader',
    'RosterAnalyzer',
    'format_text',
    'format_json'
]
