"""Roster Results Formatter

Renders analysis results for display.
"""

import json
from typing import List

from .roster_data_models import RosterAnalysisResult


def format_text(result: RosterAnalysisResult, precision: int = 6, top_k: int = 0) -> str:
    """Plain-text report: component count, then one line per node by score"""
    lines: List[str] = [f"Number of connected components: {result.component_count}"]
    for name, score in result.top_nodes(top_k):
        lines.append(f"Node {name}: Closeness Centrality = {score:.{precision}f}")
    return "\n".join(lines)


def format_json(result: RosterAnalysisResult, top_k: int = 0) -> str:
    """JSON report: the full result plus a ranked top_nodes list (all nodes when top_k is 0)"""
    payload = result.to_dict()
    payload["top_nodes"] = [
        {"name": name, "score": score} for name, score in result.top_nodes(top_k)
    ]
    return json.dumps(payload, indent=2, sort_keys=False)
