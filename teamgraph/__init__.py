"""teamgraph - roster co-membership graph analysis

Builds a teammate graph from (player, team) records and reports its
connected components and closeness centrality.
"""

__version__ = "0.1.0"
