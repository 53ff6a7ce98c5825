"""Tools Module

Contains the analysis tool implementations:
- roster_analysis/: teammate graph construction, components, closeness
"""
