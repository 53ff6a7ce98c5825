"""
Custom exceptions for teamgraph.

This module defines the errors raised at the input boundary and by
configuration handling. The graph algorithms themselves do not raise.
"""

from typing import Optional


class TeamGraphError(Exception):
    """Base exception for all teamgraph errors."""
    pass


class RosterSourceError(TeamGraphError):
    """Raised when the roster source cannot be opened or read."""
    def __init__(self, source: str, message: str = None):
        self.source = source
        super().__init__(message or f"Roster source '{source}' could not be read")


class RecordParseError(TeamGraphError):
    """Raised when a roster record is missing a required field."""
    def __init__(self, field: str, row: Optional[int] = None, message: str = None):
        self.field = field
        self.row = row
        if message is None:
            if row is None:
                message = f"Required column '{field}' not found in roster"
            else:
                message = f"Row {row}: required field '{field}' is missing"
        super().__init__(message)


class GraphConstructionError(TeamGraphError):
    """Raised when the graph builder is called with an invalid option."""
    pass


class ConfigurationError(TeamGraphError):
    """Configuration-related error."""
    pass
