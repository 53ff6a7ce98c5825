"""Roster Data Loader

Loads roster rows from CSV files (or in-memory tables) and turns them into
validated PlayerRecord sequences for graph construction.
"""

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

import pandas as pd

from .roster_data_models import PlayerRecord
from teamgraph.core.exceptions import RecordParseError, RosterSourceError
from teamgraph.core.logging_config import get_logger

logger = get_logger(__name__)


class RosterDataLoader:
    """Load player/team records for roster analysis"""

    def __init__(self, name_column: str = "PLAYER", group_column: str = "TEAM_pie",
                 encoding: str = "utf-8", strip_whitespace: bool = True):
        self.name_column = name_column
        self.group_column = group_column
        self.encoding = encoding
        self.strip_whitespace = strip_whitespace

    @classmethod
    def from_config(cls, config) -> "RosterDataLoader":
        """Create a loader from a ConfigurationManager's input section"""
        return cls(
            name_column=config.input.name_column,
            group_column=config.input.group_column,
            encoding=config.input.encoding,
            strip_whitespace=config.input.strip_whitespace
        )

    def load_csv(self, path: Union[str, Path]) -> List[PlayerRecord]:
        """Read a CSV roster file.

        Raises:
            RosterSourceError: the file is missing, unreadable or not CSV
            RecordParseError: a required column or cell is missing (blank cells are kept)
        """
        path = Path(path)
        if not path.is_file():
            raise RosterSourceError(str(path), f"Roster file not found: {path}")

        try:
            frame = pd.read_csv(path, dtype=str, keep_default_na=False, encoding=self.encoding)
        except pd.errors.EmptyDataError:
            raise RosterSourceError(str(path), f"Roster file is empty: {path}")
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise RosterSourceError(str(path), f"Failed to parse roster file {path}: {e}")
        except LookupError:
            raise RosterSourceError(str(path), f"Unknown encoding '{self.encoding}' for roster file {path}")
        except OSError as e:
            raise RosterSourceError(str(path), f"Failed to read roster file {path}: {e}")

        records = self.records_from_frame(frame)
        logger.info("Loaded %d roster records from %s", len(records), path)
        return records

    def load_records(self, rows: Iterable[Mapping[str, Any]]) -> List[PlayerRecord]:
        """Validate rows given as mappings keyed by column name"""
        rows = list(rows)
        frame = pd.DataFrame.from_records(rows) if rows else pd.DataFrame(columns=[self.name_column, self.group_column])
        return self.records_from_frame(frame)

    def records_from_frame(self, frame: pd.DataFrame) -> List[PlayerRecord]:
        """Convert a table to records, in row order"""
        for column in (self.name_column, self.group_column):
            if column not in frame.columns:
                raise RecordParseError(field=column)

        records = []
        names = frame[self.name_column].tolist()
        groups = frame[self.group_column].tolist()
        for row_number, (name, group) in enumerate(zip(names, groups), start=1):
            records.append(PlayerRecord(
                name=self._required_value(name, self.name_column, row_number),
                group=self._required_value(group, self.group_column, row_number)
            ))

        return records

    def _required_value(self, value: Any, column: str, row_number: int) -> str:
        # blank cells are valid values; only an absent cell is an error
        text = self._clean(value)
        if text is None:
            raise RecordParseError(field=column, row=row_number)
        return text

    def _clean(self, value: Any) -> Optional[str]:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return None
        text = str(value)
        return text.strip() if self.strip_whitespace else text
