"""
Row sinks.

A sink is anything with a ``writerow(row)`` method, so a ``csv.writer`` can be
passed straight to the renderer. The sinks here keep rows in memory.
"""

from typing import List, Optional, Protocol, Sequence

import pandas as pd


class RowSink(Protocol):
    def writerow(self, row: Sequence[str]) -> object:
        ...


class ListSink:
    """Collect rows in a list, header first."""

    def __init__(self):
        self.rows: List[List[str]] = []

    def writerow(self, row: Sequence[str]) -> None:
        self.rows.append(list(row))

    @property
    def header(self) -> Optional[List[str]]:
        return self.rows[0] if self.rows else None

    @property
    def data(self) -> List[List[str]]:
        return self.rows[1:]


class DataFrameSink(ListSink):
    """Collect rows and expose them as a pandas DataFrame of strings."""

    def to_dataframe(self) -> pd.DataFrame:
        if not self.rows:
            return pd.DataFrame()
        return pd.DataFrame(self.data, columns=self.header, dtype=str)
