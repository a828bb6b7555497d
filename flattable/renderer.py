"""
Rendering of a finished ColumnSpace into header and data rows.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

from .columns import Column, ColumnSpace
from .constants import HEADER_ROW
from .errors import SinkWriteError
from .sinks import RowSink

# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class Table:
    """Ordered columns of a flattened value plus the number of data rows."""

    columns: List[Column]
    row_count: int

    @property
    def headers(self) -> List[str]:
        return [column.header for column in self.columns]

    def row(self, index: int) -> List[str]:
        return [column.cells[index] for column in self.columns]

    def rows(self) -> Iterator[List[str]]:
        for index in range(self.row_count):
            yield self.row(index)


class TableRenderer:
    """
    Turn a ColumnSpace into rows and hand them to a sink.

    Args:
        alphabetize_headers: Sort columns by header instead of first-write order
    """

    def __init__(self, alphabetize_headers: bool = False):
        self.alphabetize_headers = alphabetize_headers

    def build(self, space: ColumnSpace) -> Table:
        space.prune_empty()
        if self.alphabetize_headers:
            space.reorder_alphabetically()
        return Table(columns=space.columns(), row_count=space.row_count)

    def render(self, space: ColumnSpace, sink: RowSink) -> Table:
        """
        Write the header row and every data row of ``space`` to ``sink``.

        Nothing is written when the table has no columns.

        Returns:
            The rendered Table

        Raises:
            SinkWriteError: If the sink fails; ``row`` tells which row
        """
        table = self.build(space)
        if not table.columns:
            logger.debug("No columns to render, skipping output")
            return table

        try:
            sink.writerow(table.headers)
        except Exception as e:
            raise SinkWriteError(HEADER_ROW, e) from e

        for index, row in enumerate(table.rows()):
            try:
                sink.writerow(row)
            except Exception as e:
                raise SinkWriteError(index, e) from e

        logger.debug(f"Rendered {len(table.columns)} columns and {table.row_count} rows")
        return table
