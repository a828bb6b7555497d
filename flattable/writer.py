"""
Write a decoded list of records as a table.

Each call estimates the row count, flattens into a fresh ColumnSpace sized to
it, and renders the result. Nothing is shared between calls.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Sequence, Union

from .cardinality import rows_for_sequence
from .columns import ColumnSpace
from .errors import UnsupportedValueKind
from .flattener import flatten
from .renderer import Table, TableRenderer
from .sinks import RowSink
from .values import is_record, is_sequence

# Configure logging
logger = logging.getLogger(__name__)


def _as_list(values: Union[Sequence[Any], Mapping]) -> List[Any]:
    # A single record stands for a one-row list
    if is_record(values):
        return [values]
    if is_sequence(values):
        return list(values)
    raise UnsupportedValueKind("", values)


def flatten_values(values: Union[Sequence[Any], Mapping]) -> ColumnSpace:
    """
    Flatten a list of records into a new ColumnSpace.

    Raises:
        UnsupportedValueKind: If the tree holds a value of an unrecognized type
    """
    values = _as_list(values)
    row_count = rows_for_sequence(values)
    logger.debug(f"Sizing table for {len(values)} values to {row_count} rows")

    space = ColumnSpace(row_count)
    flatten(values, "", space, space.cursor)
    return space


def build_table(values: Union[Sequence[Any], Mapping], alphabetize_headers: bool = False) -> Table:
    """Flatten ``values`` and return the resulting Table without writing it anywhere."""
    return TableRenderer(alphabetize_headers).build(flatten_values(values))


class ListWriter:
    """
    Writes lists of records to a row sink.

    Args:
        sink: Object with a ``writerow`` method, e.g. ``csv.writer(f)``
        alphabetize_headers: Sort output columns by header
    """

    def __init__(self, sink: RowSink, alphabetize_headers: bool = False):
        self.sink = sink
        self.alphabetize_headers = alphabetize_headers

    def write(self, values: Union[Sequence[Any], Mapping]) -> Table:
        """
        Flatten ``values`` and write the header and data rows to the sink.

        Returns:
            The Table that was written

        Raises:
            UnsupportedValueKind: If the tree holds a value of an unrecognized type
            SinkWriteError: If the sink fails on a row
        """
        space = flatten_values(values)
        return TableRenderer(self.alphabetize_headers).render(space, self.sink)
