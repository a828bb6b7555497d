"""
Column storage for one flattening scope.

A ColumnSpace owns an insertion-ordered registry of columns, each backed by a
fixed-size list of cells, and the cursor groups that decide which row a write
lands on. Buffers are sized once, from the row cardinality estimate, when a
column receives its first value.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

# Configure logging
logger = logging.getLogger(__name__)

ROOT_GROUP = ""


@dataclass
class CursorGroup:
    """
    Shared row pointer for a family of columns.

    Every column written from the same array-of-records expansion resolves its
    row through the same group, so advancing the group moves all of them at
    once.
    """

    root: str
    row: int = 0

    def advance(self, rows: int = 1) -> None:
        self.row += rows


@dataclass
class Column:
    header: str
    group: str = ROOT_GROUP
    order: Optional[int] = None
    cells: Optional[List[str]] = field(default=None, repr=False)

    @property
    def written(self) -> bool:
        return self.cells is not None


class ColumnSpace:
    """Registry of columns and cursor groups sized to a fixed number of rows."""

    def __init__(self, row_count: int):
        if row_count < 0:
            raise ValueError(f"row_count must be non-negative, got {row_count}")
        self.row_count = row_count
        self._columns: Dict[str, Column] = {}
        self._groups: Dict[str, CursorGroup] = {}
        self._next_order = 0
        self.cursor = self.group(ROOT_GROUP)

    def __contains__(self, header: str) -> bool:
        return header in self._columns

    def __getitem__(self, header: str) -> Column:
        return self._columns[header]

    def __len__(self) -> int:
        return len(self._columns)

    def group(self, root: str, start: Optional[int] = None) -> CursorGroup:
        """
        Return the cursor group rooted at ``root``, creating it if needed.

        When ``start`` is given the group is repositioned to that row, which is
        how a repeated expansion under the same key begins a new block.
        """
        cursor = self._groups.get(root)
        if cursor is None:
            cursor = CursorGroup(root=root, row=0 if start is None else start)
            self._groups[root] = cursor
        elif start is not None:
            cursor.row = start
        return cursor

    def advance(self, root: str, rows: int = 1) -> None:
        self._groups[root].advance(rows)

    def cursor_for(self, header: str) -> CursorGroup:
        """Return the cursor group a registered column takes its current row from."""
        return self.group(self._columns[header].group)

    def register_column(self, header: str, group: str = ROOT_GROUP) -> Column:
        """Add a column without allocating it; existing columns are returned untouched."""
        column = self._columns.get(header)
        if column is None:
            column = Column(header=header, group=group)
            self._columns[header] = column
        return column

    def write(self, header: str, at: Union[int, CursorGroup], value: str) -> None:
        """
        Store ``value`` in column ``header``.

        Args:
            header: Column header, registered on the fly when unknown
            at: Row index, or the cursor group whose current row is used
            value: Cell text

        Raises:
            IndexError: If the row lies outside the pre-sized buffer
        """
        if isinstance(at, CursorGroup):
            column = self.register_column(header, at.root)
            row = at.row
        else:
            column = self.register_column(header)
            row = at

        if not 0 <= row < self.row_count:
            raise IndexError(
                f"row {row} out of range for column {header!r} sized to {self.row_count} rows"
            )

        if column.cells is None:
            column.cells = [""] * self.row_count
            column.order = self._next_order
            self._next_order += 1

        column.cells[row] = value

    def prune_empty(self) -> None:
        """Drop columns that were registered but never written."""
        pruned = [header for header, column in self._columns.items() if not column.written]
        for header in pruned:
            del self._columns[header]
        if pruned:
            logger.debug(f"Pruned {len(pruned)} placeholder columns: {pruned}")
        self._renumber(self.columns())

    def reorder_alphabetically(self) -> None:
        """Sort columns by header and reassign contiguous orders."""
        self._renumber(sorted(self.columns(), key=lambda column: column.header))

    def columns(self) -> List[Column]:
        """Written columns in output order."""
        written = [column for column in self._columns.values() if column.written]
        return sorted(written, key=lambda column: column.order)

    def headers(self) -> List[str]:
        return [column.header for column in self.columns()]

    def _renumber(self, ordered: List[Column]) -> None:
        for order, column in enumerate(ordered):
            column.order = order
        self._next_order = len(ordered)
