"""
Recursive flattening of structured values into a ColumnSpace.

Naming and layout rules:

- a scalar under key ``K`` is written to column ``K`` on the current row
- a nested record under ``K`` is flattened into a fresh one-record scope and
  its columns are copied back as ``K.<field>``
- an array under ``K`` inlines its scalars as ``[a,b,c]`` in column ``K`` and
  expands each record element onto its own rows, all sharing the cursor group
  rooted at ``K``

A record occupies as many rows as ``rows_for_record`` says: its scalars sit on
its first row and each of its arrays of records gets a block of rows stacked
after the blocks of the arrays before it.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .cardinality import rows_for_record
from .columns import ROOT_GROUP, ColumnSpace, CursorGroup
from .constants import LIST_CLOSE, LIST_OPEN, NESTED_OBJECT_DELIMITER
from .values import SCALAR_KINDS, inline_sequence, is_record, is_sequence, kind_of, stringify

# Configure logging
logger = logging.getLogger(__name__)

EMPTY_LIST_LENGTH = len(LIST_OPEN + LIST_CLOSE)


def flatten(value: Any, key: str, space: ColumnSpace, cursor: Optional[CursorGroup] = None) -> None:
    """
    Write ``value`` into ``space`` starting at the row of ``cursor``.

    The cursor (the space's root group by default) is advanced past the rows
    the value filled, so consecutive calls land on consecutive rows.

    Args:
        value: Decoded structured value
        key: Column key for the value; "" for a top-level record or array
        space: Column space sized by the row cardinality estimate
        cursor: Cursor group giving the starting row

    Raises:
        UnsupportedValueKind: If any node of the tree has an unrecognized type
    """
    if cursor is None:
        cursor = space.cursor

    if is_sequence(value):
        cursor.advance(_flatten_sequence(value, key, space, cursor, cursor.row))
    elif is_record(value) and not key:
        cursor.advance(_flatten_fields(value, space, cursor))
    else:
        _flatten_value(value, key, space, cursor)
        cursor.advance()


def _flatten_value(value: Any, key: str, space: ColumnSpace, cursor: CursorGroup) -> None:
    """Flatten a scalar or a record onto the current row of ``cursor``."""
    kind = kind_of(value, key)

    if kind in SCALAR_KINDS:
        space.write(key, cursor, stringify(value, key))
    elif not key:
        _flatten_fields(value, space, cursor)
    else:
        _flatten_nested(value, key, space, space.group(key, start=cursor.row), 1)


def _flatten_fields(record: Mapping, space: ColumnSpace, cursor: CursorGroup) -> int:
    """
    Flatten every field of a record directly into ``space``.

    Scalars and nested records land on the cursor's row, which stays put.

    Returns:
        Number of rows the record spans
    """
    base = cursor.row
    used = 0
    for name, value in record.items():
        if is_sequence(value):
            # Each array of records gets its own block below the previous ones
            used += _flatten_sequence(value, name, space, cursor, base + used)
        else:
            _flatten_value(value, name, space, cursor)
    return max(used, 1)


def _flatten_sequence(
    sequence: Sequence[Any], key: str, space: ColumnSpace, cursor: CursorGroup, block_start: int
) -> int:
    """
    Inline the scalars of an array and expand its records.

    Scalars are written as one bracketed cell on the cursor's row. Record
    elements fill consecutive rows of the group rooted at ``key``, which starts
    at ``block_start`` and advances past each element.

    Returns:
        Number of rows taken by the expanded records, 0 for an all-scalar array
    """
    if key:
        group = space.group(key, start=block_start)
    else:
        # Records without a key write straight into the space's own columns
        group = CursorGroup(root=ROOT_GROUP, row=block_start)

    for element in sequence:
        if not is_record(element):
            continue
        span = rows_for_record(element)
        if key:
            _flatten_nested(element, key, space, group, span)
        else:
            _flatten_fields(element, space, group)
            group.advance(span)

    text = inline_sequence(sequence, key)
    if len(text) > EMPTY_LIST_LENGTH:
        if key:
            space.write(key, cursor, text)
        else:
            logger.warning(f"Dropping scalars with no field name: {text}")

    return group.row - block_start


def _flatten_nested(record: Mapping, key: str, space: ColumnSpace, group: CursorGroup, span: int) -> None:
    """
    Flatten a record reached under ``key`` and copy it back as ``key.<field>``.

    ``key`` becomes a placeholder column anchoring ``group``. The record is
    flattened into its own scope, then each of its rows is copied onto the
    group's current row and the group advances, ``span`` rows in total.
    """
    space.register_column(key, group=key)

    nested = ColumnSpace(rows_for_record(record))
    flatten(record, "", nested, nested.cursor)

    if nested.row_count > span:
        logger.debug(
            f"Nested record {key!r} spans {nested.row_count} rows but only {span} fit in its parent row"
        )

    copied = [(f"{key}{NESTED_OBJECT_DELIMITER}{column.header}", column) for column in nested.columns()]
    for header, _ in copied:
        space.register_column(header, group=key)

    rows = min(span, nested.row_count)
    for offset in range(rows):
        for header, column in copied:
            space.write(header, space.cursor_for(header), column.cells[offset])
        space.advance(key)

    if span > rows:
        space.advance(key, span - rows)
