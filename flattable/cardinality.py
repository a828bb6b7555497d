"""
Row cardinality estimation.

Before anything is written the flattener needs to know how many rows a tree
will occupy, because column buffers are allocated once at that size and never
grow. The two functions below are mutually recursive: a record needs one row
plus whatever its arrays of records need, an array needs the rows of each of
its record elements.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .values import is_record, is_sequence


def rows_for_record(record: Mapping) -> int:
    """
    Count the rows a record occupies in the final table.

    Only fields holding sequences contribute; scalar fields and bare nested
    records share the record's own row.

    Args:
        record: Mapping of field name to structured value

    Returns:
        Number of rows, never less than 1
    """
    total = 0
    for value in record.values():
        if is_sequence(value):
            total += rows_for_sequence(value)
    return max(total, 1)


def rows_for_sequence(sequence: Sequence[Any]) -> int:
    """
    Count the rows an array occupies in the final table.

    Each record element contributes its own row count; scalars and nested
    sequences are inlined and contribute nothing, so an all-scalar array
    yields 0.
    """
    return sum(rows_for_record(element) for element in sequence if is_record(element))
