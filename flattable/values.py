"""
Classification and stringification of decoded structured values.

The flattening engine consumes the plain Python trees produced by ``json.loads``:
``None``, ``bool``, ``int``/``float``, ``str``, mappings and lists.
"""

import enum
from collections.abc import Mapping
from typing import Any

from .constants import (
    FALSE_STRING,
    LIST_CLOSE,
    LIST_ITEM_DELIMITER,
    LIST_OPEN,
    NULL_STRING,
    NUMBER_FORMAT,
    NUMBER_PRECISION,
    TRUE_STRING,
)
from .errors import UnsupportedValueKind


class ValueKind(enum.Enum):
    NULL = "null"
    NUMBER = "number"
    STRING = "string"
    BOOL = "bool"
    RECORD = "record"
    SEQUENCE = "sequence"


SCALAR_KINDS = frozenset({ValueKind.NULL, ValueKind.NUMBER, ValueKind.STRING, ValueKind.BOOL})


def kind_of(value: Any, key: str = "") -> ValueKind:
    """
    Classify a value of the structured tree.

    Args:
        value: Any node of a decoded tree
        key: Column key the value is being written under, used in error messages

    Returns:
        The ValueKind of the node

    Raises:
        UnsupportedValueKind: If the node is not one of the recognized kinds
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int, so it has to be tested first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    raise UnsupportedValueKind(key, value)


def is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def stringify(value: Any, key: str = "") -> str:
    """Render a scalar the way it appears in a table cell."""
    kind = kind_of(value, key)
    if kind is ValueKind.NULL:
        return NULL_STRING
    if kind is ValueKind.BOOL:
        return TRUE_STRING if value else FALSE_STRING
    if kind is ValueKind.NUMBER:
        try:
            return NUMBER_FORMAT % value
        except OverflowError:
            # ints beyond float range keep every digit
            return f"{value}.{'0' * NUMBER_PRECISION}"
    if kind is ValueKind.STRING:
        return value
    raise UnsupportedValueKind(key, value)


def inline_sequence(sequence: Any, key: str = "") -> str:
    """
    Render the scalar elements of a sequence as "[a,b,c]".

    Record elements are left out; nested sequences are rendered inline with
    the same rule.
    """
    items = []
    for element in sequence:
        kind = kind_of(element, key)
        if kind is ValueKind.RECORD:
            continue
        if kind is ValueKind.SEQUENCE:
            items.append(inline_sequence(element, key))
        else:
            items.append(stringify(element, key))
    return LIST_OPEN + LIST_ITEM_DELIMITER.join(items) + LIST_CLOSE
