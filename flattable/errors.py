"""Exceptions raised while decoding, flattening and rendering tables."""

from typing import Any, Union

from .constants import HEADER_ROW


class FlattableError(Exception):
    """Base class for every error raised by flattable"""


class UnsupportedValueKind(FlattableError, TypeError):
    """A value in the tree is not null, number, string, bool, record or sequence."""

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value_type = type(value).__name__
        super().__init__(f"unsupported value type {self.value_type!r} for key {key!r}")


class DecodeError(FlattableError, ValueError):
    """Raw input could not be decoded into a sequence of records"""


class SinkWriteError(FlattableError):
    """
    The row sink failed while a row was being written.

    ``row`` is ``"header"`` for the header row, otherwise the zero-based
    index of the data row.
    """

    def __init__(self, row: Union[str, int], cause: BaseException):
        self.row = row
        label = "header row" if row == HEADER_ROW else f"data row {row}"
        super().__init__(f"failed to write {label}: {cause}")
