"""Flatten decoded JSON-like trees into rectangular tables."""

from .cardinality import rows_for_record, rows_for_sequence
from .columns import Column, ColumnSpace, CursorGroup
from .converter import convert_to_csv, convert_to_dataframe
from .decode import DecodeType, decode
from .errors import DecodeError, FlattableError, SinkWriteError, UnsupportedValueKind
from .flattener import flatten
from .renderer import Table, TableRenderer
from .sinks import DataFrameSink, ListSink, RowSink
from .writer import ListWriter, build_table

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ColumnSpace",
    "CursorGroup",
    "DataFrameSink",
    "DecodeError",
    "DecodeType",
    "FlattableError",
    "ListSink",
    "ListWriter",
    "RowSink",
    "SinkWriteError",
    "Table",
    "TableRenderer",
    "UnsupportedValueKind",
    "build_table",
    "convert_to_csv",
    "convert_to_dataframe",
    "decode",
    "flatten",
    "rows_for_record",
    "rows_for_sequence",
]
