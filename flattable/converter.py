"""
One-call conversions from raw JSON input to CSV text or a DataFrame.
"""

import csv
import io
import logging
from typing import Union

import pandas as pd

from .decode import DecodeType, decode
from .sinks import DataFrameSink
from .writer import ListWriter

# Configure logging
logger = logging.getLogger(__name__)


def convert_to_csv(
    content: Union[bytes, str],
    decode_type: DecodeType = DecodeType.JSON,
    alphabetize_headers: bool = False,
) -> str:
    """
    Convert raw JSON or JSON Lines content to CSV text.

    Args:
        content: Raw input
        decode_type: Encoding of ``content``
        alphabetize_headers: Sort columns by header

    Returns:
        CSV text with a header line followed by one line per table row; empty
        when the input produces no columns

    Raises:
        DecodeError: If the content cannot be decoded
        UnsupportedValueKind: If a decoded value has an unrecognized type
        SinkWriteError: If the CSV writer fails
    """
    values = decode(decode_type, content)

    buffer = io.StringIO()
    table = ListWriter(csv.writer(buffer), alphabetize_headers=alphabetize_headers).write(values)

    logger.info(f"Converted {len(values)} values to CSV with {len(table.columns)} columns and {table.row_count} rows")
    return buffer.getvalue()


def convert_to_dataframe(
    content: Union[bytes, str],
    decode_type: DecodeType = DecodeType.JSON,
    alphabetize_headers: bool = False,
) -> pd.DataFrame:
    """Convert raw JSON or JSON Lines content to a DataFrame of strings."""
    values = decode(decode_type, content)

    sink = DataFrameSink()
    ListWriter(sink, alphabetize_headers=alphabetize_headers).write(values)

    df = sink.to_dataframe()
    logger.info(f"Converted {len(values)} values to a DataFrame of shape {df.shape}")
    return df
