"""
Decoding of raw input into a list of records.

JSON input may be a single object, which is wrapped into a one-element list,
or an array. JSON Lines input holds one object per line; lines that are not
valid JSON objects are skipped.
"""

import enum
import json
import logging
from typing import Any, List, Union

from .errors import DecodeError

# Configure logging
logger = logging.getLogger(__name__)


class DecodeType(enum.IntEnum):
    UNKNOWN = 0
    JSON = 1
    JSONL = 2


def _to_text(data: Union[bytes, str]) -> str:
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"input is not valid UTF-8: {e}") from e
    return data


def decode_json(data: Union[bytes, str]) -> List[Any]:
    """
    Decode a JSON document into a list of values.

    Args:
        data: Raw JSON text

    Returns:
        The decoded array, or the decoded object wrapped in a list. Empty input
        yields an empty list.

    Raises:
        DecodeError: If the text is malformed or is neither an object nor an array
    """
    text = _to_text(data).strip()

    # If there is no data, return an empty list
    if not text:
        return []

    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        kind = "object" if text.startswith("{") else "array"
        raise DecodeError(f"failed to unmarshal json {kind}: {e}") from e

    if isinstance(decoded, dict):
        return [decoded]
    if isinstance(decoded, list):
        return decoded

    raise DecodeError(f"json must be an object or an array, got {type(decoded).__name__}")


def decode_jsonl(data: Union[bytes, str]) -> List[Any]:
    """Decode JSON Lines, skipping blank, malformed and non-object lines."""
    records = []
    skipped_lines = 0

    for line_num, line in enumerate(_to_text(data).splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(f"Line {line_num} contains invalid JSON, skipping: {str(e)}")
            skipped_lines += 1
            continue

        if not isinstance(record, dict):
            logger.warning(f"Line {line_num} is not a JSON object, skipping")
            skipped_lines += 1
            continue

        records.append(record)

    if skipped_lines > 0:
        logger.info(f"Skipped {skipped_lines} invalid lines in JSONL input")

    return records


def decode(decode_type: DecodeType, data: Union[bytes, str]) -> List[Any]:
    """
    Decode ``data`` according to ``decode_type``.

    Raises:
        DecodeError: For an unsupported decode type or undecodable data
    """
    if decode_type == DecodeType.JSON:
        return decode_json(data)
    if decode_type == DecodeType.JSONL:
        return decode_jsonl(data)
    raise DecodeError(f"unknown decode type: {decode_type!r}")
