"""
Constants configuration for table flattening.

This module contains the fixed rendering rules used throughout the flattening
engine, particularly for naming nested columns and stringifying scalars.
"""

# Delimiter for naming columns of nested records
# Example: {"user": {"name": "John"}} becomes column "user.name"
NESTED_OBJECT_DELIMITER = "."

# Delimiter and brackets for inlining lists of scalars into a single cell
# Example: ["python", "ruby"] becomes "[python,ruby]"
LIST_ITEM_DELIMITER = ","
LIST_OPEN = "["
LIST_CLOSE = "]"

# Fixed-point format applied to every number
# Example: 42 becomes "42.000000"
NUMBER_PRECISION = 6
NUMBER_FORMAT = f"%.{NUMBER_PRECISION}f"

# Spellings for boolean scalars and null
TRUE_STRING = "true"
FALSE_STRING = "false"
NULL_STRING = ""

# Row identity reported when the header row cannot be written
HEADER_ROW = "header"
