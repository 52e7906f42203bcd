"""TOON to JSON record collection decoder"""

import logging
import re
from typing import Dict, List

from toonify.core.errors import EmptyInputError, InvalidHeaderError

logger = logging.getLogger(__name__)

# Unanchored: trailing content after the colon is tolerated
HEADER_PATTERN = re.compile(r"(\w+)\[\d+\]\{([^}]+)\}:", re.ASCII)


def split_lines(toon_data: str) -> List[str]:
    """Split TOON text into lines, dropping lines that are blank after stripping."""
    return [line for line in toon_data.split("\n") if line.strip()]


def toon_to_json(toon_data: str) -> Dict[str, List[Dict[str, str]]]:
    """
    Convert TOON text to a record collection.

    Rows shorter than the header are padded with empty strings and
    columns beyond the declared fields are dropped. The declared count
    in the header is not compared with the number of rows.

    Args:
        toon_data: TOON formatted string

    Returns:
        Object with the header key mapping to a list of string-valued records

    Raises:
        EmptyInputError: If the text has no non-blank lines
        InvalidHeaderError: If the first line is not a TOON header
    """
    if not isinstance(toon_data, str):
        raise TypeError(f"TOON data must be a string, got {type(toon_data).__name__}")

    lines = split_lines(toon_data)
    if not lines:
        raise EmptyInputError("TOON data cannot be empty")

    match = HEADER_PATTERN.search(lines[0])
    if not match:
        raise InvalidHeaderError("Invalid TOON header format")

    key_name = match.group(1)
    field_names = match.group(2).split(",")

    records = []
    for row in lines[1:]:
        values = row.split(",")
        records.append(
            {
                name: values[i] if i < len(values) else ""
                for i, name in enumerate(field_names)
            }
        )

    logger.debug("Decoded %d rows for '%s'", len(records), key_name)
    return {key_name: records}
