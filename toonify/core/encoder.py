"""JSON record collection to TOON encoder"""

import json
import logging
from typing import Any, Dict, List, Mapping

from toonify.core.errors import InputShapeError

logger = logging.getLogger(__name__)


def serialize_value(value: Any) -> str:
    """
    Serialize a single field value for a TOON row.

    Args:
        value: Field value taken from a record

    Returns:
        Empty string for None, compact JSON for objects and arrays,
        JSON spelling for booleans and ``str(value)`` otherwise
    """
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _extract_records(json_data: Any) -> tuple[str, List[Mapping[str, Any]]]:
    """
    Check the collection shape and return its root key and records.

    Raises:
        InputShapeError: If the input is not a single-key object holding a non-empty array
    """
    if not isinstance(json_data, Mapping):
        raise InputShapeError(
            "Input must be an object with a single key containing an array"
        )

    keys = list(json_data.keys())
    if len(keys) != 1:
        raise InputShapeError("Input must have exactly one root key")

    root_key = keys[0]
    records = json_data[root_key]

    if not isinstance(records, list):
        raise InputShapeError("Value must be an array")
    if not records:
        raise InputShapeError("Array cannot be empty")

    return root_key, records


def _check_fields(records: List[Mapping[str, Any]], field_names: List[str]) -> None:
    for i, row in enumerate(records):
        if not isinstance(row, Mapping):
            raise InputShapeError(f"Row {i} must be an object")
        for name in field_names:
            if name not in row:
                raise InputShapeError(f'Row {i} is missing field "{name}"')


def json_to_toon(json_data: Dict[str, List[Dict[str, Any]]], compact: bool = False) -> str:
    """
    Convert a record collection to TOON text.

    Args:
        json_data: Object with a single key whose value is an array of records
        compact: Drop the line breaks between header and rows

    Returns:
        TOON formatted string

    Raises:
        InputShapeError: If the collection shape is not encodable

    Example:
        >>> json_to_toon({"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]})
        'users[2]{id,name}:\\n1,Alice\\n2,Bob'
    """
    root_key, records = _extract_records(json_data)

    if not isinstance(records[0], Mapping):
        raise InputShapeError("Row 0 must be an object")

    # Field order comes from the first record only
    field_names = list(records[0].keys())
    _check_fields(records, field_names)

    header = f"{root_key}[{len(records)}]{{{','.join(field_names)}}}:"
    rows = [
        ",".join(serialize_value(row[name]) for name in field_names)
        for row in records
    ]

    logger.debug(
        "Encoded %d records with %d fields under '%s'",
        len(records),
        len(field_names),
        root_key,
    )

    sep = "" if compact else "\n"
    return header + sep + sep.join(rows)
