"""Structural validation of TOON text"""

import logging
import re

from toonify.core.data_types import ValidationResult
from toonify.core.decoder import split_lines

logger = logging.getLogger(__name__)

# Anchored: the whole line must be the header
STRICT_HEADER_PATTERN = re.compile(r"(\w+)\[(\d+)\]\{([^}]+)\}:", re.ASCII)

MISSING_ROWS_MESSAGE = "Missing data rows."
INVALID_HEADER_MESSAGE = "Invalid TOON header."


def validate_toon(toon_data: str) -> ValidationResult:
    """
    Validate TOON text for structural correctness.

    Structural problems are reported in the result, never raised.

    Args:
        toon_data: TOON formatted string to validate

    Returns:
        ValidationResult with the validity flag and diagnostics
    """
    if not isinstance(toon_data, str):
        raise TypeError(f"TOON data must be a string, got {type(toon_data).__name__}")

    lines = split_lines(toon_data)

    if len(lines) < 2:
        return ValidationResult(valid=False, errors=[MISSING_ROWS_MESSAGE])

    header_match = STRICT_HEADER_PATTERN.fullmatch(lines[0])
    if not header_match:
        return ValidationResult(valid=False, errors=[INVALID_HEADER_MESSAGE])

    expected = len(header_match.group(3).split(","))

    errors = []
    for i in range(1, len(lines)):
        found = len(lines[i].split(","))
        if found != expected:
            errors.append(f"Row {i}: expected {expected} columns, found {found}.")

    logger.debug("Validated %d rows, %d errors", len(lines) - 1, len(errors))
    return ValidationResult(valid=not errors, errors=errors)
