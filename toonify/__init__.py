"""JSON to TOON converter.

TOON packs a single array of uniform records into a header line and
comma-separated rows, which costs far fewer tokens than the JSON form.
"""

__version__ = "1.0.0"

from .core import (
    ConfigError,
    EmptyInputError,
    InputShapeError,
    InvalidHeaderError,
    TokenReport,
    ToonifyError,
    ToonifyIOError,
    ValidationResult,
    compare_tokens,
    estimate_tokens,
    json_to_toon,
    toon_to_json,
    validate_toon,
)

__all__ = [
    # Conversion
    "json_to_toon",
    "toon_to_json",
    "validate_toon",
    # Tokens
    "estimate_tokens",
    "compare_tokens",
    # Results
    "ValidationResult",
    "TokenReport",
    # Errors
    "ToonifyError",
    "InputShapeError",
    "EmptyInputError",
    "InvalidHeaderError",
    "ToonifyIOError",
    "ConfigError",
]
