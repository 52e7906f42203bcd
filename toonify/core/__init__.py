"""Core TOON conversion, validation and token estimation"""

from toonify.core.data_types import TokenReport, ValidationResult
from toonify.core.decoder import toon_to_json
from toonify.core.encoder import json_to_toon
from toonify.core.errors import (
    ConfigError,
    EmptyInputError,
    InputShapeError,
    InvalidHeaderError,
    ToonifyError,
    ToonifyIOError,
)
from toonify.core.token_estimator import compare_tokens, estimate_tokens
from toonify.core.validator import validate_toon

__all__ = [
    "json_to_toon",
    "toon_to_json",
    "validate_toon",
    "estimate_tokens",
    "compare_tokens",
    "ValidationResult",
    "TokenReport",
    "ToonifyError",
    "InputShapeError",
    "EmptyInputError",
    "InvalidHeaderError",
    "ToonifyIOError",
    "ConfigError",
]
