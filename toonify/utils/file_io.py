"""File and stdin helpers for the toonify CLI"""

import json
import logging
import re
import sys
from pathlib import Path
from typing import Optional, Union

from toonify.core.errors import ToonifyIOError

logger = logging.getLogger(__name__)

TOON_SNIFF_PATTERN = re.compile(r"^\w+\[\d+\]\{[^}]+\}:", re.ASCII)
EXTENSIONS = {"json": ".json", "toon": ".toon"}


def read_input(file_path: Optional[Union[str, Path]] = None) -> str:
    """
    Read text from a file, or from stdin when no path is given.

    Raises:
        ToonifyIOError: If the file is missing or cannot be read
    """
    try:
        if file_path is None:
            return sys.stdin.read()
        return Path(file_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ToonifyIOError(f"File not found: {file_path}")
    except (OSError, UnicodeDecodeError) as e:
        raise ToonifyIOError(f"Failed to read input: {e}")


def write_output(file_path: Union[str, Path], content: str) -> None:
    """
    Write text to a file as UTF-8.

    Raises:
        ToonifyIOError: If the file cannot be written
    """
    try:
        Path(file_path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise ToonifyIOError(f"Failed to write output: {e}")
    logger.debug("Wrote %d characters to %s", len(content), file_path)


def detect_format(file_path: Union[str, Path], content: str) -> str:
    """
    Guess whether a file holds JSON or TOON.

    The extension wins; otherwise the content is sniffed for a TOON header,
    then tried as JSON. Anything else is treated as TOON.

    Returns:
        "json" or "toon"
    """
    name = str(file_path)
    if name.endswith(".json"):
        return "json"
    if name.endswith(".toon"):
        return "toon"

    if TOON_SNIFF_PATTERN.match(content.strip()):
        return "toon"

    try:
        json.loads(content)
    except ValueError:
        logger.debug("Could not detect format of %s, assuming toon", name)
        return "toon"
    return "json"


def derive_output_path(input_path: Union[str, Path], target_format: str) -> Path:
    """
    Build the output file name for a conversion.

    A trailing .json or .toon is swapped for the target extension; other
    names get the extension appended so the input is never overwritten.
    """
    ext = EXTENSIONS[target_format]
    name = str(input_path)
    replaced, count = re.subn(r"\.(json|toon)$", ext, name)
    if count:
        return Path(replaced)
    return Path(name + ext)
