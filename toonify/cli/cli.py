"""
toonify CLI - convert between JSON and TOON
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
import yaml

from toonify import __version__
from toonify.core.config_loader import ToonifyConfig, load_config
from toonify.core.decoder import toon_to_json
from toonify.core.encoder import json_to_toon
from toonify.core.errors import ToonifyError
from toonify.core.token_estimator import compare_tokens
from toonify.core.validator import validate_toon
from toonify.utils.file_io import (
    derive_output_path,
    detect_format,
    read_input,
    write_output,
)
from toonify.utils.formatting import (
    format_file_size,
    format_number,
    format_percentage,
)

logger = logging.getLogger(__name__)


def success(message: str) -> None:
    click.secho(f"✅ {message}", fg="green")


def error(message: str) -> None:
    click.secho(f"❌ {message}", fg="red", err=True)


def _fail(message: str) -> NoReturn:
    error(message)
    sys.exit(1)


def _setup_logging(config: ToonifyConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _run_validation(content: str, input_format: str) -> None:
    if input_format != "toon":
        _fail("Validation only works with TOON format files")

    result = validate_toon(content)
    if result.valid:
        success("TOON format is valid")
        return

    error("TOON validation failed:")
    for message in result.errors:
        error(f"  {message}")
    sys.exit(1)


def _convert(content: str, target: str, compact: bool, indent: int) -> str:
    if target == "toon":
        return json_to_toon(json.loads(content), compact)
    return json.dumps(toon_to_json(content), indent=indent, ensure_ascii=False)


def _report_tokens(content: str, output: str) -> None:
    report = compare_tokens(content, output)

    click.echo()
    click.echo("Token Estimation:")
    click.echo(f"  Input:  {format_number(report.input_tokens)} tokens")
    click.echo(f"  Output: {format_number(report.output_tokens)} tokens")

    percent = format_percentage(report.percent_change)
    if report.difference < 0:
        click.echo(f"  Saved:  {format_number(-report.difference)} tokens ({percent})")
    elif report.difference > 0:
        click.echo(f"  Added:  {format_number(report.difference)} tokens ({percent})")
    else:
        click.echo("  Change: No change")


@click.command()
@click.version_option(version=__version__, prog_name="toonify")
@click.argument("input_file", metavar="INPUT", type=click.Path(path_type=Path))
@click.option(
    "--to",
    "target",
    type=click.Choice(["json", "toon"]),
    help="Target format: json or toon",
)
@click.option(
    "--compact",
    is_flag=True,
    help="Remove line breaks between header and rows (TOON only)",
)
@click.option(
    "--estimate-tokens",
    is_flag=True,
    help="Show token count estimates",
)
@click.option("--validate", is_flag=True, help="Validate TOON format structure")
@click.option(
    "--config", "-c", type=click.Path(exists=True), help="Custom config file path"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    input_file: Path,
    target: Optional[str],
    compact: bool,
    estimate_tokens: bool,
    validate: bool,
    config: Optional[str],
    verbose: bool,
):
    """Convert INPUT between JSON and TOON format.

    The output is written next to INPUT with a .json or .toon extension.
    """
    try:
        settings = load_config(config)
    except (FileNotFoundError, yaml.YAMLError, ToonifyError) as e:
        _fail(str(e))

    _setup_logging(settings, verbose)

    if not input_file.exists():
        _fail(f"File not found: {input_file}")

    try:
        content = read_input(input_file)
    except ToonifyError as e:
        _fail(str(e))

    input_format = detect_format(input_file, content)
    logger.debug("Detected %s input in %s", input_format, input_file)

    if validate:
        _run_validation(content, input_format)
        return

    if not target:
        _fail("--to option is required for conversion")

    if input_format == target:
        _fail(
            f"Input is already in {target} format. "
            "Use --to to specify a different target format."
        )

    compact = compact or settings.compact
    estimate_tokens = estimate_tokens or settings.estimate_tokens

    output_file = derive_output_path(input_file, target)
    try:
        output = _convert(content, target, compact, settings.json_indent)
        write_output(output_file, output)
    except (ToonifyError, ValueError) as e:
        _fail(f"Conversion failed: {e}")

    size = format_file_size(len(output.encode("utf-8")))
    success(
        f"Converted {click.style(str(input_file), fg='cyan')} → "
        f"{click.style(str(output_file), fg='cyan')} ({size})"
    )

    if estimate_tokens:
        _report_tokens(content, output)


if __name__ == "__main__":
    cli()
