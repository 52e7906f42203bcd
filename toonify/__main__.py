"""Entry point for ``python -m toonify``"""

from toonify.cli.cli import cli

if __name__ == "__main__":
    cli()
