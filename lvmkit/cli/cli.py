#!/usr/bin/env python3
"""
Main CLI entry point using Typer.
"""

import logging
import sys

import typer

from lvmkit.cli.commands import vg, volume
from lvmkit.cli.lib.config import load_config

app = typer.Typer(
    name="lvmkit",
    help="LVM volume group and thin volume tool",
    add_completion=False,
)

# Add command groups
app.add_typer(vg.app, name="vg", help="Volume group commands")
app.add_typer(volume.app, name="volume", help="Logical volume commands")


@app.callback()
def setup_logging(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log LVM commands as they run"),
):
    """
    Configure logging from the config file, or DEBUG with --verbose.
    """
    cfg = load_config()
    level = logging.DEBUG if verbose else cfg.log_level_value()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except KeyboardInterrupt:
        typer.echo("\nOperation cancelled by user", err=True)
        return 130


if __name__ == "__main__":
    sys.exit(main())
