"""Validate a BMAD expansion pack configuration.

Usage:
    bmad-validate-config [--expansion-dir PATH] [--core-agents-dir PATH] [-v]

With no options, validates config.yaml in the current working directory.

Exit Codes:
    0: Validation passed (warnings may be present)
    1: One or more configuration errors
"""

import logging
from pathlib import Path

import click

from .validator import ConfigValidator


@click.command(name="bmad-validate-config")
@click.option(
    "--expansion-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Expansion pack directory containing config.yaml (default: current directory).",
)
@click.option(
    "--core-agents-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Shared core agents directory (default: <expansion-dir>/../../bmad-core/agents).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each validation stage to stderr.")
def main(expansion_dir: Path | None, core_agents_dir: Path | None, verbose: bool) -> None:
    """Check an expansion pack's config.yaml, team file and directory layout."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    validator = ConfigValidator(expansion_dir=expansion_dir, core_agents_dir=core_agents_dir)
    success = validator.run()
    raise SystemExit(0 if success else 1)
