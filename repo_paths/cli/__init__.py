"""CLI command group for repository suffixes.

This module exposes the root Click command group `repo_paths` which
aggregates subcommands implemented in sibling modules.

Example usage:

        repo-paths decompose /5.5.5/Generic/lib/gas/5.1.0/gas.tar.gz
        repo-paths compose 5.5.5 --area Generic --side lib --name mnesia --vsn 1.0
        repo-paths rel-file 5.5.5 faxien 1.0
"""

from __future__ import annotations

import logging

import click

from repo_paths import __version__

from .compose import app_file_cmd, compose_cmd, erts_package_cmd, rel_file_cmd
from .decompose import decompose_cmd

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="repo-paths")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging level",
)
def repo_paths(log_level: str):
    """Compose and decompose repository location suffixes."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(getattr(logging, log_level))
    logger.debug(f"Set logging level to {log_level}")


# Register subcommands
repo_paths.add_command(decompose_cmd)
repo_paths.add_command(compose_cmd)
repo_paths.add_command(app_file_cmd)
repo_paths.add_command(rel_file_cmd)
repo_paths.add_command(erts_package_cmd)

__all__ = ["repo_paths"]
