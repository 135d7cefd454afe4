"""Decompose command.

Prints the typed segments of a suffix as a table, or as JSON with
``--json``. A rejected suffix exits with status 1 and the tagged error.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ..grammar import Grammar, default_grammar
from ..parser import decompose_suffix


def load_grammar(path: Path | None) -> Grammar:
    if path is None:
        return default_grammar()
    try:
        return Grammar.load(path)
    except (KeyError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--grammar") from e


grammar_option = click.option(
    "--grammar",
    "grammar_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Alternative grammar specification YAML (default: packaged grammar)",
)


@click.command("decompose")
@click.argument("suffix", type=str)
@click.option("--json", "as_json", is_flag=True, help="Emit segments as JSON")
@grammar_option
def decompose_cmd(suffix: str, as_json: bool, grammar_path: Path | None):
    """Split SUFFIX into typed, validated segments."""
    result = decompose_suffix(suffix, load_grammar(grammar_path))
    if not result.ok:
        error = result.error
        if as_json:
            payload = {"error": error.reason.value, "token": error.token}
            click.echo(json.dumps(payload, indent=2))
        else:
            click.echo(f"Invalid suffix: {error}", err=True)
        raise SystemExit(1)

    if as_json:
        payload = [segment.model_dump(mode="json") for segment in result.segments]
        click.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=suffix)
    table.add_column("kind")
    table.add_column("text")
    for segment in result.segments:
        table.add_row(segment.kind.value, segment.text)
    Console(soft_wrap=True).print(table)


__all__ = ["decompose_cmd", "grammar_option", "load_grammar"]
