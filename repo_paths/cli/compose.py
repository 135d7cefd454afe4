"""Compose commands.

`compose` validates the given components against the grammar before
joining them; the fixed-form commands (`app-file`, `rel-file`,
`erts-package`) call the builders directly.
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from .. import builder
from ..grammar import SuffixComponents
from .decompose import grammar_option, load_grammar


@click.command("compose")
@click.argument("erts_vsn", type=str)
@click.option("--area", default=None, help="Deployment area (architecture, Generic or Meta)")
@click.option(
    "--side",
    default=None,
    help="Distribution side, lib or releases by default (dropped under Meta)",
)
@click.option("--name", "package_name", default=None, help="Package name")
@click.option("--vsn", "package_vsn", default=None, help="Package version")
@click.option("--file", "package", default=None, help="Terminal package file name")
@grammar_option
def compose_cmd(
    erts_vsn: str,
    area: str | None,
    side: str | None,
    package_name: str | None,
    package_vsn: str | None,
    package: str | None,
    grammar_path: Path | None,
):
    """Build the suffix for ERTS_VSN and the given components."""
    data = {
        "erts_vsn": erts_vsn,
        "area": area,
        "side": side,
        "package_name": package_name,
        "package_vsn": package_vsn,
        "package": package,
    }
    grammar = load_grammar(grammar_path)
    try:
        components = SuffixComponents.model_validate(data, context={"grammar": grammar})
    except ValidationError as e:
        for error in e.errors():
            click.echo(f"Invalid components: {error['msg']}", err=True)
        raise SystemExit(1)
    try:
        suffix = components.compose()
    except ValueError as e:
        click.echo(f"Cannot compose: {e}", err=True)
        raise SystemExit(1)
    click.echo(suffix)


@click.command("app-file")
@click.argument("erts_vsn", type=str)
@click.argument("app_name", type=str)
@click.argument("app_vsn", type=str)
def app_file_cmd(erts_vsn: str, app_name: str, app_vsn: str):
    """Print the suffix of the .app file for APP_NAME at APP_VSN."""
    click.echo(builder.dot_app_file_suffix(erts_vsn, app_name, app_vsn))


@click.command("rel-file")
@click.argument("erts_vsn", type=str)
@click.argument("release_name", type=str)
@click.argument("release_vsn", type=str)
def rel_file_cmd(erts_vsn: str, release_name: str, release_vsn: str):
    """Print the suffix of the .rel file for RELEASE_NAME at RELEASE_VSN."""
    click.echo(builder.dot_rel_file_suffix(erts_vsn, release_name, release_vsn))


@click.command("erts-package")
@click.argument("erts_vsn", type=str)
@click.argument("area", type=str)
def erts_package_cmd(erts_vsn: str, area: str):
    """Print the suffix of the runtime tarball for AREA."""
    click.echo(builder.erts_package_suffix(erts_vsn, area))


__all__ = ["app_file_cmd", "compose_cmd", "erts_package_cmd", "rel_file_cmd"]
