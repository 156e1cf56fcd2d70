# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
pgconn CLI Commands.

Provides a CLI interface for parsing connection strings, bootstrapping and
installing config files, and inspecting resolved connection arguments.
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pgconn.errors import PgConnError
from pgconn.runtime import (
    config_path,
    init_config_files,
    options_path,
    resolve_connection_args,
    use_config,
)
from pgconn.types import ConnectionDescriptor
from pgconn.utils import (
    detect_conn_string_format,
    mask_descriptor,
    parse_connection_string,
)

console = Console()


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """PostgreSQL connection string and config CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command("parse")
@click.argument("conn_string")
@click.option("--show-password", is_flag=True, help="Print the password unmasked.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def parse_cmd(conn_string: str, show_password: bool, as_json: bool) -> None:
    """Parse a URI or keyword/value connection string."""
    try:
        descriptor = parse_connection_string(conn_string)
    except PgConnError as e:
        _print_error(e)
        raise SystemExit(1) from e

    conn_format = detect_conn_string_format(conn_string)
    _print_descriptor(
        descriptor,
        title=f"Connection parameters ({conn_format.value})",
        show_password=show_password,
        as_json=as_json,
    )


@cli.command("init")
def init_cmd() -> None:
    """Create the config directory and default config files."""
    directory = init_config_files()
    console.print(f"[bold green]Config files ready in {escape(str(directory))}[/bold green]")
    console.print("  Update connection configs: pgconn config-path")
    console.print("  Update connection options: pgconn config-path --options")


@cli.command("config-path")
@click.option("--options", "show_options", is_flag=True, help="Show the options file instead.")
def config_path_cmd(show_options: bool) -> None:
    """Print the path of the config (or options) file to edit."""
    click.echo(str(options_path() if show_options else config_path()))


@cli.command("use-config")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--overwrite", is_flag=True, help="Replace an existing config file.")
def use_config_cmd(path: str, overwrite: bool) -> None:
    """Install a YAML file as the active connection config."""
    try:
        target = use_config(path, overwrite=overwrite)
    except PgConnError as e:
        _print_error(e)
        raise SystemExit(1) from e
    console.print(f"[bold green]Active config: {escape(str(target))}[/bold green]")


@cli.command("args")
@click.option("--cfg", default=None, help="Named config from config.yml (default: PGCONN_CONN_STRING).")
@click.option("--db", default=None, help="Database name.")
@click.option("--show-password", is_flag=True, help="Print the password unmasked.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def args_cmd(
    cfg: str | None, db: str | None, show_password: bool, as_json: bool
) -> None:
    """Print the connection arguments a connection would use."""
    try:
        descriptor = resolve_connection_args(cfg, db)
    except PgConnError as e:
        _print_error(e)
        raise SystemExit(1) from e
    _print_descriptor(
        descriptor,
        title=f"Connection arguments ({cfg or 'PGCONN_CONN_STRING'})",
        show_password=show_password,
        as_json=as_json,
    )


def _print_error(error: PgConnError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")


def _print_descriptor(
    descriptor: ConnectionDescriptor,
    *,
    title: str,
    show_password: bool,
    as_json: bool,
) -> None:
    shown = descriptor if show_password else mask_descriptor(descriptor)
    if as_json:
        click.echo(json.dumps(shown, indent=2))
        return

    table = Table(title=title)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value")
    for key, value in shown.items():
        table.add_row(escape(key), escape(value))
    console.print(table)


__all__: list[str] = ["cli"]
