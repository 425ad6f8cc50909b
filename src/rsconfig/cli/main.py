"""
rsconfig command-line interface.

Builds a registry the way the host module does at startup (environment
override, then the startup tokens) and reports on it.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rsconfig.cli.exit_codes import EXIT_USER_CANCEL, CliExit
from rsconfig.core.config import (
    ALL_OPTIONS,
    ConfigError,
    ConfigRegistry,
    load_environment,
    min_threads_requested,
)
from rsconfig.core.utils.logger import LOG_LEVEL_ENV, setup_logging

# Logs share stdout with the reports, so keep them quiet unless asked
CLI_DEFAULT_LOG_LEVEL = "WARNING"
NO_VALUE = "(nil)"
# Tokens such as "-5" are values, not options; "--" still ends option parsing
TOKEN_CONTEXT = {"ignore_unknown_options": True}

console = Console()

app = typer.Typer(
    name="rsconfig",
    help="Inspect the search module configuration registry",
    no_args_is_help=True,
)


@app.callback()
def callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Read environment variables from this file instead of the nearest .env",
    ),
) -> None:
    """rsconfig - typed configuration registry diagnostics"""
    load_environment(str(env_file) if env_file else None)
    try:
        setup_logging(log_level or os.getenv(LOG_LEVEL_ENV) or CLI_DEFAULT_LOG_LEVEL)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")


def _describe_error(exc: ConfigError) -> str:
    if exc.detail:
        return f"{exc.message} ({exc.detail})"
    return exc.message


def _build_registry(tokens: List[str]) -> ConfigRegistry:
    registry = ConfigRegistry()
    try:
        registry.load_from_tokens(tokens, min_threads=min_threads_requested())
    except ConfigError as exc:
        raise CliExit.config_error(_describe_error(exc))
    return registry


def _render_value(value: Optional[str]) -> str:
    return NO_VALUE if value is None else escape(value)


@app.command("dump", context_settings=TOKEN_CONTEXT)
def dump(
    tokens: Optional[List[str]] = typer.Argument(
        None, help="Startup tokens, e.g. MINPREFIX 3 NOGC"
    ),
    option: str = typer.Option(
        ALL_OPTIONS, "--option", "-o", help="Option to show, or * for all"
    ),
    describe: bool = typer.Option(False, "--describe", help="Include help text"),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON output"),
) -> None:
    """Show option values after applying the startup tokens."""
    registry = _build_registry(tokens or [])
    entries = registry.dump_option(option, include_help=describe)

    if json_output:
        typer.echo(json.dumps(entries, indent=2))
        return
    if not entries:
        console.print(f"[yellow]No such option: {escape(option)}[/yellow]")
        return

    table = Table(title="Configuration")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value")
    if describe:
        table.add_column("Description")
    for entry in entries:
        name = entry[0]
        label = f"[bold]{name}[/bold] *" if registry.is_modified(name) else name
        if describe:
            table.add_row(label, _render_value(entry[4]), escape(entry[2]))
        else:
            table.add_row(label, _render_value(entry[1]))
    console.print(table)
    if any(registry.is_modified(entry[0]) for entry in entries):
        console.print("* set by startup tokens")


@app.command("info", context_settings=TOKEN_CONTEXT)
def info(
    tokens: Optional[List[str]] = typer.Argument(
        None, help="Startup tokens, e.g. SAFEMODE TIMEOUT 100"
    ),
) -> None:
    """Print the one-line configuration summary."""
    registry = _build_registry(tokens or [])
    typer.echo(registry.info_string())


@app.command("set", context_settings=TOKEN_CONTEXT)
def set_option(
    name: str = typer.Argument(..., help="Option name (case-sensitive)"),
    values: Optional[List[str]] = typer.Argument(None, help="Value tokens"),
    startup: Optional[List[str]] = typer.Option(
        None, "--startup", "-s", help="Startup token, repeat for each token"
    ),
) -> None:
    """Change one option at runtime and print its new value."""
    registry = _build_registry(startup or [])
    values = values or []
    try:
        consumed = registry.set_option(name, values)
    except ConfigError as exc:
        raise CliExit.config_error(_describe_error(exc))
    if consumed < len(values):
        raise CliExit.error(f"Unexpected arguments: {' '.join(values[consumed:])}")
    value = registry.get_option(name)
    typer.echo(f"{name} = {NO_VALUE if value is None else value}")


def main() -> None:
    """Console script entry point."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Operation cancelled by user", err=True)
        sys.exit(EXIT_USER_CANCEL)


if __name__ == "__main__":
    main()
