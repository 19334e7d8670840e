"""Command-line interface for checking and sanitizing file names."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import SanitizerConfig, load_config
from .errors import ConfigError, PolicyConfigurationError
from .naming.checks import is_reserved, is_safe
from .rules.models import DotAction, MethodKind
from .rules.tables import NOT_ALLOWED_NAMES, NOT_ALLOWED_NAMES_WIN11
from .service import BatchResult, SanitizeService

app = typer.Typer(help="Check and sanitize file names for Windows, macOS and Linux.")
console = Console()


def _build_service(config: SanitizerConfig) -> SanitizeService:
    try:
        return SanitizeService(config.build_method(), config.build_dot_policy(), strict=config.strict)
    except PolicyConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _format_result(result: BatchResult) -> None:
    table = Table(title="Sanitized Names")
    table.add_column("Original")
    table.add_column("Sanitized")
    table.add_column("Changed", justify="center")
    for outcome in result.outcomes:
        table.add_row(repr(outcome.original), repr(outcome.sanitized), "yes" if outcome.changed else "")
    console.print(table)

    summary = Table(title="Summary")
    summary.add_column("Metric")
    summary.add_column("Value", justify="right")
    summary.add_row("Processed names", str(result.processed))
    summary.add_row("Changed names", str(result.changed))
    summary.add_row("Unchanged names", str(result.unchanged))
    console.print(summary)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a configuration TOML file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log sanitizer decisions"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
    ctx.obj = {"config_path": config_path}


def _resolve_config(ctx: typer.Context, **overrides: object) -> SanitizerConfig:
    config_path: Optional[Path] = ctx.obj.get("config_path")
    try:
        return load_config(config_path).apply_overrides(**overrides)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def sanitize(
    ctx: typer.Context,
    names: list[str] = typer.Argument(..., help="Names to sanitize"),
    method: Optional[MethodKind] = typer.Option(
        None,
        "--method",
        "-m",
        help="How disallowed characters are rewritten",
    ),
    replace_char: Optional[str] = typer.Option(
        None,
        "--replace-char",
        "-r",
        help="Replacement preset (underscore, space, ...) or a single character",
    ),
    dot_policy: Optional[DotAction] = typer.Option(
        None,
        "--dot-policy",
        "-d",
        help="How trailing dots are handled",
    ),
    dot_char: Optional[str] = typer.Option(
        None,
        "--dot-char",
        help="Glyph replacing a trailing dot (with --dot-policy replace)",
    ),
    plain: bool = typer.Option(False, "--plain", help="Print only the sanitized names, one per line"),
) -> None:
    """Rewrite names so they can be created on every major filesystem."""

    config = _resolve_config(
        ctx,
        method=method,
        replace_char=replace_char,
        dot_policy=dot_policy,
        dot_replace_char=dot_char,
    )
    service = _build_service(config)
    try:
        result = service.sanitize_many(names)
    except PolicyConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if plain:
        for outcome in result.outcomes:
            typer.echo(outcome.sanitized)
        return
    _format_result(result)


@app.command()
def check(
    ctx: typer.Context,
    names: list[str] = typer.Argument(..., help="Names to check"),
    creatable_only: bool = typer.Option(
        False,
        "--creatable-only",
        help="Only report names that cannot be created at all",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Use the Windows 11 reserved names and exact matching only",
    ),
) -> None:
    """Report whether names can be used unchanged. Exits with 1 if any is unsafe."""

    config = _resolve_config(ctx, strict=False if lenient else None)

    table = Table(title="Name Check")
    table.add_column("Name")
    table.add_column("Safe", justify="center")
    table.add_column("Reserved", justify="center")
    unsafe = 0
    for name in names:
        safe = is_safe(name, only_check_creatable=creatable_only, strict=config.strict)
        if not safe:
            unsafe += 1
        table.add_row(
            repr(name),
            "[green]yes[/green]" if safe else "[red]no[/red]",
            "yes" if is_reserved(name, config.strict) else "",
        )
    console.print(table)

    if unsafe:
        raise typer.Exit(code=1)


@app.command()
def reserved(
    win11: bool = typer.Option(False, "--win11", help="List the Windows 11 set instead of the strict set"),
) -> None:
    """List the device names Windows reserves."""

    for name in NOT_ALLOWED_NAMES_WIN11 if win11 else NOT_ALLOWED_NAMES:
        typer.echo(name)


def run() -> None:
    """Entry point for console scripts."""

    app()


if __name__ == "__main__":  # pragma: no cover
    run()
