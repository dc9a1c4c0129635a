"""CLI interface for Navstage.

Command-line tool for resolving and checking documentation sidebars.
"""

import asyncio
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path

import click

from navstage.config import CONSISTENCY_ERROR, Config
from navstage.core.navigation import NavigationBuilder, NavigationResult


@click.group()
def cli() -> None:
    """Navstage - Sidebar resolution for documentation portals."""


def _common_options(func: Callable[..., None]) -> Callable[..., None]:
    """Options shared by every command that loads a configuration."""
    func = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output (debug logging)",
    )(func)
    func = click.option(
        "--source-dir",
        "-s",
        type=click.Path(exists=True, path_type=Path, file_okay=False),
        default=None,
        help="Documentation source directory (overrides config)",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Path to configuration file (default: auto-discover navstage.toml)",
    )(func)
    return func


@cli.command()
@_common_options
@click.option(
    "--group",
    "-g",
    default=None,
    help="Only print this sidebar group",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat sidebar groups missing from top navigation as errors",
)
def resolve(
    config_path: Path | None,
    source_dir: Path | None,
    verbose: bool,
    group: str | None,
    strict: bool,
) -> None:
    """Resolve the sidebar and print it as JSON."""
    config = _load_config(config_path, source_dir, verbose, strict=strict)
    result = _build(config)

    if group is not None:
        if group in result.errors:
            _print_errors(result)
            sys.exit(1)
        if group not in result.groups:
            click.echo(
                click.style(f"Error: sidebar group not found: {group}", fg="red"),
                err=True,
            )
            sys.exit(1)
        output: object = [item.to_dict() for item in result.groups[group]]
    else:
        output = result.to_dict()["sidebar"]

    click.echo(json.dumps(output, indent=2, ensure_ascii=False))
    _print_errors(result)
    _print_issues(result)

    if not result.ok:
        sys.exit(1)


@cli.command()
@_common_options
@click.option(
    "--strict",
    is_flag=True,
    help="Treat sidebar groups missing from top navigation as errors",
)
def check(
    config_path: Path | None,
    source_dir: Path | None,
    verbose: bool,
    strict: bool,
) -> None:
    """Check that every sidebar group resolves and is in top navigation."""
    config = _load_config(config_path, source_dir, verbose, strict=strict)
    click.echo(f"Source directory: {config.docs.source_dir}")

    if config.sidebar is None:
        click.echo("No sidebar configured")
        return

    result = _build(config)

    for key in config.sidebar:
        if key in result.groups:
            count = len(result.groups[key])
            click.echo(click.style(f"✓ {key} ({count} items)", fg="green"))
        else:
            click.echo(
                click.style(f"✗ {key}: {result.errors[key]}", fg="red"),
                err=True,
            )

    _print_issues(result)

    if not result.ok:
        sys.exit(1)

    click.echo(click.style("\nSidebar is consistent.", fg="green", bold=True))


@cli.command()
@_common_options
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    verbose: bool,
    host: str | None,
    port: int | None,
) -> None:
    """Start the sidebar API server."""
    from navstage.server import run_server

    config = _load_config(config_path, source_dir, verbose)
    config = config.with_overrides(host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")

    run_server(config)


def _load_config(
    config_path: Path | None,
    source_dir: Path | None,
    verbose: bool,
    *,
    strict: bool = False,
) -> Config:
    """Configure logging and load config with CLI overrides.

    Raises:
        SystemExit: If the configuration cannot be loaded
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path)
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    return config.with_overrides(
        source_dir=source_dir,
        consistency=CONSISTENCY_ERROR if strict else None,
    )


def _build(config: Config) -> NavigationResult:
    """Run one navigation build cycle."""
    return asyncio.run(NavigationBuilder(config).build())


def _print_errors(result: NavigationResult) -> None:
    """Print sidebar resolution errors.

    Args:
        result: Navigation build result
    """
    for key, error in result.errors.items():
        click.echo(
            click.style(f"Error in sidebar {key}: {error}", fg="red"),
            err=True,
        )


def _print_issues(result: NavigationResult) -> None:
    """Print consistency issues as warnings, or errors when fatal.

    Args:
        result: Navigation build result
    """
    for issue in result.issues:
        if issue.fatal:
            click.echo(click.style(f"Error: {issue.message}", fg="red"), err=True)
        else:
            click.echo(click.style(f"Warning: {issue.message}", fg="yellow"), err=True)


if __name__ == "__main__":
    cli()
