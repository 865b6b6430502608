"""CLI interface for Wikinav.

Serves navigation over HTTP or prints it for a single document.
"""

import json
import logging
from pathlib import Path

import click

from wikinav.config import Config
from wikinav.core.navigation import PageNavigator
from wikinav.core.page import PageContext
from wikinav.core.scanner import ScanError


@click.group()
def cli() -> None:
    """Wikinav - navigation for filesystem-backed wikis."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None, **overrides) -> Config:
    try:
        return Config.load(config_path).with_overrides(**overrides)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover wikinav.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
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
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every directory scan)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the navigation server."""
    from wikinav.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path, host=host, port=port, source_dir=source_dir)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")

    try:
        run_server(config)
    except ScanError as e:
        raise click.ClickException(f"Invalid source directory: {e}") from e


@cli.command()
@click.argument("path", default="/")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover wikinav.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every directory scan)",
)
def nav(
    path: str,
    config_path: Path | None,
    source_dir: Path | None,
    verbose: bool,
) -> None:
    """Print navigation of the document at PATH as JSON."""
    _configure_logging(verbose)
    config = _load_config(config_path, source_dir=source_dir)
    root_dir = config.docs.source_dir

    try:
        context = PageContext.resolve(root_dir, path)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e

    try:
        navigation = PageNavigator(context, root_dir).build()
    except ScanError as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(navigation.to_dict(), indent=2))
