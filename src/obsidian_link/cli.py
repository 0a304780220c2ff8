"""CLI entry point for obsidian-link."""

import logging
import os
import sys

import click

from . import __version__
from .config import load_config
from .exceptions import ConfigError, ObsidianLinkError
from .handlers import handle_url


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.argument("url")
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the YAML config (default: ~/.config/obsidian-link/obsidian-link.yml "
         "or OBSIDIAN_LINK_CONFIG env var)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.version_option(__version__, prog_name="obsidian-link")
def main(url, config_path, verbose):
    """Save a URL as a note in an Obsidian vault.

    Video links are enriched with title, description, channel and tags from
    the YouTube Data API and get an embedded player.

    Example: obsidian-link https://www.youtube.com/watch?v=dQw4w9WgXcQ
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_path=config_path, verbose=verbose)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Vault path: {config.vault_path}")
        click.echo(f"Rules: {', '.join(rule.name for rule in config.rules)}")

    click.echo(f"Processing: {url}")
    try:
        path = handle_url(url, config)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    except ObsidianLinkError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote note to: {path}")
