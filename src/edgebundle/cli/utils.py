"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, logging setup, and the config/session loading every
command starts with.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import click

from ..config import BundleConfig, load_config
from ..core.exceptions import ConfigError, DataLoadError
from ..session import BundleSession


def echo_success(message: str) -> None:
    """Green checkmark line on stdout."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Indented, dimmed detail line."""
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )


def resolve_config(config_file: Optional[str]) -> Optional[BundleConfig]:
    """
    Load the configuration, printing the problem on failure.

    Returns:
        Optional[BundleConfig]: The config, or None if it was invalid.
    """
    try:
        return load_config(Path(config_file) if config_file else None)
    except ConfigError as e:
        echo_error(str(e))
        return None


def load_session(
    input_file: str,
    config: Optional[BundleConfig] = None,
    locked: Iterable[str] = (),
) -> Optional[BundleSession]:
    """
    Build a session for an input document.

    Args:
        input_file (str): Path to the hierarchy document (.json, .yaml).
        config: Rendering configuration, defaults when omitted.
        locked: Leaf ids to lock before the first frame.

    Returns:
        Optional[BundleSession]: The session, or None if the document failed to load.
    """
    try:
        return BundleSession.from_path(input_file, config=config, locked=locked)
    except DataLoadError as e:
        echo_error(str(e))
        click.echo("Nothing was rendered. Fix the input document and retry.", err=True)
        return None
