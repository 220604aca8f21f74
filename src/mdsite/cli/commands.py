"""CLI command implementations"""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from mdsite.config import Settings, load_config
from mdsite.core.pipeline import execute


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def convert_cmd(
    convert: Annotated[bool, typer.Option("--convert", help="Regenerate page modules, indexes, and the README guide")] = False,
    ):
    """Convert docs and blog Markdown into generated page modules and metadata indexes."""
    if not convert:
        return
    _setup_logging()
    settings = _settings()

    try:
        report = execute(settings)
    except (RuntimeError, ValueError, OSError) as e:
        _fail("Convert failed", e)

    for label, out in report.pages:
        typer.echo(f"  {label} -> {out}")
    typer.echo(
        f"Converted {len(report.docs.files)} doc(s) and {len(report.blog.files)} post(s) - "
        f"{len(report.pages)} page module(s) in {settings.pages_dir}/"
    )
