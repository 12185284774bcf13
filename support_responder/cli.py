#!/usr/bin/env python3
"""
Support Responder CLI Interface

This module provides a command-line interface for chatting with the
support responder and inspecting its keywords and default responses.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ResponderConfig, load_config
from .logging_config import configure_logging
from .responder import ResponseGenerator
from .support_system import SupportSystem

# Initialize Typer app and Rich console
app = typer.Typer(
    name="support-responder",
    help="Support Responder - Keyword-triggered technical support console",
    add_completion=False
)
console = Console()


def _setup(responses: Optional[Path]) -> ResponderConfig:
    """Load configuration, apply CLI overrides and configure logging."""
    overrides = {}
    if responses is not None:
        overrides["default_responses_path"] = str(responses)
    try:
        config = load_config(**overrides)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    configure_logging(log_level=config.log_level, log_format=config.log_format)
    return config


@app.command()
def version():
    """Show version information."""
    console.print(f"Support Responder {__version__}")


@app.command()
def chat(
    responses: Optional[Path] = typer.Option(None, "--responses", "-r", help="Default responses file"),
):
    """Start an interactive support session."""
    config = _setup(responses)
    SupportSystem(ResponseGenerator(config)).start()


@app.command()
def keywords(
    responses: Optional[Path] = typer.Option(None, "--responses", "-r", help="Default responses file"),
):
    """List the trigger words and the number of default responses."""
    config = _setup(responses)
    responder = ResponseGenerator(config)

    table = Table(title="Keywords")
    table.add_column("Keyword", style="cyan")
    table.add_column("Response", style="green")
    for word in responder.keyword_table.words():
        first_line = next(iter(responder.keyword_table.lookup(word).splitlines()), "")
        table.add_row(word, first_line)
    console.print(table)
    console.print(f"Default responses: {len(responder.default_pool)}")
    console.print(f"Source: {escape(config.default_responses_path)}")
