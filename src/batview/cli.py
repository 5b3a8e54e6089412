"""
Command-line interface for batview.

This module provides the CLI using Click framework for argument parsing
and runs the annotate-then-print pipeline for every file.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from batview import __version__
from batview.config import Config, find_config_file, load_config
from batview.highlighting import HighlightingAssets, ThemeNotFoundError, available_themes
from batview.output.printer import Printer, TerminalTooNarrowError
from batview.vcs.annotator import get_line_changes

err_console = Console(stderr=True, highlight=False)


def _make_console(color: str) -> Console:
    """Create the stdout console for a color choice."""
    if color == "always":
        return Console(force_terminal=True, highlight=False)
    if color == "never":
        return Console(color_system=None, highlight=False)
    return Console(highlight=False)


def _silence_stdout() -> None:
    """Point stdout at devnull so the final flush at exit cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def _report(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


@click.command()
@click.version_option(version=__version__, prog_name="batview")
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
)
@click.option(
    "--theme",
    "-t",
    type=str,
    help="Syntax highlighting theme (default: from config, else monokai).",
)
@click.option(
    "--color",
    type=click.Choice(["auto", "always", "never"]),
    help="When to use colors (default: from config, else auto).",
)
@click.option(
    "--no-git",
    is_flag=True,
    help="Do not show git change markers.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    config: Optional[Path],
    theme: Optional[str],
    color: Optional[str],
    no_git: bool,
    verbose: bool,
) -> None:
    """batview - Print files with syntax highlighting and git change markers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings: Config = load_config(config or find_config_file(Path.cwd()))
    except (FileNotFoundError, ValueError) as e:
        _report(str(e))
        raise click.Abort()

    theme_name = theme or settings.output.theme
    try:
        assets = HighlightingAssets.load(theme_name)
    except ThemeNotFoundError as e:
        _report(str(e))
        err_console.print(f"[dim]Available themes: {', '.join(available_themes())}[/dim]")
        raise click.Abort()

    console = _make_console(color or settings.output.color)
    printer = Printer(console, assets)
    use_git = settings.git.enabled and not no_git
    failed = False

    try:
        for file in files:
            console.print(file, markup=False, emoji=False, soft_wrap=True)
            line_changes = get_line_changes(file) if use_git else None
            try:
                printer.print_file(file, line_changes)
            except BrokenPipeError:
                raise
            except OSError as e:
                failed = True
                _report(str(e))
    except BrokenPipeError:
        # Downstream consumer closed the pipe early (for example, `| head`).
        _silence_stdout()
        ctx.exit(0)
    except TerminalTooNarrowError as e:
        _report(str(e))
        raise click.Abort()

    if failed:
        ctx.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()
