"""vibedetector CLI -- Detect AI coding assistant configuration files.

Entry point for the ``vibedetector`` command-line tool.

Usage::

    vibedetector                    # Scan current directory
    vibedetector /path/to/project   # Scan specific directory
    vibedetector -f json            # Output as JSON
    vibedetector -f compact         # Just list tool names
    vibedetector -l                 # List all supported tools
    vibedetector -q && echo "Found" # Use in scripts

Exit Codes:
    0 -- At least one tool detected (also --list, --version, --help).
    1 -- No tools detected.
    2 -- Bad arguments, or the target is missing or not a directory.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from vibedetector import PROGRAM_NAME, __version__
from vibedetector.cli.output import format_tool_list, render
from vibedetector.discovery import detect_tools, resolve_target_directory
from vibedetector.exceptions import TargetDirectoryError

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

_EPILOG = """\b
Detects configuration files for various "vibe coding" tools including:
Claude Code, Cursor, Windsurf, GitHub Copilot, Aider, Cline, Zed,
Continue.dev, Kiro, Gemini CLI, and more.

\b
Examples:
  vibedetector                    # Scan current directory
  vibedetector /path/to/project   # Scan specific directory
  vibedetector -f json            # Output as JSON
  vibedetector -f compact         # Just list tool names
  vibedetector -l                 # List all supported tools
  vibedetector -q && echo "Found" # Use in scripts
"""


def _print_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Write usage text to stderr and stop."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit(0)


def _select_format(short_format: str, long_format: str) -> str:
    """Pick the output format; a non-default ``--format`` wins over ``-f``."""
    return long_format if long_format != "plain" else short_format


@click.command(
    PROGRAM_NAME,
    epilog=_EPILOG,
    context_settings={"help_option_names": []},
)
@click.argument("directory", required=False, default=".")
@click.option(
    "-f", "short_format",
    default="plain",
    metavar="FORMAT",
    help="Output format: plain, json, compact, table (default: plain).",
)
@click.option(
    "--format", "long_format",
    default="plain",
    metavar="FORMAT",
    help="Same as -f; takes precedence when both are given.",
)
@click.option(
    "-l", "--list", "list_tools",
    is_flag=True,
    default=False,
    help="List all supported tools and their configuration files.",
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    default=False,
    help="Quiet mode - only return exit code (0 if detected, 1 if not).",
)
@click.version_option(
    __version__, "-v", "--version",
    prog_name=PROGRAM_NAME,
    message="%(prog)s %(version)s",
    help="Show version.",
)
@click.option(
    "-h", "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_help,
    help="Show this message and exit.",
)
def cli(
    directory: str,
    short_format: str,
    long_format: str,
    list_tools: bool,
    quiet: bool,
) -> None:
    """Detect AI coding assistant configuration files in DIRECTORY.

    DIRECTORY defaults to the current directory.
    """
    if list_tools:
        click.echo(format_tool_list(), nl=False)
        sys.exit(0)

    try:
        target = resolve_target_directory(directory)
    except TargetDirectoryError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(2)

    logger.debug("Scanning %s", target)
    detections = detect_tools(target)
    logger.debug("Found %d configuration entries", len(detections))

    if not quiet:
        output_format = _select_format(short_format, long_format)
        click.echo(render(output_format, detections, target))

    sys.exit(0 if detections else 1)
