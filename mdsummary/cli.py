"""Command-line interface for the book index parser.

Provides a Click-based CLI that checks SUMMARY.md files for syntax errors
and prints the parsed outline.
"""

import json
import logging
import sys
from dataclasses import asdict
from importlib.metadata import version as get_version
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .config import SummaryConfig
from .domain import Entry, Outline, SummaryError
from .services import SummaryResult, SummaryService

# Get version from package metadata
try:
    __version__ = get_version("mdsummary")
except Exception:
    __version__ = "0.0.0"  # Fallback version


# Context keys
SERVICE_KEY = "summary_service"


def get_summary_service(ctx: click.Context) -> SummaryService:
    """Get the summary service from click context."""
    return ctx.obj[SERVICE_KEY]


def resolve_location(path: str | None) -> Path:
    """Resolve the PATH argument, falling back to the configured book root."""
    if path is not None:
        return Path(path).resolve()
    return SummaryConfig.get_default_book_root().resolve()


def _load(ctx: click.Context, path: str | None) -> SummaryResult:
    service = get_summary_service(ctx)
    location = resolve_location(path)

    try:
        return service.parse_file(location)
    except SummaryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except PermissionError as e:
        click.echo(f"Error: Permission denied - {e}", err=True)
        sys.exit(1)


def _report_errors(result: SummaryResult) -> None:
    source = result.source or "<text>"
    for message in result.messages:
        click.echo(f"{source}:{message}", err=True)
    click.echo(f"Found {len(result.errors)} error(s).", err=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__, prog_name="mdsummary")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """mdsummary - Parse book index (SUMMARY.md) files.

    PATH arguments accept either a SUMMARY.md file or a book directory;
    directories are searched for src/SUMMARY.md, then SUMMARY.md.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else SummaryConfig.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj[SERVICE_KEY] = SummaryService(SummaryConfig)


@cli.command()
@click.argument("path", type=click.Path(exists=True), default=None, required=False)
@click.pass_context
def check(ctx: click.Context, path: str | None) -> None:
    """Check an index file for syntax errors.

    PATH is the SUMMARY.md file or book directory (default: current directory).

    Every error is reported as FILE:LINE:COLUMN: MESSAGE.
    """
    result = _load(ctx, path)

    if not result.ok:
        _report_errors(result)
        sys.exit(1)

    click.echo(f"OK: {result.source} ({result.entry_count} entries)")


@cli.command()
@click.argument("path", type=click.Path(exists=True), default=None, required=False)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["tree", "markdown", "json"]),
    default="tree",
    help="Output format (default: tree).",
)
@click.pass_context
def show(ctx: click.Context, path: str | None, output_format: str) -> None:
    """Print the parsed outline.

    PATH is the SUMMARY.md file or book directory (default: current directory).
    """
    result = _load(ctx, path)

    if not result.ok:
        _report_errors(result)
        sys.exit(1)

    outline = result.outline
    if output_format == "markdown":
        click.echo(outline.to_markdown(), nl=False)
    elif output_format == "json":
        click.echo(json.dumps(asdict(outline), indent=2, ensure_ascii=False))
    else:
        Console().print(_build_tree(outline, str(result.source)))


def _build_tree(outline: Outline, label: str) -> Tree:
    """Build a rich tree with one branch per non-empty section."""
    colors = SummaryConfig.COLORS
    tree = Tree(f"[{colors['header']}]{escape(label)}[/{colors['header']}]")
    sections = (
        ("Prefaces", outline.prefaces),
        ("Chapters", outline.chapters),
        ("Appendices", outline.appendices),
    )
    for name, entries in sections:
        if not entries:
            continue
        branch = tree.add(f"[{colors['section']}]{name}[/{colors['section']}]")
        for entry in entries:
            _add_entry(branch, entry)
    return tree


def _add_entry(branch: Tree, entry: Entry) -> None:
    dest_style = SummaryConfig.COLORS["destination"]
    node = branch.add(
        f"{escape(entry.title)} [{dest_style}]({escape(entry.destination)})[/{dest_style}]"
    )
    for child in entry.children or ():
        _add_entry(node, child)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
