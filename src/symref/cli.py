"""
CLI for symref.

Usage:
    symref render json --output docs/json.html
    symref render mypkg.core mypkg.utils --format markdown --all
    symref parse-comment comment.txt
    symref stats mypkg.core --json
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from symref import __version__
from symref.config import SymrefSettings
from symref.errors import SymrefError
from symref.logging import configure_logging
from symref.orchestrator import ReferenceOrchestrator
from symref.parser.comment_parser import CommentParser

console = Console(stderr=True)


def _load_settings(config_path: str | None, **overrides) -> SymrefSettings:
    if config_path:
        return SymrefSettings.from_yaml(Path(config_path), **overrides)
    return SymrefSettings(**{key: value for key, value in overrides.items() if value is not None})


@click.group()
@click.version_option(version=__version__)
def cli():
    """Runtime symbol reference generator.

    Introspects imported modules and renders their functions, classes and
    constants, with parsed documentation comments, as HTML or Markdown.
    """
    settings = SymrefSettings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


@cli.command()
@click.argument("modules", nargs=-1, required=True)
@click.option(
    "--all", "include_all",
    is_flag=True,
    help="Include host built-ins, not only symbols defined in MODULES.",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["html", "markdown"]),
    default=None,
    help="Output format (default: html).",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="File to write. Prints to stdout if omitted.",
)
@click.option(
    "--searchable",
    is_flag=True,
    help="Add the search input (HTML).",
)
@click.option(
    "--script-src",
    default=None,
    help="Script URL referenced by the trailer (HTML).",
)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration file.",
)
def render(
    modules: tuple,
    include_all: bool,
    output_format: str | None,
    output: str | None,
    searchable: bool,
    script_src: str | None,
    config_path: str | None,
):
    """Render a reference document for MODULES.

    Examples:
        symref render json
        symref render mypkg.api -f markdown -o docs/api.md
    """
    try:
        settings = _load_settings(
            config_path,
            include_all=include_all or None,
            output_format=output_format,
            searchable=searchable or None,
            script_src=script_src,
        )
        if config_path:
            # The file may set its own log level.
            configure_logging(level=settings.log_level, json_format=settings.json_logs)

        orchestrator = ReferenceOrchestrator(settings)
        result = orchestrator.introspect_modules(list(modules))
        content = orchestrator.generate(result, Path(output) if output else None)
    except SymrefError as e:
        console.print(f"[bold red]❌ {escape(e.message)}[/bold red]")
        sys.exit(1)

    if output:
        console.print(f"✅ {output} ({len(content.encode('utf-8')):,} bytes)")
    else:
        click.echo(content)


@cli.command("parse-comment")
@click.argument("source", type=click.File("r"), default="-")
def parse_comment(source):
    """Parse a documentation comment and show its description and tags.

    Reads SOURCE (a file, or stdin when omitted). Useful for checking how a
    comment will appear in the rendered reference.
    """
    parsed = CommentParser().parse(source.read())

    out = Console()
    out.print("[bold]Description:[/bold]")
    out.print(escape(parsed.description) if parsed.description else "[dim](none)[/dim]")
    out.print()

    table = Table(title=f"Tags ({len(parsed.tags)})")
    table.add_column("Tag", style="cyan")
    table.add_column("Body")
    for tag in parsed.tags:
        table.add_row(escape(f"@{tag.name}"), escape(tag.body))

    out.print(table)


@cli.command()
@click.argument("modules", nargs=-1, required=True)
@click.option(
    "--all", "include_all",
    is_flag=True,
    help="Include host built-ins.",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Output as JSON.",
)
def stats(modules: tuple, include_all: bool, as_json: bool):
    """Show symbol counts for MODULES."""
    try:
        settings = SymrefSettings(include_all=include_all)
        orchestrator = ReferenceOrchestrator(settings)
        doc_stats = orchestrator.get_stats(orchestrator.introspect_modules(list(modules)))
    except SymrefError as e:
        console.print(f"[bold red]❌ {escape(e.message)}[/bold red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(doc_stats, indent=2))
        return

    table = Table(title="Symbols")
    table.add_column("Kind", style="cyan")
    table.add_column("Count", justify="right")
    for kind in ("functions", "classes", "methods", "constants"):
        table.add_row(kind, str(doc_stats[kind]))

    out = Console()
    out.print(table)
    out.print(f"[bold]Total symbols:[/bold] {doc_stats['total_symbols']}")


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
