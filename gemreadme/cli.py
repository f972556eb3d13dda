"""
gemreadme CLI - README inspection tool

A command-line tool for pulling structured data out of gem READMEs:
1. Usage examples from Usage / Installation / Examples sections
2. A display-cleaned copy of the markdown
3. The lead description paragraph
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.markup import escape

from gemreadme import __version__
from gemreadme.config import get_log_level
from gemreadme.readme import ReadmeParser, ReadmeProcessor

app = typer.Typer(
    name="gemreadme",
    help="Extract usage examples and descriptions from gem READMEs",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def _read_readme(path: str) -> str:
    """Read README text from a file, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()

    try:
        return Path(path).read_text(encoding='utf-8', errors='ignore')
    except OSError as e:
        console.print(f"[red]❌ Cannot read README: {path} ({e.strerror or e})[/red]")
        raise typer.Exit(1)


@app.command()
def examples(
    path: str = typer.Argument(..., help="README file (use '-' for stdin)"),
    no_examples: bool = typer.Option(False, "--no-examples", help="Skip example extraction"),
    as_json: bool = typer.Option(False, "--json", help="Print examples as JSON"),
):
    """
    Extract usage examples from a README.

    Example:
        gemreadme examples README.md --json
    """
    content = _read_readme(path)
    usage_examples = ReadmeParser().parse_usage_examples(content, include_examples=not no_examples)

    if as_json:
        typer.echo(json.dumps([example.model_dump() for example in usage_examples], indent=2))
        return

    if not usage_examples:
        console.print("[yellow]No usage examples found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Language")
    table.add_column("Description")

    for idx, example in enumerate(usage_examples, start=1):
        table.add_row(str(idx), example.title, example.language, escape(example.description or "-"))

    console.print(table)

    for idx, example in enumerate(usage_examples, start=1):
        console.print(Panel(
            Text(example.code),
            title=f"{idx}. {example.title}",
            subtitle=example.language,
            border_style="cyan",
        ))


@app.command()
def clean(
    path: str = typer.Argument(..., help="README file (use '-' for stdin)"),
):
    """Print the README with badges and relative links removed."""
    typer.echo(ReadmeParser().clean_markdown(_read_readme(path)))


@app.command()
def describe(
    path: str = typer.Argument(..., help="README file (use '-' for stdin)"),
):
    """Print the README's lead description."""
    typer.echo(ReadmeParser().extract_description(_read_readme(path)))


@app.command()
def process(
    path: str = typer.Argument(..., help="README file (use '-' for stdin)"),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Gem name (adds install snippets)"),
    summary: Optional[str] = typer.Option(
        None,
        "--summary",
        "-s",
        help="Summary used as the README when the file is empty",
    ),
    no_examples: bool = typer.Option(False, "--no-examples", help="Skip example extraction"),
):
    """
    Print the full README digest as JSON.

    Example:
        gemreadme process README.md --package my_gem
    """
    processed = ReadmeProcessor().process(
        _read_readme(path),
        include_examples=not no_examples,
        package_name=package,
        fallback_summary=summary,
    )
    typer.echo(processed.model_dump_json(indent=2))


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]gemreadme[/bold cyan] v{__version__}")
    console.print("Gem README example extraction tool")


if __name__ == "__main__":
    app()
