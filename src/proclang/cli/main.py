"""CLI entry point for proclang.

Invoked as::

    proclang [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m proclang.cli.main

Commands
--------
tokens      Lex a source file and print its tokens
check       Lex a source file and report every lexing error
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from proclang import IdentifierProfile, LexerConfig

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

_KIND_COLORS = {
    "NUMBER": "cyan",
    "COMMENT": "dim",
    "STRING": "green",
    "SYMBOL": "white",
    "OPERATOR": "magenta",
    "IDENTIFIER": "blue",
    "KEYWORD": "bold yellow",
    "ERROR": "red",
}


def _read_source(path: str) -> str:
    """Read a proclang source file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _make_config(ascii_identifiers: bool, include_comments: bool = True, recover: bool = False) -> LexerConfig:
    profile = IdentifierProfile.ASCII if ascii_identifiers else IdentifierProfile.UNICODE
    return LexerConfig(identifier_profile=profile, include_comments=include_comments, recover=recover)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="proclang")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """proclang toolkit: lex proclang source files."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from proclang import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]proclang[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# tokens command
# ---------------------------------------------------------------------------


@cli.command(name="tokens")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Token output format",
)
@click.option("--output", "-o", default=None, help="Output file path for json/yaml (defaults to stdout)")
@click.option("--no-comments", is_flag=True, default=False, help="Drop comment tokens")
@click.option("--ascii-identifiers", is_flag=True, default=False, help="Restrict identifiers to ASCII letters")
@click.option("--show-source", is_flag=True, default=False, help="Print the file contents before the tokens")
def tokens_command(
    file: str,
    output_format: str,
    output: str | None,
    no_comments: bool,
    ascii_identifiers: bool,
    show_source: bool,
) -> None:
    """Lex a proclang file and print its tokens.

    FILE is the path to the source file to lex.
    """
    from proclang import LexError, TokenSerializer, tokenize

    output_format = output_format.lower()
    if output and output_format == "table":
        raise click.UsageError("--output requires --format json or yaml")

    source = _read_source(file)
    if show_source:
        console.print(Panel(Text(source), title=f"Contents: {file}"))

    config = _make_config(ascii_identifiers, include_comments=not no_comments)
    try:
        tokens = tokenize(source, config)
    except LexError as exc:
        err_console.print(f"[red]Lex error[/red] in {file}: {escape(str(exc))}")
        sys.exit(1)

    if output_format == "table":
        table = Table(title=f"Tokens: {file}")
        table.add_column("Offset", justify="right")
        table.add_column("Kind", min_width=10)
        table.add_column("Text")
        for token in tokens:
            color = _KIND_COLORS.get(token.kind.name, "white")
            table.add_row(
                str(token.offset),
                f"[{color}]{token.kind.name}[/{color}]",
                escape(repr(token.text)),
            )
        console.print(table)
        console.print(f"\n[bold]{len(tokens)}[/bold] token(s)")
        return

    serializer = TokenSerializer()
    if output_format == "json":
        text = serializer.to_json(tokens, indent=2)
    else:
        text = serializer.to_yaml(tokens)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Tokens written to[/green] {output}")
    else:
        console.print(Syntax(text, output_format, line_numbers=True))


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
@click.option("--ascii-identifiers", is_flag=True, default=False, help="Restrict identifiers to ASCII letters")
def check_command(file: str, ascii_identifiers: bool) -> None:
    """Lex a proclang file and report every lexing error.

    FILE is the path to the source file to check.
    """
    from proclang import lex

    source = _read_source(file)
    lexer = lex(source, _make_config(ascii_identifiers, recover=True))
    count = sum(1 for _ in lexer)
    logger.debug("Scanned %d token(s) from %s", count, file)

    if not lexer.errors:
        console.print(f"[green]OK[/green] {file}: {count} token(s), no lexing errors")
        sys.exit(0)

    table = Table(title=f"Lex errors: {file}", show_lines=True)
    table.add_column("Position", justify="right")
    table.add_column("Error", min_width=12)
    table.add_column("Message")
    for error in lexer.errors:
        table.add_row(str(error.position), type(error).__name__, escape(error.lex_message))

    console.print(table)
    console.print(f"\n[bold]Summary:[/bold] {len(lexer.errors)} error(s)")
    sys.exit(1)


if __name__ == "__main__":
    cli()
