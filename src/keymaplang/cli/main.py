# src/keymaplang/cli/main.py
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import KeymapConfig, config
from ..error_reporter import format_error
from ..errors import KeymapError
from ..lexer import lex
from ..parser import parse

console = Console()
err_console = Console(stderr=True)


def load_source(file):
    """Read a keymap file. Trailing newlines are dropped unless configured
    otherwise, since the grammar has no empty statement."""
    with open(file, 'r') as f:
        source = f.read()
    if config.strip_trailing_newlines:
        source = source.rstrip('\n')
    return source


def report(error, file, source):
    err_console.print(format_error(error, file, source), markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="keymaplang")
@click.option('--debug', is_flag=True, help="Log lexer and parser activity.")
def cli(debug):
    """Keymap configuration language tools"""
    # Decided per invocation so --debug does not outlive the command
    config.enable_debug_logs = debug or KeymapConfig.from_env().enable_debug_logs
    config.configure_logging()


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a keymap file"""
    source = load_source(file)
    try:
        program = parse(lex(source))
    except KeymapError as e:
        report(e, file, source)

    console.print(f"[bold green]✅ Syntax is valid![/bold green] {len(program)} binding(s)")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a keymap file"""
    source = load_source(file)
    try:
        token_list = lex(source)
    except KeymapError as e:
        report(e, file, source)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Text", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in token_list:
        table.add_row(
            type(token.kind).__name__,
            repr(token.text),
            str(token.position.line),
            str(token.position.column),
        )

    console.print(table)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the parsed bindings of a keymap file"""
    source = load_source(file)
    try:
        program = parse(lex(source))
    except KeymapError as e:
        report(e, file, source)

    table = Table(show_header=True, box=None)
    table.add_column("#", style="dim")
    table.add_column("Modifier", style="magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Command", style="green")

    for number, binding in enumerate(program.bindings(), start=1):
        modifier = binding.key.modifier.value if binding.key.modifier else "-"
        table.add_row(str(number), modifier, binding.key.key, binding.command_name)

    console.print(Panel.fit(
        table,
        title="[bold blue]Program[/bold blue]",
        border_style="blue"
    ))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def fmt(file):
    """Print a keymap file in canonical form"""
    source = load_source(file)
    try:
        program = parse(lex(source))
    except KeymapError as e:
        report(e, file, source)

    click.echo(str(program))


if __name__ == '__main__':
    cli()
