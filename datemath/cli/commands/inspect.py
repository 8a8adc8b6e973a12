"""
Inspect commands - Look at how an expression is tokenized and parsed.

Usage:
    datemath tokens "now-1h/h"
    datemath parse "now*2n"
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from datemath.core.lexer import Lexer
from datemath.core.parser import Parser

console = Console()


def tokens_command(
    expression: str = typer.Argument(..., help="Date-math expression to tokenize"),
) -> None:
    """Print every token the lexer produces, END included."""
    lexer = Lexer(expression)
    if lexer.is_invalid():
        console.print("[red]Error:[/red] Invalid token")
        raise typer.Exit(1)

    table = Table(title="Tokens")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Literal")

    for index, token in enumerate(lexer):
        table.add_row(str(index), token.type.name, escape(token.literal))

    console.print(table)


def parse_command(
    expression: str = typer.Argument(..., help="Date-math expression to parse"),
) -> None:
    """
    Print the parsed nodes and all parse errors.

    Unlike resolve, this reports every error, not just the first one.
    Exits with status 1 when there are errors.
    """
    parser = Parser(Lexer(expression))
    nodes = parser.parse()
    errors = parser.get_errors()

    if nodes:
        table = Table(title="Nodes")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", style="cyan")
        table.add_column("Canonical", style="green")
        for index, node in enumerate(nodes):
            table.add_row(str(index), node.type, escape(node.to_string()))
        console.print(table)

    for error in errors:
        console.print(f"[red]Error:[/red] {escape(error)}")

    if errors:
        raise typer.Exit(1)
