"""
datemath CLI

Entry point for the command-line interface.

Usage:
    datemath resolve "now-1d/d"
    datemath resolve "now@bw" --at 2018-09-29T09:40:25+00:00 --json
    datemath parse "now*2n"
    datemath --help
"""

import typer

from datemath.cli.commands.inspect import parse_command, tokens_command
from datemath.cli.commands.resolve import resolve_command
from datemath.common.logging import configure_logging
from datemath.config import get_config

app = typer.Typer(
    name="datemath",
    help="datemath - resolve relative date-math expressions such as now-1h/h@M",
    no_args_is_help=True,
)

# Register commands
app.command(name="resolve", help="Resolve an expression to a point in time")(resolve_command)
app.command(name="parse", help="Show the parsed nodes and every parse error")(parse_command)
app.command(name="tokens", help="Show the lexer's tokens for an expression")(tokens_command)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging("DEBUG" if verbose else get_config().log_level)


@app.command()
def version() -> None:
    """Show version information."""
    from datemath import __version__

    typer.echo(f"datemath version {__version__}")


if __name__ == "__main__":
    app()
