"""
Resolve command - Evaluate an expression to a point in time.

Usage:
    datemath resolve "now-2d+2h"
    datemath resolve "now/fri" --at 2018-06-18T08:39:07+00:00
    datemath resolve "now@M" --json
    datemath resolve "now@d" --seconds
"""

from __future__ import annotations

import json
import logging
from datetime import datetime

import typer
from rich.console import Console
from rich.markup import escape

from datemath.config import get_config
from datemath.core.models import TokenModel
from datemath.exceptions import DateMathError

logger = logging.getLogger(__name__)

console = Console()


def parse_reference(value: str) -> datetime:
    """
    Parse an ISO 8601 reference instant.

    Naive values are taken to be in the configured time zone.
    """
    reference = datetime.fromisoformat(value)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=get_config().tzinfo)
    return reference


def resolve_command(
    expression: str = typer.Argument(
        ...,
        help="Date-math expression, e.g. now-1d/d",
    ),
    at: str | None = typer.Option(
        None,
        "--at",
        "-a",
        help="Reference instant in ISO 8601 (defaults to the current time)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the parsed nodes and the result as JSON",
    ),
    seconds: bool = typer.Option(
        False,
        "--seconds",
        "-s",
        help="Print the result to the second. End-of-unit snaps otherwise show .999999",
    ),
) -> None:
    """
    Resolve an expression.

    Prints the resulting instant in ISO 8601, or a JSON document with the
    canonical form and the nodes when --json is given.
    End-of-unit snaps (@d, @M, ...) land on the last microsecond of the
    unit; pass --seconds for the 23:59:59 form.
    """
    reference = None
    if at is not None:
        try:
            reference = parse_reference(at)
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid reference instant: {escape(at)}")
            raise typer.Exit(1)

    try:
        model = TokenModel.from_string(expression, reference)
        result = model.to_date()
    except DateMathError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    logger.debug(f"Resolved {expression!r} to {result.isoformat()}")
    rendered = result.isoformat(timespec="seconds") if seconds else result.isoformat()

    if as_json:
        payload = {
            "expression": expression,
            "canonical": model.to_string(),
            "nodes": model.to_json(),
            "result": rendered,
        }
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(rendered)
