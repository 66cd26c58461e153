"""The `validate` command: gate SQL against a tool without executing it."""

from __future__ import annotations

import json

import click

from mysql_mcp.catalog import get_operation
from mysql_mcp.cli._output import format_outcome
from mysql_mcp.outcomes import Fault, codes
from mysql_mcp.policy import validate_request


@click.command()
@click.argument("tool")
@click.argument("sql")
@click.option("--strict", is_flag=True, help="Reject multi-statement text.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)
def validate(tool: str, sql: str, strict: bool, output_format: str) -> None:
    """Check whether TOOL would accept SQL. Nothing is executed."""
    operation = get_operation(tool)
    if operation is None:
        outcome = Fault.of(codes.UNKNOWN_OPERATION, f"Unknown tool: {tool}")
    else:
        outcome = validate_request(operation, {"query": sql}, strict=strict)

    if isinstance(outcome, Fault):
        click.echo(format_outcome(outcome, output_format=output_format))
        raise SystemExit(1)

    if output_format == "json":
        click.echo(json.dumps({
            "tool": tool,
            "category": outcome.category.value,
            "allowed": True,
        }, indent=2))
    else:
        click.echo(f"ok: {tool} accepts this statement (category: {outcome.category.value})")
