"""The `tools` command: print the tool catalog as advertised to clients."""

from __future__ import annotations

import json

import click

from mysql_mcp.catalog import OPERATIONS


@click.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    help="Output format.",
)
def tools(output_format: str) -> None:
    """List the available tools and the statements each accepts."""
    if output_format == "json":
        click.echo(json.dumps({
            "tools": [
                {
                    "name": op.name,
                    "description": op.description,
                    "inputSchema": op.input_schema,
                }
                for op in OPERATIONS
            ],
        }, indent=2))
        return

    width = max(len(op.name) for op in OPERATIONS)
    for op in OPERATIONS:
        click.echo(f"{op.name:<{width}}  {op.keyword:<12}  {op.description}")
