"""The `serve` command: run the MCP server over stdio."""

from __future__ import annotations

import asyncio

import click

from mysql_mcp import querylog, server
from mysql_mcp.adapters._base import AdapterError
from mysql_mcp.cli._shared import resolve_config


@click.command()
@click.option(
    "--db", default=None, envvar="MYSQL_MCP_DB",
    help="Backend as type:key=val (default: MySQL from MYSQL_* variables).",
)
@click.option(
    "--strict", is_flag=True, envvar="MYSQL_MCP_STRICT",
    help="Reject text that parses as more than one statement.",
)
@click.option("--no-query-log", is_flag=True, help="Do not write the JSONL query log.")
def serve(db: str | None, strict: bool, no_query_log: bool) -> None:
    """Serve the SQL tools to an MCP client over stdio."""
    querylog.set_enabled(not no_query_log)
    if not no_query_log:
        querylog.cleanup_old_logs()

    config = resolve_config(db)
    try:
        asyncio.run(server.serve(config, strict=strict))
    except AdapterError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1) from e
