"""The `call` command: run one tool call against the configured database.

Goes through the same dispatcher as the server, so output matches what an
MCP client would receive.
"""

from __future__ import annotations

import asyncio

import click

from mysql_mcp import dispatch, querylog
from mysql_mcp.adapters._base import AdapterError, ConnectionConfig
from mysql_mcp.adapters._registry import get_adapter
from mysql_mcp.cli._output import format_outcome
from mysql_mcp.cli._shared import resolve_config, resolve_sql_stdin
from mysql_mcp.outcomes import Envelope, Fault


async def _run_call(
    tool: str, sql: str, config: ConnectionConfig, *, strict: bool
) -> Envelope | Fault:
    adapter = get_adapter(config.db_type)()
    await adapter.connect(config)
    try:
        ctx = dispatch.ServerContext(adapter=adapter, db_name=config.name, strict=strict)
        return await dispatch.handle(ctx, tool, {"query": sql})
    finally:
        await adapter.close()


@click.command()
@click.argument("tool")
@click.argument("sql", required=False, default=None)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin instead of argument.")
@click.option(
    "--db", default=None, envvar="MYSQL_MCP_DB",
    help="Backend as type:key=val (default: MySQL from MYSQL_* variables).",
)
@click.option("--strict", is_flag=True, help="Reject multi-statement text.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    help="Output format.",
)
@click.option("--no-query-log", is_flag=True, help="Do not write the JSONL query log.")
def call(
    tool: str,
    sql: str | None,
    from_stdin: bool,
    db: str | None,
    strict: bool,
    output_format: str,
    no_query_log: bool,
) -> None:
    """Call TOOL once with SQL and print the result."""
    querylog.set_enabled(not no_query_log)
    sql = resolve_sql_stdin(sql, from_stdin)
    config = resolve_config(db)

    try:
        outcome = asyncio.run(_run_call(tool, sql, config, strict=strict))
    except AdapterError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1) from e

    click.echo(format_outcome(outcome, output_format=output_format))
    if isinstance(outcome, Fault) or outcome.is_error:
        raise SystemExit(1)
