"""CLI entry point. ``mysql-mcp`` resolves here."""

from __future__ import annotations

import click

from mysql_mcp.cli._shared import configure_logging
from mysql_mcp.cli.call import call
from mysql_mcp.cli.serve import serve
from mysql_mcp.cli.tools import tools
from mysql_mcp.cli.validate import validate


@click.group()
@click.version_option(package_name="mysql-mcp-server")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    envvar="MYSQL_MCP_LOG_LEVEL",
    help="Log level for stderr logging.",
)
def main(log_level: str) -> None:
    """mysql-mcp: SQL tools for MCP clients, gated by statement category."""
    configure_logging(log_level)


main.add_command(serve)
main.add_command(tools)
main.add_command(validate)
main.add_command(call)
