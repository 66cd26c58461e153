"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
import sys

import click

from mysql_mcp.adapters._base import ConnectionConfig
from mysql_mcp.config import ConfigError, load_config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout belongs to the MCP transport."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def resolve_config(db: str | None) -> ConnectionConfig:
    """Resolve the connection config, exiting with status 1 on bad values."""
    try:
        return load_config(db)
    except ConfigError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1) from e


def resolve_sql_stdin(sql: str | None, from_stdin: bool) -> str:
    """Resolve SQL from positional argument or stdin. Exactly one source required."""
    if sql and from_stdin:
        raise click.UsageError("Provide SQL as an argument or --from-stdin, not both.")
    if from_stdin:
        text = click.get_text_stream("stdin").read().strip()
        if not text:
            raise click.UsageError("--from-stdin: stdin was empty.")
        return text
    if not sql:
        raise click.UsageError("Missing argument 'SQL'. Provide SQL or use --from-stdin.")
    return sql
