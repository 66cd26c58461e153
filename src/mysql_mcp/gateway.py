"""Execution gateway: run one validated statement and wrap the outcome.

Driver failures never escape as exceptions. They come back as an
``Envelope`` with ``is_error`` set and the driver's message, because the
tool call itself succeeded as a protocol exchange. Statements run exactly
once; there is no retry and no rollback.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from mysql_mcp.adapters._base import AdapterError, DatabaseAdapter, ExecutionResult
from mysql_mcp.outcomes import Envelope
from mysql_mcp.policy import StatementCategory, ValidatedStatement
from mysql_mcp.policy.tables import extract_tables
from mysql_mcp.querylog import log_query

logger = logging.getLogger(__name__)


def _payload(statement: ValidatedStatement, result: ExecutionResult) -> str:
    if statement.operation.category is StatementCategory.READ:
        return json.dumps(result.rows, indent=2, default=str)
    return json.dumps(
        {
            "success": True,
            "message": statement.operation.success_message,
            "result": result.rows if result.returns_rows else result.summary(),
        },
        indent=2,
        default=str,
    )


async def _record(adapter: DatabaseAdapter, **fields: Any) -> None:
    # sqlglot parse and file append both run in the worker thread.
    def write() -> None:
        tables = extract_tables(fields["sql"], dialect=adapter.dialect())
        log_query(tables=tables, **fields)

    await asyncio.to_thread(write)


async def execute(
    adapter: DatabaseAdapter,
    statement: ValidatedStatement,
    correlation_id: str,
    *,
    db_name: str | None = None,
) -> Envelope:
    """Execute ``statement`` once through the shared adapter."""
    tool = statement.operation.name
    logger.info("[%s] executing %s statement: %s", correlation_id, tool, statement.sql)
    log_fields = {
        "correlation_id": correlation_id,
        "tool": tool,
        "sql": statement.sql,
        "category": statement.category.value,
        "db": db_name,
    }

    try:
        result = await adapter.execute(
            statement.sql, labels={"correlation_id": correlation_id}
        )
    except AdapterError as e:
        message = f"{adapter.engine_name()} error: {e}"
        logger.error("[%s] %s failed: %s", correlation_id, tool, e)
        await _record(adapter, **log_fields, error=str(e))
        return Envelope.error(message)

    if result.returns_rows:
        outcome = f"{result.row_count} rows returned"
    else:
        outcome = f"{result.affected_rows} rows affected"
    logger.info(
        "[%s] %s succeeded (%s, %.1f ms)",
        correlation_id, tool, outcome, result.duration_ms or 0.0,
    )
    await _record(
        adapter, **log_fields, duration_ms=result.duration_ms, row_count=result.row_count
    )
    return Envelope.ok(_payload(statement, result))
