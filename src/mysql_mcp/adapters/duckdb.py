"""In-process DuckDB backend for running the server without a MySQL instance.

Each statement runs on its own cursor in a worker thread so concurrent
tool calls do not share cursor state. DuckDB reports DML as a one-row
``Count`` result; that is folded into ``affected_rows`` to match what
the MySQL backend returns.
"""

from __future__ import annotations

import asyncio
import time

import duckdb

from mysql_mcp.adapters._base import (
    AdapterError,
    ConnectionConfig,
    DatabaseType,
    ExecutionResult,
    label_comment,
)

_DML = frozenset({
    duckdb.StatementType.INSERT,
    duckdb.StatementType.UPDATE,
    duckdb.StatementType.DELETE,
})


class DuckDBAdapter:
    def __init__(self) -> None:
        self._db: duckdb.DuckDBPyConnection | None = None

    async def connect(self, config: ConnectionConfig) -> None:
        database = config.params.get("path") or ":memory:"
        try:
            self._db = duckdb.connect(database)
        except duckdb.Error as e:
            raise AdapterError(f"cannot open {database}: {e}") from e

    async def close(self) -> None:
        db, self._db = self._db, None
        if db is not None:
            db.close()

    def _run(self, sql: str) -> ExecutionResult:
        if self._db is None:
            raise AdapterError("Not connected. Call connect() first.")
        started = time.monotonic()
        cur = self._db.cursor()
        try:
            statements = duckdb.extract_statements(sql)
            cur.execute(sql)
            columns = [d[0] for d in cur.description or ()]
            raw = cur.fetchall() if columns else []
        except duckdb.Error as e:
            raise AdapterError(str(e)) from e
        finally:
            cur.close()
        elapsed = (time.monotonic() - started) * 1000

        if statements and statements[-1].type in _DML and columns == ["Count"]:
            affected = int(raw[0][0]) if raw else 0
            return ExecutionResult(
                columns=[], rows=[], row_count=affected, returns_rows=False,
                affected_rows=affected, duration_ms=elapsed,
            )
        rows = [dict(zip(columns, values, strict=True)) for values in raw]
        return ExecutionResult(
            columns=columns,
            rows=rows,
            row_count=len(rows),
            returns_rows=bool(columns),
            duration_ms=elapsed,
        )

    async def execute(
        self, sql: str, *, labels: dict[str, str] | None = None
    ) -> ExecutionResult:
        return await asyncio.to_thread(self._run, label_comment(labels) + sql)

    def db_type(self) -> DatabaseType:
        return DatabaseType.DUCKDB

    def dialect(self) -> str:
        return "duckdb"

    def engine_name(self) -> str:
        return "DuckDB"
