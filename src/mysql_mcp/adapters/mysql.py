"""MySQL adapter: one aiomysql pool shared by every tool call.

The pool bounds concurrency at ``max_connections``; callers beyond that
wait in the pool's queue for a connection to be released. Statements run
in autocommit mode, one statement per call, with no transaction wrapping.
"""

from __future__ import annotations

import time

import aiomysql
import pymysql

from mysql_mcp.adapters._base import (
    AdapterError,
    ConnectionConfig,
    DatabaseType,
    ExecutionResult,
    label_comment,
)


def _driver_message(exc: BaseException) -> str:
    """Return the server's message text for a PyMySQL error.

    PyMySQL errors carry ``(errno, message)`` in ``args``; everything else
    falls back to ``str(exc)``.
    """
    if (
        isinstance(exc, pymysql.err.MySQLError)
        and len(exc.args) == 2
        and isinstance(exc.args[1], str)
    ):
        return exc.args[1]
    return str(exc) or type(exc).__name__


def _warning_count(cur: aiomysql.Cursor) -> int:
    # From the OK packet of the last statement; aiomysql has no public accessor.
    result = getattr(cur, "_result", None)
    return getattr(result, "warning_count", 0) or 0


class MySQLAdapter:
    """MySQL adapter using aiomysql (pooled, async)."""

    def __init__(self) -> None:
        self._pool: aiomysql.Pool | None = None

    async def connect(self, config: ConnectionConfig) -> None:
        params = config.params
        try:
            port = int(params.get("port", "3306"))
        except ValueError as e:
            raise AdapterError(f"MySQL port must be an integer: {params['port']!r}") from e

        try:
            # minsize=0: connections open on first use, like a lazy pool.
            self._pool = await aiomysql.create_pool(
                host=params.get("host", "localhost"),
                port=port,
                user=params.get("user", "mcp"),
                password=params.get("password", ""),
                db=params.get("database", "test"),
                minsize=0,
                maxsize=config.max_connections,
                autocommit=True,
                charset="utf8mb4",
            )
        except Exception as e:
            raise AdapterError(f"MySQL connection failed: {_driver_message(e)}") from e

    async def close(self) -> None:
        if self._pool is not None:
            pool, self._pool = self._pool, None
            pool.close()
            # Waits for acquired connections to come back before closing them.
            await pool.wait_closed()

    def _ensure_pool(self) -> aiomysql.Pool:
        if self._pool is None:
            raise AdapterError("Not connected. Call connect() first.")
        return self._pool

    async def execute(
        self, sql: str, *, labels: dict[str, str] | None = None
    ) -> ExecutionResult:
        pool = self._ensure_pool()
        sql = label_comment(labels) + sql

        t0 = time.monotonic()
        try:
            async with pool.acquire() as conn, conn.cursor(aiomysql.DictCursor) as cur:
                await cur.execute(sql)
                if cur.description:
                    columns = [desc[0] for desc in cur.description]
                    rows = list(await cur.fetchall())
                    affected, last_id, warnings = None, None, None
                else:
                    columns, rows = [], []
                    affected, last_id = cur.rowcount, cur.lastrowid
                    warnings = _warning_count(cur)
        except Exception as e:
            raise AdapterError(_driver_message(e)) from e
        duration_ms = (time.monotonic() - t0) * 1000

        return ExecutionResult(
            columns=columns,
            rows=rows,
            row_count=len(rows),
            returns_rows=bool(columns),
            affected_rows=affected,
            last_insert_id=last_id,
            warning_count=warnings,
            duration_ms=duration_ms,
        )

    def db_type(self) -> DatabaseType:
        return DatabaseType.MYSQL

    def dialect(self) -> str:
        return "mysql"

    def engine_name(self) -> str:
        return "MySQL"
