"""Database adapters: implementations of the DatabaseAdapter protocol."""

from mysql_mcp.adapters._base import (
    AdapterError,
    ConnectionConfig,
    DatabaseAdapter,
    DatabaseType,
    ExecutionResult,
)

__all__ = [
    "AdapterError",
    "ConnectionConfig",
    "DatabaseAdapter",
    "DatabaseType",
    "ExecutionResult",
]
