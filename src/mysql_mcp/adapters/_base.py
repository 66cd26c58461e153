"""Database adapter protocol: the boundary between the tool layer and drivers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

DEFAULT_MAX_CONNECTIONS = 10


class DatabaseType(enum.Enum):
    MYSQL = "mysql"
    DUCKDB = "duckdb"


@dataclass
class ConnectionConfig:
    name: str
    db_type: DatabaseType
    params: dict[str, str] = field(default_factory=dict)
    max_connections: int = DEFAULT_MAX_CONNECTIONS


@dataclass
class ExecutionResult:
    """Statement execution result.

    Statements that produce a result set fill ``columns`` and ``rows``;
    the rest report ``affected_rows`` and friends instead.
    """

    columns: list[str]
    rows: list[dict[str, object]]
    row_count: int
    returns_rows: bool = True
    affected_rows: int | None = None
    last_insert_id: int | None = None
    warning_count: int | None = None
    duration_ms: float | None = None

    def summary(self) -> dict[str, int | None]:
        return {
            "affected_rows": self.affected_rows,
            "last_insert_id": self.last_insert_id,
            "warning_count": self.warning_count,
        }


class AdapterError(Exception):
    """Raised by adapters for connection/execution failures.

    The message is the driver's own error text.
    """


@runtime_checkable
class DatabaseAdapter(Protocol):
    async def connect(self, config: ConnectionConfig) -> None: ...
    async def close(self) -> None: ...
    async def execute(
        self, sql: str, *, labels: dict[str, str] | None = None
    ) -> ExecutionResult: ...
    def db_type(self) -> DatabaseType: ...
    def dialect(self) -> str: ...
    def engine_name(self) -> str:
        """Display name used in error envelopes, e.g. 'MySQL'."""
        ...


def label_comment(labels: dict[str, str] | None) -> str:
    """Render labels as a leading SQL comment ('' when there are none)."""
    if not labels:
        return ""
    label_str = ", ".join(f"{k}={v}" for k, v in labels.items())
    return f"/* mysql-mcp: {label_str} */ "
