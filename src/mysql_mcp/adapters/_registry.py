"""Backend lookup. Driver modules are imported on first use."""

from __future__ import annotations

import importlib
from typing import NamedTuple

from mysql_mcp.adapters._base import AdapterError, DatabaseAdapter, DatabaseType


class _Backend(NamedTuple):
    module: str
    cls: str
    extra: str | None


_BACKENDS: dict[DatabaseType, _Backend] = {
    DatabaseType.MYSQL: _Backend("mysql_mcp.adapters.mysql", "MySQLAdapter", None),
    DatabaseType.DUCKDB: _Backend("mysql_mcp.adapters.duckdb", "DuckDBAdapter", "duckdb"),
}


def get_adapter(db_type: DatabaseType) -> type[DatabaseAdapter]:
    """Return the adapter class for ``db_type``.

    A missing driver package surfaces as AdapterError with the install
    command; MySQL drivers are core dependencies, DuckDB is an extra.
    """
    try:
        backend = _BACKENDS[db_type]
    except KeyError:
        raise AdapterError(f"no backend for database type {db_type.value!r}") from None
    try:
        module = importlib.import_module(backend.module)
    except ImportError as e:
        target = f"mysql-mcp-server[{backend.extra}]" if backend.extra else "mysql-mcp-server"
        raise AdapterError(
            f"{db_type.value} support is not installed (pip install '{target}'): {e}"
        ) from e
    return getattr(module, backend.cls)
