"""Adapter test fixtures."""

from __future__ import annotations

import pytest

from mysql_mcp.adapters._base import ConnectionConfig, DatabaseType
from mysql_mcp.config import mysql_from_env


@pytest.fixture(scope="session")
def mysql_config() -> ConnectionConfig:
    """MySQL settings from MYSQL_* variables (see mysql_mcp.config)."""
    return mysql_from_env()


@pytest.fixture
def duckdb_config() -> ConnectionConfig:
    return ConnectionConfig(name="test", db_type=DatabaseType.DUCKDB, params={"path": ":memory:"})
