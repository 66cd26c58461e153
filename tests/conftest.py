"""Root conftest: shared fixtures and markers."""

from __future__ import annotations

import os

import pytest

from mysql_mcp import querylog
from mysql_mcp.adapters._base import AdapterError, DatabaseType, ExecutionResult


def pytest_configure(config):
    config.addinivalue_line("markers", "mysql: requires a running MySQL server")


def pytest_collection_modifyitems(config, items):
    if os.environ.get("MYSQL_MCP_TEST_MYSQL"):
        return

    skip_mysql = pytest.mark.skip(reason="MySQL not available (set MYSQL_MCP_TEST_MYSQL=1)")
    for item in items:
        if "mysql" in item.keywords:
            item.add_marker(skip_mysql)


@pytest.fixture(autouse=True)
def isolated_query_log(tmp_path, monkeypatch):
    """Keep query-log writes inside the test's tmp dir."""
    log_root = tmp_path / "querylog"
    monkeypatch.setattr(querylog, "_LOG_ROOT", log_root)
    monkeypatch.setattr(querylog, "_enabled", True)
    return log_root


class FakeAdapter:
    """Records every statement; returns a canned result or raises a canned error."""

    def __init__(self, result: ExecutionResult | None = None, error: str | None = None):
        self.result = result or ExecutionResult(columns=[], rows=[], row_count=0)
        self.error = error
        self.executed: list[tuple[str, dict[str, str] | None]] = []

    async def connect(self, config) -> None:
        pass

    async def close(self) -> None:
        pass

    async def execute(self, sql, *, labels=None):
        self.executed.append((sql, labels))
        if self.error is not None:
            raise AdapterError(self.error)
        return self.result

    def db_type(self):
        return DatabaseType.MYSQL

    def dialect(self):
        return "mysql"

    def engine_name(self):
        return "MySQL"


@pytest.fixture
def fake_adapter():
    return FakeAdapter()


@pytest.fixture
def make_adapter():
    """Factory for FakeAdapters with a given result or error."""
    return FakeAdapter
