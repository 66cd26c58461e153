"""CLI tests for `call` and `tools` using in-memory DuckDB."""

from __future__ import annotations

import json

from click.testing import CliRunner

from mysql_mcp.cli import main


def _invoke(*args: str, input: str | None = None):
    """Invoke the CLI with logging silenced so output stays parseable."""
    return CliRunner().invoke(main, ["--log-level", "CRITICAL", *args], input=input)


class TestTools:
    def test_json_lists_catalog(self) -> None:
        result = CliRunner().invoke(main, ["tools"])
        assert result.exit_code == 0
        names = [t["name"] for t in json.loads(result.output)["tools"]]
        assert names == [
            "run_sql_query", "create_table", "insert_data",
            "update_data", "delete_data", "execute_sql",
        ]

    def test_text(self) -> None:
        result = CliRunner().invoke(main, ["tools", "--format", "text"])
        assert result.exit_code == 0
        assert "execute_sql" in result.output
        assert "CREATE TABLE" in result.output


class TestCall:
    def test_read(self) -> None:
        result = _invoke(
            "call", "run_sql_query", "SELECT 1 AS x", "--db", "duckdb:", "--no-query-log",
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["tier"] == "execution"
        assert "isError" not in data
        assert json.loads(data["content"][0]["text"]) == [{"x": 1}]

    def test_text_format(self) -> None:
        result = _invoke(
            "call", "run_sql_query", "SELECT 2 AS y", "--db", "duckdb:",
            "--format", "text", "--no-query-log",
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"y": 2}]

    def test_from_stdin(self) -> None:
        result = _invoke(
            "call", "run_sql_query", "--from-stdin", "--db", "duckdb:", "--no-query-log",
            input="SELECT 3 AS z\n",
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert json.loads(data["content"][0]["text"]) == [{"z": 3}]

    def test_database_error_exits_nonzero(self) -> None:
        result = _invoke(
            "call", "insert_data", "INSERT INTO nope VALUES (1)", "--db", "duckdb:",
            "--no-query-log",
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["isError"] is True
        assert data["content"][0]["text"].startswith("DuckDB error: ")

    def test_fault_exits_nonzero(self) -> None:
        result = _invoke(
            "call", "run_sql_query", "DELETE FROM t", "--db", "duckdb:", "--no-query-log",
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["tier"] == "protocol"
        assert data["error"]["code"] == -32602

    def test_bad_db_string(self) -> None:
        result = _invoke("call", "run_sql_query", "SELECT 1", "--db", "oracle:host=x")
        assert result.exit_code == 1
        assert "Unknown database type" in result.output

    def test_sql_and_stdin_conflict(self) -> None:
        result = _invoke(
            "call", "run_sql_query", "SELECT 1", "--from-stdin", "--db", "duckdb:",
            input="SELECT 2",
        )
        assert result.exit_code == 2
