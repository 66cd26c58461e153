#!/usr/bin/env python3
"""Smoke-test a running database through the server's stdio transport.

Spawns ``python -m mysql_mcp serve`` as an MCP client would, then creates a
table, inserts two rows, reads them back, and checks that a SELECT sent to
``execute_sql`` is rejected.

Usage:
    python scripts/smoke_client.py

Environment variables:
    MYSQL_HOST, MYSQL_PORT, MYSQL_USER, MYSQL_PASSWORD, MYSQL_DATABASE
        Passed through to the server (see mysql_mcp.config).
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.shared.exceptions import McpError

STEPS = [
    (
        "create_table",
        "CREATE TABLE IF NOT EXISTS test_users ("
        " id INT AUTO_INCREMENT PRIMARY KEY,"
        " name VARCHAR(100),"
        " email VARCHAR(100),"
        " created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP)",
    ),
    (
        "insert_data",
        "INSERT INTO test_users (name, email) VALUES"
        " ('Zhang San', 'zhangsan@example.com'),"
        " ('Li Si', 'lisi@example.com')",
    ),
    ("run_sql_query", "SELECT * FROM test_users"),
]


def _print_result(label: str, result) -> None:
    print(f"\n{label} (isError={bool(result.isError)}):")
    for item in result.content:
        print(getattr(item, "text", item))


async def main(db: str | None) -> int:
    args = ["-m", "mysql_mcp", "serve", "--no-query-log"]
    if db:
        args += ["--db", db]
    params = StdioServerParameters(command=sys.executable, args=args, env=dict(os.environ))

    async with stdio_client(params) as (read, write), ClientSession(read, write) as session:
        await session.initialize()
        listed = await session.list_tools()
        print("tools:", ", ".join(t.name for t in listed.tools))

        failed = False
        for tool, sql in STEPS:
            result = await session.call_tool(tool, {"query": sql})
            _print_result(tool, result)
            failed = failed or bool(result.isError)

        try:
            await session.call_tool("execute_sql", {"query": "SELECT 1"})
        except McpError as e:
            print(f"\nexecute_sql rejected SELECT as expected: {e.error.message}")
        else:
            print("\nexecute_sql accepted a SELECT", file=sys.stderr)
            failed = True

    return 1 if failed else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--db", default=None, help="Backend as type:key=val")
    raise SystemExit(asyncio.run(main(parser.parse_args().db)))
