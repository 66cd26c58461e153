"""Best-effort table extraction for query-log entries."""

from __future__ import annotations

import sqlglot
from sqlglot import exp


def extract_tables(sql: str, *, dialect: str | None = "mysql") -> list[str]:
    """Return the sorted table names a statement mentions.

    CTE names are excluded. Text sqlglot cannot parse yields an empty list.
    """
    try:
        statement = sqlglot.parse_one(sql, dialect=dialect)
    except sqlglot.errors.SqlglotError:
        return []
    if statement is None:
        return []

    cte_names = {cte.alias for cte in statement.find_all(exp.CTE)}
    tables: set[str] = set()
    for node in statement.find_all(exp.Table):
        if node.name and node.name not in cte_names:
            tables.add(_qualified_name(node))
    return sorted(tables)


def _qualified_name(table: exp.Table) -> str:
    """Build db.table or just table name."""
    if table.db:
        return f"{table.db}.{table.name}"
    return table.name
