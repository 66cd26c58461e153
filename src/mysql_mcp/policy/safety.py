"""Safety checks that run before a statement is sent to the database."""

from __future__ import annotations

import sqlglot

from mysql_mcp.outcomes import Fault, codes


def check_multiple_statements(sql: str, *, dialect: str | None = "mysql") -> Fault | None:
    """Reject SQL that parses as more than one statement."""
    try:
        statements = sqlglot.parse(sql, dialect=dialect)
    except sqlglot.errors.SqlglotError:
        return None

    # Trailing semicolons parse as None
    statements = [s for s in statements if s is not None]
    if len(statements) <= 1:
        return None

    return (
        Fault.of(codes.MULTIPLE_STATEMENTS, "multiple statements detected")
        .note("only single statements are allowed (possible SQL injection)")
        .note("send each statement as a separate tool call")
    )
