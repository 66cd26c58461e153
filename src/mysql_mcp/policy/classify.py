"""Classify SQL text by its leading keyword.

This is a textual heuristic, not a parser. Text whose first keyword is
hidden (a leading comment, a second statement after a semicolon) is
classified by whatever comes first, which is usually OTHER.
"""

from __future__ import annotations

from mysql_mcp.policy._types import StatementCategory

# Checked in order; the first match wins.
_PREFIXES: tuple[tuple[str, StatementCategory], ...] = (
    ("select", StatementCategory.READ),
    ("create table", StatementCategory.CREATE_TABLE),
    ("insert into", StatementCategory.INSERT),
    ("update", StatementCategory.UPDATE),
    ("delete from", StatementCategory.DELETE),
)


def classify(text: str) -> StatementCategory:
    """Classify a raw SQL string by its leading keyword."""
    normalized = text.strip().lower()
    for prefix, category in _PREFIXES:
        if normalized.startswith(prefix):
            return category
    return StatementCategory.OTHER


def accepts(required: StatementCategory, actual: StatementCategory) -> bool:
    """Return True if a statement of ``actual`` category may run under ``required``.

    OTHER is the unrestricted write category: it takes every statement
    except reads.
    """
    if required is StatementCategory.OTHER:
        return actual is not StatementCategory.READ
    return actual is required
