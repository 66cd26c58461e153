"""The fixed tool catalog: names, descriptions, and the category each tool gates on."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from mysql_mcp.policy._types import StatementCategory


@dataclass(frozen=True)
class Operation:
    name: str
    description: str
    category: StatementCategory
    query_hint: str
    success_message: str = "SQL executed successfully"

    @property
    def input_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": self.query_hint},
            },
            "required": ["query"],
        }

    @property
    def keyword(self) -> str:
        """Human-readable form of the statement this tool expects."""
        return _KEYWORDS[self.category]


_KEYWORDS: dict[StatementCategory, str] = {
    StatementCategory.READ: "SELECT",
    StatementCategory.CREATE_TABLE: "CREATE TABLE",
    StatementCategory.INSERT: "INSERT INTO",
    StatementCategory.UPDATE: "UPDATE",
    StatementCategory.DELETE: "DELETE FROM",
    StatementCategory.OTHER: "non-SELECT",
}

OPERATIONS: tuple[Operation, ...] = (
    Operation(
        name="run_sql_query",
        description="Run a read-only SQL query (SELECT statements only)",
        category=StatementCategory.READ,
        query_hint="The SQL SELECT query to run",
    ),
    Operation(
        name="create_table",
        description="Create a new table in the MySQL database",
        category=StatementCategory.CREATE_TABLE,
        query_hint="The SQL CREATE TABLE statement to run",
        success_message="Table created successfully",
    ),
    Operation(
        name="insert_data",
        description="Insert rows into a MySQL table",
        category=StatementCategory.INSERT,
        query_hint="The SQL INSERT INTO statement to run",
        success_message="Data inserted successfully",
    ),
    Operation(
        name="update_data",
        description="Update rows in a MySQL table",
        category=StatementCategory.UPDATE,
        query_hint="The SQL UPDATE statement to run",
        success_message="Data updated successfully",
    ),
    Operation(
        name="delete_data",
        description="Delete rows from a MySQL table",
        category=StatementCategory.DELETE,
        query_hint="The SQL DELETE FROM statement to run",
        success_message="Data deleted successfully",
    ),
    Operation(
        name="execute_sql",
        description="Run any non-SELECT SQL statement (ALTER TABLE, DROP, etc.)",
        category=StatementCategory.OTHER,
        query_hint="The SQL statement to run",
    ),
)

CATALOG: Mapping[str, Operation] = MappingProxyType({op.name: op for op in OPERATIONS})


def get_operation(name: str, catalog: Mapping[str, Operation] = CATALOG) -> Operation | None:
    """Look up a tool by name. Returns None if the catalog has no such tool."""
    return catalog.get(name)
