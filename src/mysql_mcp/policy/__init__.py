"""Request validation: argument shape, then category gate."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from mysql_mcp.outcomes import Fault, codes
from mysql_mcp.policy._types import StatementCategory, ValidatedStatement
from mysql_mcp.policy.classify import accepts, classify
from mysql_mcp.policy.safety import check_multiple_statements

if TYPE_CHECKING:
    from mysql_mcp.catalog import Operation

__all__ = [
    "StatementCategory",
    "ValidatedStatement",
    "accepts",
    "classify",
    "validate_request",
]


def validate_request(
    operation: Operation,
    arguments: object,
    *,
    strict: bool = False,
) -> ValidatedStatement | Fault:
    """Validate a tool call's arguments against the tool's category.

    Steps:
        1. Shape: arguments must be a mapping with a string ``query``
        2. Classify the query by leading keyword
        3. Category gate against the tool's required category
        4. Strict mode only: reject multi-statement text

    Nothing is executed. The returned ValidatedStatement carries the query
    text unchanged.
    """
    if not isinstance(arguments, Mapping) or not isinstance(arguments.get("query"), str):
        return Fault.of(codes.MALFORMED_ARGUMENTS, "Invalid SQL query arguments.").note(
            "expected an object with a string 'query' field"
        )

    sql = arguments["query"]
    category = classify(sql)

    if not accepts(operation.category, category):
        if operation.category is StatementCategory.OTHER:
            message = f"{operation.name} does not accept SELECT statements."
            hint = "use run_sql_query for reads"
        else:
            message = f"{operation.name} only accepts {operation.keyword} statements."
            hint = f"statement was classified as '{category.value}'"
        return Fault.of(codes.CATEGORY_MISMATCH, message).note(hint)

    if strict:
        fault = check_multiple_statements(sql)
        if fault is not None:
            return fault

    return ValidatedStatement(operation=operation, sql=sql, category=category)
