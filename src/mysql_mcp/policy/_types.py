"""Internal types for the policy layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mysql_mcp.catalog import Operation


class StatementCategory(enum.Enum):
    READ = "read"
    CREATE_TABLE = "create_table"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    OTHER = "other"  # Anything without a recognised leading keyword


@dataclass(frozen=True)
class ValidatedStatement:
    operation: Operation
    sql: str
    category: StatementCategory
