"""Stable, searchable fault code registry.

Ranges:
- M0001  General (unknown tool)
- M01xx  Argument shape
- M02xx  Statement gating

Each code is bound to the JSON-RPC error code the MCP transport reports.
"""

from __future__ import annotations

from dataclasses import dataclass

from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND


@dataclass(frozen=True)
class FaultCode:
    value: int
    rpc_code: int

    def __str__(self) -> str:
        return f"M{self.value:04d}"


# General
UNKNOWN_OPERATION = FaultCode(1, METHOD_NOT_FOUND)

# Argument shape (M01xx)
MALFORMED_ARGUMENTS = FaultCode(101, INVALID_PARAMS)

# Statement gating (M02xx)
CATEGORY_MISMATCH = FaultCode(201, INVALID_PARAMS)
MULTIPLE_STATEMENTS = FaultCode(202, INVALID_PARAMS)
