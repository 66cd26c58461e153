"""Render outcomes for the MCP transport and for CLI (JSON) output."""

from __future__ import annotations

from mcp import types
from mcp.shared.exceptions import McpError

from mysql_mcp.outcomes.types import Envelope, Fault


def render_result(envelope: Envelope) -> types.CallToolResult:
    """Render an envelope as an MCP tool result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=envelope.text)],
        isError=envelope.is_error,
    )


def to_mcp_error(fault: Fault) -> McpError:
    """Build the transport-level error for a protocol-tier fault."""
    message = fault.message
    if fault.notes:
        message = "\n".join([message, *(f"note: {n}" for n in fault.notes)])
    return McpError(types.ErrorData(code=fault.rpc_code, message=message))


def render_json(outcome: Envelope | Fault) -> dict:
    """Render either outcome as a JSON-serializable dict."""
    if isinstance(outcome, Fault):
        return {
            "tier": outcome.tier.value,
            "error": {
                "code": outcome.rpc_code,
                "fault": str(outcome.code),
                "message": outcome.message,
                "notes": outcome.notes,
            },
        }
    d: dict = {
        "tier": outcome.tier.value,
        "content": [{"type": "text", "text": outcome.text}],
    }
    if outcome.is_error:
        d["isError"] = True
    return d
