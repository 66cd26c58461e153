"""Dispatcher: tool name + arguments in, one outcome out.

The dispatcher holds no state between calls. Everything a call needs
comes from the ``ServerContext`` built once at startup.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field

from mysql_mcp import gateway
from mysql_mcp.adapters._base import DatabaseAdapter
from mysql_mcp.catalog import CATALOG, Operation, get_operation
from mysql_mcp.outcomes import Envelope, Fault, codes
from mysql_mcp.policy import validate_request
from mysql_mcp.querylog import record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerContext:
    """Process-wide handles shared by every call: the pool and the catalog."""

    adapter: DatabaseAdapter
    catalog: Mapping[str, Operation] = field(default_factory=lambda: CATALOG)
    db_name: str | None = None
    strict: bool = False


def new_correlation_id() -> str:
    return str(uuid.uuid4())


async def handle(ctx: ServerContext, name: str, arguments: object) -> Envelope | Fault:
    """Handle one tool call.

    Returns a Fault for unknown tools and rejected arguments (nothing is
    executed), otherwise the gateway's envelope unchanged.
    """
    correlation_id = new_correlation_id()
    logger.info("[%s] handling request: %s", correlation_id, name)

    operation = get_operation(name, ctx.catalog)
    if operation is None:
        logger.warning("[%s] unknown tool: %s", correlation_id, name)
        return Fault.of(codes.UNKNOWN_OPERATION, f"Unknown tool: {name}")

    validated = validate_request(operation, arguments, strict=ctx.strict)
    if isinstance(validated, Fault):
        logger.warning(
            "[%s] %s rejected [%s]: %s",
            correlation_id, name, validated.code, validated.message,
        )
        sql = arguments.get("query") if isinstance(arguments, Mapping) else None
        await record(
            correlation_id=correlation_id,
            tool=name,
            sql=sql if isinstance(sql, str) else "",
            db=ctx.db_name,
            blocked=True,
            fault=str(validated.code),
        )
        return validated

    return await gateway.execute(
        ctx.adapter, validated, correlation_id, db_name=ctx.db_name
    )
