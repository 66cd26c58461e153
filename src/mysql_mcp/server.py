"""MCP binding: advertise the catalog, route tool calls, own the lifecycle."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from mysql_mcp import __version__, dispatch
from mysql_mcp.adapters._base import ConnectionConfig
from mysql_mcp.adapters._registry import get_adapter
from mysql_mcp.catalog import Operation
from mysql_mcp.dispatch import ServerContext
from mysql_mcp.outcomes import Fault
from mysql_mcp.outcomes.render import render_result, to_mcp_error

SERVER_NAME = "mysql-mcp-server"

logger = logging.getLogger(__name__)


def tool_for(operation: Operation) -> types.Tool:
    return types.Tool(
        name=operation.name,
        description=operation.description,
        inputSchema=operation.input_schema,
    )


def build_server(ctx: ServerContext) -> Server:
    """Create the MCP server with tools/list and tools/call bound to ``ctx``."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [tool_for(op) for op in ctx.catalog.values()]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        outcome = await dispatch.handle(ctx, req.params.name, req.params.arguments)
        if isinstance(outcome, Fault):
            raise to_mcp_error(outcome)
        return types.ServerResult(render_result(outcome))

    # Registered directly so faults reach the client as JSON-RPC errors
    # rather than isError results.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


@contextlib.contextmanager
def _cancel_on_signals(task: asyncio.Task, signals=(signal.SIGINT, signal.SIGTERM)):
    """Cancel ``task`` on SIGINT/SIGTERM while the block runs."""
    loop = asyncio.get_running_loop()
    installed = []
    for sig in signals:
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, task.cancel)
            installed.append(sig)
    try:
        yield
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


async def serve(config: ConnectionConfig, *, strict: bool = False) -> None:
    """Serve the tool catalog over stdio until EOF or a termination signal.

    The pool is opened before the transport and closed after it, on every
    exit path.
    """
    adapter = get_adapter(config.db_type)()
    await adapter.connect(config)

    ctx = ServerContext(adapter=adapter, db_name=config.name, strict=strict)
    server = build_server(ctx)
    task = asyncio.current_task()

    try:
        with _cancel_on_signals(task):
            async with stdio_server() as (read_stream, write_stream):
                logger.info(
                    "%s %s listening on stdio (%s, pool size %d)",
                    SERVER_NAME, __version__, config.db_type.value, config.max_connections,
                )
                await server.run(
                    read_stream, write_stream, server.create_initialization_options()
                )
    except asyncio.CancelledError:
        logger.info("shutdown requested, draining pool")
    finally:
        await adapter.close()
        logger.info("database pool closed")
