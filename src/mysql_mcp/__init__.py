"""mysql-mcp: SQL tools for MCP clients, gated by statement category."""

__version__ = "0.1.0"
