"""Connection configuration from the environment.

MySQL settings come from ``MYSQL_*`` variables with the defaults below.
A ``type:key=val,key=val`` string (``--db`` / ``MYSQL_MCP_DB``) selects any
registered backend instead, e.g. ``duckdb:path=/tmp/dev.duckdb``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from mysql_mcp.adapters._base import DEFAULT_MAX_CONNECTIONS, ConnectionConfig, DatabaseType

DEFAULTS: dict[str, str] = {
    "MYSQL_HOST": "localhost",
    "MYSQL_PORT": "3306",
    "MYSQL_USER": "mcp",
    "MYSQL_PASSWORD": "",
    "MYSQL_DATABASE": "test",
}

_PARAM_KEYS = {
    "MYSQL_HOST": "host",
    "MYSQL_PORT": "port",
    "MYSQL_USER": "user",
    "MYSQL_PASSWORD": "password",
    "MYSQL_DATABASE": "database",
}


class ConfigError(ValueError):
    """Raised for unusable configuration values."""


def _pool_size(environ: Mapping[str, str]) -> int:
    raw = environ.get("MYSQL_POOL_SIZE")
    if raw is None or raw == "":
        return DEFAULT_MAX_CONNECTIONS
    try:
        size = int(raw)
    except ValueError as e:
        raise ConfigError(f"MYSQL_POOL_SIZE must be an integer, got {raw!r}") from e
    if size < 1:
        raise ConfigError(f"MYSQL_POOL_SIZE must be at least 1, got {size}")
    return size


def mysql_from_env(environ: Mapping[str, str] | None = None) -> ConnectionConfig:
    """Build the MySQL connection config from ``MYSQL_*`` variables."""
    env = os.environ if environ is None else environ
    params = {key: env.get(var, DEFAULTS[var]) for var, key in _PARAM_KEYS.items()}

    if not params["port"].isdigit():
        raise ConfigError(f"MYSQL_PORT must be an integer, got {params['port']!r}")

    return ConnectionConfig(
        name=params["database"],
        db_type=DatabaseType.MYSQL,
        params=params,
        max_connections=_pool_size(env),
    )


def parse_db(value: str, environ: Mapping[str, str] | None = None) -> ConnectionConfig:
    """Parse a ``type:key=val,key=val`` connection string."""
    if ":" not in value:
        raise ConfigError(f"Connection '{value}' is not in 'type:key=val' format.")
    db_type_str, params_str = value.split(":", 1)

    try:
        db_type = DatabaseType(db_type_str)
    except ValueError as e:
        valid = ", ".join(t.value for t in DatabaseType)
        raise ConfigError(f"Unknown database type '{db_type_str}'. Valid: {valid}") from e

    params: dict[str, str] = {}
    if params_str:
        for part in params_str.split(","):
            if "=" not in part:
                raise ConfigError(f"Expected key=value pair, got '{part}'")
            k, v = part.split("=", 1)
            params[k.strip()] = v.strip()

    env = os.environ if environ is None else environ
    return ConnectionConfig(
        name=db_type_str,
        db_type=db_type,
        params=params,
        max_connections=_pool_size(env),
    )


def load_config(db: str | None = None, environ: Mapping[str, str] | None = None) -> ConnectionConfig:
    """Resolve the connection config: explicit ``db`` string, else MySQL from env."""
    if db:
        return parse_db(db, environ)
    return mysql_from_env(environ)
