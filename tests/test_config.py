"""Test environment-sourced connection configuration."""

import pytest

from mysql_mcp.adapters._base import DatabaseType
from mysql_mcp.config import ConfigError, load_config, mysql_from_env, parse_db


def test_mysql_defaults():
    config = mysql_from_env({})
    assert config.db_type == DatabaseType.MYSQL
    assert config.params == {
        "host": "localhost",
        "port": "3306",
        "user": "mcp",
        "password": "",
        "database": "test",
    }
    assert config.max_connections == 10
    assert config.name == "test"


def test_mysql_env_overrides():
    config = mysql_from_env({
        "MYSQL_HOST": "db.internal",
        "MYSQL_PORT": "3307",
        "MYSQL_USER": "app",
        "MYSQL_PASSWORD": "s3cret",
        "MYSQL_DATABASE": "shop",
        "MYSQL_POOL_SIZE": "4",
    })
    assert config.params["host"] == "db.internal"
    assert config.params["port"] == "3307"
    assert config.params["password"] == "s3cret"
    assert config.name == "shop"
    assert config.max_connections == 4


@pytest.mark.parametrize("port", ["abc", "-1", ""])
def test_bad_port(port):
    with pytest.raises(ConfigError, match="MYSQL_PORT"):
        mysql_from_env({"MYSQL_PORT": port})


@pytest.mark.parametrize("size", ["zero", "0"])
def test_bad_pool_size(size):
    with pytest.raises(ConfigError, match="MYSQL_POOL_SIZE"):
        mysql_from_env({"MYSQL_POOL_SIZE": size})


def test_parse_db_duckdb():
    config = parse_db("duckdb:path=/tmp/x.duckdb", {})
    assert config.db_type == DatabaseType.DUCKDB
    assert config.params == {"path": "/tmp/x.duckdb"}


def test_parse_db_no_params():
    config = parse_db("duckdb:", {})
    assert config.params == {}


def test_parse_db_unknown_type():
    with pytest.raises(ConfigError, match="Unknown database type"):
        parse_db("oracle:host=x", {})


def test_parse_db_bad_pair():
    with pytest.raises(ConfigError, match="key=value"):
        parse_db("mysql:host", {})


def test_parse_db_missing_colon():
    with pytest.raises(ConfigError, match="type:key=val"):
        parse_db("production", {})


def test_load_config_prefers_db_string():
    assert load_config("duckdb:", {}).db_type == DatabaseType.DUCKDB
    assert load_config(None, {}).db_type == DatabaseType.MYSQL
