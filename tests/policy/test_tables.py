"""Test best-effort table extraction."""

from mysql_mcp.policy.tables import extract_tables


def test_select_join() -> None:
    sql = "SELECT * FROM orders o JOIN customers c ON o.cid = c.id"
    assert extract_tables(sql) == ["customers", "orders"]


def test_qualified_name() -> None:
    assert extract_tables("SELECT * FROM shop.orders") == ["shop.orders"]


def test_cte_names_excluded() -> None:
    sql = "WITH recent AS (SELECT * FROM orders) SELECT * FROM recent"
    assert extract_tables(sql) == ["orders"]


def test_dml_targets() -> None:
    assert extract_tables("INSERT INTO users (name) VALUES ('a')") == ["users"]
    assert extract_tables("UPDATE users SET name = 'b' WHERE id = 1") == ["users"]
    assert extract_tables("DELETE FROM users WHERE id = 1") == ["users"]


def test_create_table() -> None:
    assert extract_tables("CREATE TABLE t (id INT)") == ["t"]


def test_unparseable_returns_empty() -> None:
    assert extract_tables("SELEC FROM WHERE (((") == []
