"""Tests for the pyodbc schema reader.

No database is contacted: the connection is a fake exposing the same
catalog calls as a pyodbc cursor. Tests are skipped if pyodbc cannot be
imported (it needs the unixODBC runtime on Linux).
"""

import re
from types import SimpleNamespace

import pytest

pyodbc = pytest.importorskip("pyodbc")

from dbschema_tools.db.models import Column, ConnectionConfig, Table  # noqa: E402
from dbschema_tools.db.reader import OdbcSchemaReader, connect  # noqa: E402
from dbschema_tools.errors import DataSourceError  # noqa: E402


def _column(name, type_name, size=None, nullable=1, remarks=None, digits=None):
    return SimpleNamespace(
        column_name=name,
        type_name=type_name,
        column_size=size,
        decimal_digits=digits,
        nullable=nullable,
        remarks=remarks,
    )


def _index(column, position=1, non_unique=True):
    return SimpleNamespace(column_name=column, ordinal_position=position, non_unique=non_unique)


def _like(pattern, name):
    """Match ``name`` against an ODBC search pattern ("_" and "%" are wildcards)."""
    regex = "".join(
        "." if ch == "_" else ".*" if ch == "%" else re.escape(ch) for ch in pattern
    )
    return re.fullmatch(regex, name) is not None


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.catalog = conn.catalog
        self.fail_on = conn.fail_on

    def tables(self, tableType=None):
        if self.fail_on == "tables":
            raise pyodbc.Error("HY000", "catalog unavailable")
        rows = [
            SimpleNamespace(table_cat="site", table_schem="app", table_name=name)
            for name in self.catalog
        ]
        rows += [
            SimpleNamespace(table_cat="site", table_schem=schema, table_name=name)
            for name, schema in self.conn.other_schema_tables
        ]
        return rows

    def columns(self, table=None, catalog=None, schema=None):
        if self.fail_on == "columns":
            raise pyodbc.Error("42S02", "table vanished")
        self.conn.lookups.append(("columns", table, catalog, schema))
        return iter([
            SimpleNamespace(table_name=name, **vars(column))
            for name, entry in self.catalog.items()
            if _like(table, name)
            for column in entry["columns"]
        ])

    def primaryKeys(self, table, catalog=None, schema=None):
        self.conn.lookups.append(("primaryKeys", table, catalog, schema))
        return [SimpleNamespace(column_name=name) for name in self.catalog[table]["primary"]]

    def statistics(self, table, catalog=None, schema=None):
        self.conn.lookups.append(("statistics", table, catalog, schema))
        # The table-statistics row has no column name
        return [SimpleNamespace(column_name=None, ordinal_position=None, non_unique=None)] + list(
            self.catalog[table]["indexes"]
        )

    def close(self):
        self.conn.closed_cursors += 1


class FakeConnection:
    def __init__(self, catalog, fail_on=None, other_schema_tables=()):
        self.catalog = catalog
        self.fail_on = fail_on
        self.other_schema_tables = list(other_schema_tables)
        self.lookups = []
        self.opened_cursors = 0
        self.closed_cursors = 0
        self.closed = False

    def cursor(self):
        self.opened_cursors += 1
        return FakeCursor(self)

    def close(self):
        self.closed = True


CATALOG = {
    "users": {
        "columns": [
            _column("id", "int", 10, nullable=0),
            _column("email", "varchar", 255, nullable=0, remarks="Login email"),
            _column("group_id", "int", 10),
            _column("price", "decimal", 10, digits=2),
        ],
        "primary": ["id"],
        "indexes": [
            _index("id", non_unique=False),
            _index("email", non_unique=False),
            _index("group_id"),
            _index("price", position=2),
        ],
    },
    "MSysObjects": {"columns": [], "primary": [], "indexes": []},
    "tags": {"columns": [_column("id", "int", 10, nullable=0)], "primary": ["id"], "indexes": []},
}


def test_list_tables_keeps_driver_order_and_skips_system_tables():
    reader = OdbcSchemaReader(FakeConnection(CATALOG))
    assert reader.list_tables() == [Table(name="users"), Table(name="tags")]


def test_list_columns():
    reader = OdbcSchemaReader(FakeConnection(CATALOG))
    assert reader.list_columns("users") == [
        Column(field="id", type="INT", nullable=False, key="PRI"),
        Column(field="email", type="VARCHAR(255)", nullable=False, key="UNI", comment="Login email"),
        Column(field="group_id", type="INT", nullable=True, key="MUL"),
        Column(field="price", type="DECIMAL(10,2)", nullable=True, key=""),
    ]


def test_list_tables_error():
    reader = OdbcSchemaReader(FakeConnection(CATALOG, fail_on="tables"))
    with pytest.raises(DataSourceError, match="Cannot list tables"):
        reader.list_tables()


def test_list_columns_error_names_table():
    reader = OdbcSchemaReader(FakeConnection(CATALOG, fail_on="columns"))
    with pytest.raises(DataSourceError, match="columns of table users"):
        reader.list_columns("users")


def test_context_manager_closes_connection():
    conn = FakeConnection(CATALOG)
    with OdbcSchemaReader(conn) as reader:
        reader.list_tables()
    assert conn.closed


def test_list_columns_ignores_tables_matching_the_search_pattern():
    catalog = {
        "tag_maps": {"columns": [_column("tag_id", "int", 10)], "primary": [], "indexes": []},
        "tagXmaps": {"columns": [_column("legacy", "text")], "primary": [], "indexes": []},
    }
    reader = OdbcSchemaReader(FakeConnection(catalog))
    assert [c.field for c in reader.list_columns("tag_maps")] == ["tag_id"]
    assert [c.field for c in reader.list_columns("tagXmaps")] == ["legacy"]


def test_list_columns_uses_catalog_and_schema_of_the_table():
    conn = FakeConnection(CATALOG, other_schema_tables=[("users", "archive")])
    reader = OdbcSchemaReader(conn)
    # A name reported by a second schema does not produce a second sheet
    assert reader.list_tables() == [Table(name="users"), Table(name="tags")]

    reader.list_columns("users")
    assert conn.lookups == [
        ("columns", "users", "site", "app"),
        ("primaryKeys", "users", "site", "app"),
        ("statistics", "users", "site", "app"),
    ]


def test_cursors_are_closed():
    conn = FakeConnection(CATALOG)
    reader = OdbcSchemaReader(conn)
    for table in reader.list_tables():
        reader.list_columns(table.name)
    assert conn.opened_cursors == 3
    assert conn.closed_cursors == 3


def test_cursor_is_closed_on_error():
    conn = FakeConnection(CATALOG, fail_on="columns")
    with pytest.raises(DataSourceError):
        OdbcSchemaReader(conn).list_columns("users")
    assert conn.closed_cursors == conn.opened_cursors == 1


def test_connect_wraps_driver_errors(monkeypatch):
    def refuse(conn_str):
        raise pyodbc.Error("08001", "server not found")

    monkeypatch.setattr(pyodbc, "connect", refuse)
    with pytest.raises(DataSourceError, match="Cannot connect"):
        connect(ConnectionConfig(driver="MySQL ODBC 8.0 Unicode Driver", host="nowhere"))


def test_connect_without_driver():
    with pytest.raises(DataSourceError, match="no ODBC driver"):
        connect(ConnectionConfig())
