"""Read table and column metadata from a database through pyodbc.

Tables and columns are returned in the order the ODBC driver reports them.
Nothing is sorted, so the exported workbook follows the database's own order.
"""

import logging
from contextlib import closing

import pyodbc

from dbschema_tools.db.dsn import connection_string
from dbschema_tools.db.models import Column, ConnectionConfig, Table
from dbschema_tools.errors import DataSourceError

logger = logging.getLogger(__name__)

# Value of SQLColumns NULLABLE for NOT NULL columns
_SQL_NO_NULLS = 0

# Types whose declared length is part of the type, e.g. VARCHAR(255)
_SIZED_TYPE_MARKERS = ("CHAR", "BINARY")
_DECIMAL_TYPES = ("DECIMAL", "NUMERIC")


def connect(config: ConnectionConfig) -> pyodbc.Connection:
    """Open an ODBC connection.

    Raises
    ------
    DataSourceError
        If the driver refuses the connection.
    """
    try:
        return pyodbc.connect(connection_string(config, include_credentials=True))
    except (pyodbc.Error, ValueError) as e:
        raise DataSourceError(f"Cannot connect to database: {e}") from e


def _format_type(row) -> str:
    type_name = (row.type_name or "").upper()
    if any(marker in type_name for marker in _SIZED_TYPE_MARKERS) and row.column_size:
        return f"{type_name}({row.column_size})"
    if type_name in _DECIMAL_TYPES and row.column_size:
        return f"{type_name}({row.column_size},{row.decimal_digits or 0})"
    return type_name


class OdbcSchemaReader:
    """Schema source backed by an open pyodbc connection."""

    def __init__(self, conn: pyodbc.Connection):
        self.conn = conn
        # table name -> (catalog, schema) as reported by list_tables
        self._locations: dict[str, tuple[str | None, str | None]] = {}

    def __enter__(self) -> "OdbcSchemaReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.conn.close()

    def list_tables(self) -> list[Table]:
        """List user tables, skipping views and Access system tables."""
        try:
            with closing(self.conn.cursor()) as cursor:
                rows = [
                    row
                    for row in cursor.tables(tableType="TABLE")
                    if not row.table_name.startswith("MSys")
                ]
        except pyodbc.Error as e:
            raise DataSourceError(f"Cannot list tables: {e}") from e

        names = []
        for row in rows:
            # The first schema reporting a name wins
            if row.table_name not in self._locations:
                self._locations[row.table_name] = (row.table_cat, row.table_schem)
                names.append(row.table_name)
        logger.debug("Found %d tables", len(names))
        return [Table(name=name) for name in names]

    def list_columns(self, table_name: str) -> list[Column]:
        """List the columns of one table with their type, nullability, key role and comment."""
        logger.debug("Reading columns of %s", table_name)
        catalog, schema = self._locations.get(table_name, (None, None))
        try:
            with closing(self.conn.cursor()) as cursor:
                # Materialize each catalog call before issuing the next one on the same cursor.
                # The table argument of columns() is a search pattern where "_" matches any
                # character, so rows of other tables are dropped.
                column_rows = [
                    row
                    for row in cursor.columns(table=table_name, catalog=catalog, schema=schema)
                    if row.table_name == table_name
                ]
                primary = {
                    row.column_name
                    for row in cursor.primaryKeys(table_name, catalog=catalog, schema=schema)
                }
                index_rows = [
                    row
                    for row in cursor.statistics(table_name, catalog=catalog, schema=schema)
                    if row.column_name is not None
                ]
        except pyodbc.Error as e:
            raise DataSourceError(f"Cannot read columns of table {table_name}: {e}") from e

        unique: set[str] = set()
        indexed: set[str] = set()
        for row in index_rows:
            # Only the leading column of an index carries the index's key role
            if row.ordinal_position != 1:
                continue
            if row.non_unique:
                indexed.add(row.column_name)
            else:
                unique.add(row.column_name)

        columns = []
        for row in column_rows:
            name = row.column_name
            if name in primary:
                key = "PRI"
            elif name in unique:
                key = "UNI"
            elif name in indexed:
                key = "MUL"
            else:
                key = ""
            columns.append(
                Column(
                    field=name,
                    type=_format_type(row),
                    nullable=row.nullable != _SQL_NO_NULLS,
                    key=key,
                    comment=row.remarks or "",
                )
            )
        return columns
