"""Shared fixtures: an in-memory schema source standing in for a database."""

import pytest

from dbschema_tools.db.models import Column, Table


class FakeSchemaSource:
    """Schema source backed by a dict of table name -> columns."""

    def __init__(self, tables: dict[str, list[Column]]):
        self.tables = tables
        self.column_queries: list[str] = []

    def list_tables(self) -> list[Table]:
        return [Table(name=name) for name in self.tables]

    def list_columns(self, table_name: str) -> list[Column]:
        self.column_queries.append(table_name)
        return list(self.tables[table_name])


@pytest.fixture
def schema_source():
    return FakeSchemaSource(
        {
            "users": [
                Column(field="id", type="INT", nullable=False, key="PRI", comment="Primary key"),
                Column(field="created", type="DATETIME", nullable=True, comment="Row creation"),
            ],
            "tags": [
                Column(field="id", type="INT", nullable=False, key="PRI"),
                Column(field="title", type="VARCHAR(255)", nullable=False, key="MUL"),
                Column(field="foobar_xyz", type="TEXT", comment="Custom field"),
            ],
        }
    )


@pytest.fixture
def fake_source():
    return FakeSchemaSource
