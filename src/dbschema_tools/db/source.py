"""Interface between the exporter and whatever supplies schema metadata."""

from typing import Protocol

from dbschema_tools.db.models import Column, Table


class SchemaSource(Protocol):
    """Anything that can list tables and their columns, in database order."""

    def list_tables(self) -> list[Table]: ...

    def list_columns(self, table_name: str) -> list[Column]: ...
