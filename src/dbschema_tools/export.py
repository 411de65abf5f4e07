"""Export a database schema to an Excel workbook.

The workbook starts with a ``Summary`` sheet listing every table, followed by
one sheet per table listing its columns. Tables and columns keep the order
reported by the schema source.
"""

import logging
from pathlib import Path

from dbschema_tools.db.source import SchemaSource
from dbschema_tools.descriptions import EN_US, resolve_column_description, resolve_table_description
from dbschema_tools.sheets import SheetSink, WorkbookWriter

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("tmp")
SUMMARY_TITLE = "Summary"


def default_filename(app_name: str) -> str:
    """File name used when no output file is given."""
    return f"DbSchema-{app_name}.xlsx"


def resolve_output_path(output: str | Path | None, app_name: str) -> Path:
    """Work out where the workbook goes and create its parent directory.

    Parameters
    ----------
    output : str | Path | None
        A file path, an existing directory, or nothing for the default
        ``tmp/DbSchema-<app_name>.xlsx``.
    app_name : str
        Application name used in the default file name.

    Returns
    -------
    Path
        Absolute path of the workbook file.

    Raises
    ------
    OSError
        If the parent directory cannot be created.
    """
    filename = default_filename(app_name)
    path = Path(output) if output else DEFAULT_OUTPUT_DIR / filename

    path.parent.mkdir(parents=True, exist_ok=True)
    if path.is_dir():
        path = path / filename
    return path.resolve()


def _write_summary(sink: SheetSink, tables, locale: str | None) -> None:
    sheet = sink.set_active_sheet(0)
    sheet.title = SUMMARY_TITLE
    sink.freeze_pane("A2")

    sink.add_column("table", "Table", 15)
    sink.add_column("desc", "Description", 25)

    for table in tables:
        desc = resolve_table_description(table.name, locale) if locale else ""
        sink.add_row({"table": table.name, "desc": desc})


def _write_table(sink: SheetSink, table_name: str, columns, locale: str | None) -> None:
    sink.set_active_sheet(table_name)
    sink.freeze_pane("B2")

    sink.add_column("table", "Table", 20)
    sink.add_column("type", "Type", 15)
    sink.add_column("nullable", "Nullable")
    sink.add_column("key", "Key")
    sink.add_column("description", "Description", 30)

    for column in columns:
        desc = resolve_column_description(column.field, locale) if locale else ""
        sink.add_row({
            "table": column.field,
            "type": column.type,
            "nullable": "YES" if column.nullable else "NO",
            "key": column.key,
            "description": desc or column.comment,
        })


def build_workbook(source: SchemaSource, locale: str | None, sink: SheetSink) -> None:
    """Write the Summary sheet and one sheet per table into ``sink``.

    An empty ``locale`` turns descriptions off, leaving the stored column comments.
    """
    tables = source.list_tables()
    _write_summary(sink, tables, locale)

    for table in tables:
        columns = source.list_columns(table.name)
        logger.info("  %s: %d columns", table.name, len(columns))
        _write_table(sink, table.name, columns, locale)

    sink.set_active_sheet(0)


def export_schema(
    source: SchemaSource,
    output: str | Path | None = None,
    locale: str | None = EN_US,
    app_name: str = "dbschema",
    sink: SheetSink | None = None,
) -> Path:
    """Export the schema of ``source`` to an xlsx file and return its absolute path.

    Raises
    ------
    DataSourceError
        If the schema source fails to list tables or columns.
    OSError
        If the output directory or file cannot be written.
    """
    path = resolve_output_path(output, app_name)
    if sink is None:
        sink = WorkbookWriter()

    logger.info("Reading database schema...")
    build_workbook(source, locale, sink)

    sink.save(path)
    logger.info("Saved: %s", path)
    return path
