"""
CLI entry point for dbschema_tools.

Usage:
    dbschema db:dsn [-c NAME]                       Print the connection string
    dbschema db:excel [output] [-c NAME] [-l LANG]  Export the schema to Excel
"""

import argparse
import logging
import sys

from dbschema_tools import __version__
from dbschema_tools.config import Settings
from dbschema_tools.db.dsn import connection_string
from dbschema_tools.db.models import ConnectionConfig
from dbschema_tools.descriptions import EN_US, SUPPORTED_LOCALES
from dbschema_tools.errors import DbSchemaError
from dbschema_tools.export import export_schema

logger = logging.getLogger(__name__)


def open_reader(config: ConnectionConfig):
    """Connect and wrap the connection in a schema reader."""
    from dbschema_tools.db.reader import OdbcSchemaReader, connect

    return OdbcSchemaReader(connect(config))


def cmd_dsn(args, settings: Settings) -> int:
    """Print the connection string of a named connection."""
    config = settings.get_connection(args.connection)
    try:
        print(connection_string(config, include_credentials=args.with_credentials))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_excel(args, settings: Settings) -> int:
    """Export the database schema to an Excel workbook."""
    if args.def_lang and args.def_lang not in SUPPORTED_LOCALES:
        logger.warning("Unknown language %r, descriptions will be left empty", args.def_lang)

    config = settings.get_connection(args.connection)
    with open_reader(config) as reader:
        path = export_schema(
            reader,
            output=args.output,
            locale=args.def_lang,
            app_name=settings.app_name,
        )

    print(f"[Export to] {path}")
    return 0


COMMANDS = {
    "db:dsn": cmd_dsn,
    "db:excel": cmd_excel,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbschema",
        description="Database schema tools",
    )
    parser.add_argument("--version", action="version", version=f"dbschema {__version__}")
    parser.add_argument("--config", help="Settings file (default: etc/dbschema.toml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    dsn_p = subparsers.add_parser("db:dsn", help="Show the DSN of a database connection")
    dsn_p.add_argument("-c", "--connection", help="The db connection to use")
    dsn_p.add_argument(
        "--with-credentials", action="store_true", help="Include user name and password"
    )
    dsn_p.set_defaults(func=COMMANDS["db:dsn"])

    excel_p = subparsers.add_parser("db:excel", help="Export DB schema to Excel file")
    excel_p.add_argument("output", nargs="?", default=None, help="The output path")
    excel_p.add_argument("-c", "--connection", help="The db connection to use")
    excel_p.add_argument(
        "-l",
        "--def-lang",
        default=EN_US,
        help=f"Use default descriptions in this language ({', '.join(SUPPORTED_LOCALES)})",
    )
    excel_p.set_defaults(func=COMMANDS["db:excel"])

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        settings = Settings.load(args.config)
        return args.func(args, settings)
    except (DbSchemaError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
