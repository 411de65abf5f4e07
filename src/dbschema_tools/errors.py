"""Exception types raised by dbschema_tools.

File system failures are left as the built-in ``OSError``.
"""


class DbSchemaError(Exception):
    """Base class for errors reported by the console commands."""


class DataSourceError(DbSchemaError):
    """A connection is unknown, cannot be opened, or a metadata query failed."""


class ConfigError(DbSchemaError):
    """The settings file cannot be parsed or does not validate."""
