"""Application settings: the application name and named database connections.

Settings are read from a TOML file::

    app_name = "mysite"
    default_connection = "local"

    [connections.local]
    driver = "MySQL ODBC 8.0 Unicode Driver"
    host = "127.0.0.1"
    port = 3306
    database = "mysite"
    user = "root"
    password = "secret"

The file is looked up at the path passed in, then ``$DBSCHEMA_CONFIG``, then
``etc/dbschema.toml`` in the working directory. A missing file gives the
defaults. ``DBSCHEMA_APP_NAME`` and ``DBSCHEMA_DEFAULT_CONNECTION`` override
the matching keys.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from dbschema_tools.db.models import ConnectionConfig
from dbschema_tools.errors import ConfigError, DataSourceError

DEFAULT_CONFIG_PATH = Path("etc") / "dbschema.toml"
CONFIG_PATH_ENV = "DBSCHEMA_CONFIG"

ENV_OVERRIDES: dict[str, str] = {
    "app_name": "DBSCHEMA_APP_NAME",
    "default_connection": "DBSCHEMA_DEFAULT_CONNECTION",
}


class Settings(BaseModel):
    app_name: str = "dbschema"
    default_connection: str = "default"
    connections: dict[str, ConnectionConfig] = Field(default_factory=dict)

    @classmethod
    def load(cls, path: str | Path | None = None) -> Settings:
        """Read settings from a TOML file and apply environment overrides.

        Raises
        ------
        ConfigError
            If the file is not valid TOML or does not match the schema.
        """
        if path is None:
            path = os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
        path = Path(path)

        data: dict = {}
        if path.exists():
            try:
                data = tomllib.loads(path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        for key, env_name in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                data[key] = value

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {path}: {e}") from e

    def get_connection(self, name: str | None = None) -> ConnectionConfig:
        """Return a named connection, or the default one when no name is given.

        Raises
        ------
        DataSourceError
            If no connection has that name.
        """
        name = name or self.default_connection
        try:
            return self.connections[name]
        except KeyError:
            available = ", ".join(sorted(self.connections)) or "none"
            raise DataSourceError(
                f"Unknown database connection: {name!r} (configured: {available})"
            ) from None
