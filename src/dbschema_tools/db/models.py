"""Data models for database connections and introspected schema metadata."""

from pydantic import BaseModel, ConfigDict, Field


class ConnectionConfig(BaseModel):
    """Settings for one named ODBC connection."""

    driver: str = Field(default="", description="ODBC driver name, e.g. 'MySQL ODBC 8.0 Unicode Driver'")
    host: str = Field(default="", description="Database server host name")
    port: int | None = Field(default=None, gt=0, le=65535)
    database: str = Field(default="", description="Database (schema) name")
    user: str = ""
    password: str = ""
    options: dict[str, str] = Field(
        default_factory=dict, description="Extra ODBC keywords appended to the connection string"
    )
    dsn: str | None = Field(
        default=None, description="Literal connection string; overrides every other field when set"
    )


class Table(BaseModel):
    """A database table as reported by schema introspection."""

    model_config = ConfigDict(frozen=True)

    name: str


class Column(BaseModel):
    """A table column as reported by schema introspection."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Column name")
    type: str = Field(description="Declared type, e.g. 'VARCHAR(255)'")
    nullable: bool = True
    key: str = Field(default="", description="Key role: PRI, UNI, MUL or empty")
    comment: str = Field(default="", description="Comment stored in the database")
