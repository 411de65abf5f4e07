"""Build ODBC connection strings from connection settings."""

from dbschema_tools.db.models import ConnectionConfig


def connection_string(config: ConnectionConfig, include_credentials: bool = False) -> str:
    """Build an ODBC connection string for a configured connection.

    Parameters
    ----------
    config : ConnectionConfig
        The connection settings.
    include_credentials : bool
        Append ``UID`` and ``PWD`` when they are configured.

    Returns
    -------
    str
        The connection string. A literal ``dsn`` is returned unchanged.

    Raises
    ------
    ValueError
        If neither a driver nor a literal dsn is configured.
    """
    if config.dsn:
        return config.dsn
    if not config.driver:
        raise ValueError("Connection has no ODBC driver or dsn configured")

    parts = [f"DRIVER={{{config.driver}}}"]
    if config.host:
        parts.append(f"SERVER={config.host}")
    if config.port:
        parts.append(f"PORT={config.port}")
    if config.database:
        parts.append(f"DATABASE={config.database}")
    for key, value in config.options.items():
        parts.append(f"{key}={value}")
    if include_credentials:
        if config.user:
            parts.append(f"UID={config.user}")
        if config.password:
            parts.append(f"PWD={config.password}")
    return ";".join(parts) + ";"
