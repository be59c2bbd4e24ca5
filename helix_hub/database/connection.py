"""
SQL Server connection strings.

Connection strings use the ADO.NET ``Key=Value;`` form the Azure portal
hands out. They are parsed into a typed config, which is then turned into
keyword arguments for pymssql.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, SecretStr

from helix_hub.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SqlConnectionConfig(BaseModel):
    """Parsed SQL Server connection settings."""

    server: str = ""
    database: Optional[str] = None
    user: str = ""
    password: SecretStr = Field(default=SecretStr(""))
    encrypt: bool = False
    trust_server_certificate: bool = False
    connect_timeout: Optional[int] = None

    def to_connect_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``pymssql.connect``."""
        if self.encrypt:
            encryption = "request" if self.trust_server_certificate else "require"
        else:
            encryption = "off"
        kwargs: dict[str, Any] = {
            "server": self.server,
            "user": self.user,
            "password": self.password.get_secret_value(),
            "encryption": encryption,
        }
        if self.database:
            kwargs["database"] = self.database
        if self.connect_timeout is not None:
            kwargs["login_timeout"] = self.connect_timeout
        return kwargs


def build_connection_string(
    server: str,
    database: str,
    user: str,
    password: str,
    encrypt: bool = True,
    trust_server_certificate: bool = False,
    connect_timeout: Optional[int] = None,
) -> str:
    """
    Assemble an ADO.NET-style SQL Server connection string.

    Args:
        server: SQL server host
        database: Database name
        user: SQL login
        password: SQL password
        encrypt: Whether to encrypt the connection
        trust_server_certificate: Whether to skip certificate validation
        connect_timeout: Optional login timeout in seconds

    Returns:
        Connection string ending with a trailing ``;``
    """
    connection_string = (
        f"Server={server};Database={database};User ID={user};Password={password};"
        f"Encrypt={str(encrypt).lower()};"
        f"TrustServerCertificate={str(trust_server_certificate).lower()};"
    )
    if connect_timeout is not None:
        connection_string += f"Connect Timeout={connect_timeout};"
    return connection_string


def _as_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def parse_connection_string(connection_string: str) -> SqlConnectionConfig:
    """
    Parse a SQL Server connection string.

    Args:
        connection_string: String of ``Key=Value`` pairs separated by ``;``

    Returns:
        SqlConnectionConfig with the recognised keys applied

    Raises:
        ConfigurationError: If no server is given
    """
    logger.debug("Parsing SQL connection string.")
    values: dict[str, Any] = {}

    for part in connection_string.split(";"):
        if not part.strip():
            continue

        key, sep, value = part.partition("=")
        key = key.strip()
        if not sep or not key or not value:
            logger.warning(f"Invalid connection string part encountered: '{key}'")
            continue

        if key == "Server":
            values["server"] = value
        elif key == "Database":
            values["database"] = value
        elif key == "User ID":
            values["user"] = value
        elif key == "Password":
            values["password"] = SecretStr(value)
        elif key == "Encrypt":
            values["encrypt"] = _as_bool(value)
        elif key == "TrustServerCertificate":
            values["trust_server_certificate"] = _as_bool(value)
        elif key == "Connect Timeout":
            try:
                values["connect_timeout"] = int(value)
            except ValueError:
                logger.warning(f"Invalid Connect Timeout value: '{value}'")
        else:
            logger.warning(f"Unknown connection string key encountered: '{key}'")

    if not values.get("server"):
        raise ConfigurationError("SQL connection string has no Server.")

    config = SqlConnectionConfig(**values)
    # SecretStr masks the password in the repr
    logger.debug(f"SQL connection configuration parsed successfully: {config!r}")
    return config
