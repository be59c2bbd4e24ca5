"""
Async SQL Server client.

Wraps the blocking pymssql driver: every call opens a short-lived
connection in a worker thread, runs one parametrised statement and
closes the connection.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional

import pymssql
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from helix_hub.config import get_settings
from helix_hub.exceptions import DatabaseError

from .connection import SqlConnectionConfig, build_connection_string, parse_connection_string
from .secrets import SqlPasswordProvider, get_password_provider

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class SqlClient:
    """
    Async client for one Helix SQL database.

    Uses the Key Vault password to build the connection string, then
    runs queries with pymssql using ``%(name)s`` parameters.
    """

    def __init__(
        self,
        database: str,
        password_provider: Optional[SqlPasswordProvider] = None,
    ):
        """
        Initialize the client for a database.

        Args:
            database: Database name (e.g. "helix-project-data")
            password_provider: Optional provider; defaults to the shared one
        """
        self.settings = get_settings()
        self.database = database
        self._password_provider = password_provider or get_password_provider()
        self._config: Optional[SqlConnectionConfig] = None

    async def _get_config(self) -> SqlConnectionConfig:
        if self._config is None:
            password = await self._password_provider.get_password()
            connection_string = build_connection_string(
                server=self.settings.sql_server,
                database=self.database,
                user=self.settings.sql_user,
                password=password,
                encrypt=self.settings.sql_encrypt,
                trust_server_certificate=self.settings.sql_trust_server_certificate,
                connect_timeout=self.settings.sql_connect_timeout,
            )
            self._config = parse_connection_string(connection_string)
        return self._config

    @retry(
        retry=retry_if_exception_type(pymssql.OperationalError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
    )
    def _run(
        self,
        config: SqlConnectionConfig,
        sql: str,
        params: Optional[Mapping[str, Any]],
        fetch: bool,
    ) -> tuple[list[Row], int]:
        connection = pymssql.connect(**config.to_connect_kwargs())
        try:
            cursor = connection.cursor(as_dict=True)
            try:
                cursor.execute(sql, dict(params) if params else None)
                rows = list(cursor.fetchall()) if fetch else []
                rowcount = cursor.rowcount
            finally:
                cursor.close()
            if not fetch:
                connection.commit()
            return rows, rowcount
        finally:
            connection.close()

    async def _execute(
        self, sql: str, params: Optional[Mapping[str, Any]], fetch: bool
    ) -> tuple[list[Row], int]:
        config = await self._get_config()
        try:
            return await asyncio.to_thread(self._run, config, sql, params, fetch)
        except RetryError as e:
            cause = e.last_attempt.exception()
            logger.error(f"SQL connection to {self.database} failed after retries: {cause}")
            raise DatabaseError(f"Failed to connect to SQL database {self.database}.") from cause
        except pymssql.Error as e:
            logger.error(f"SQL query execution error ({self.database}): {e}")
            raise DatabaseError("SQL query failed.") from e

    async def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> list[Row]:
        """
        Run a SELECT and return its rows.

        Args:
            sql: Parametrised SQL using ``%(name)s`` placeholders
            params: Parameter values

        Returns:
            list[dict]: One dict per row, keyed by column name
        """
        logger.debug(f"SQL query ({self.database}) with parameters: {params}")
        rows, _ = await self._execute(sql, params, fetch=True)
        logger.info(f"SQL query executed successfully ({self.database}). Rows returned: {len(rows)}")
        return rows

    async def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """
        Run a data-modifying statement and commit it.

        Returns:
            int: Number of affected rows
        """
        logger.debug(f"SQL statement ({self.database}) with parameters: {params}")
        _, rowcount = await self._execute(sql, params, fetch=False)
        logger.info(f"SQL statement executed successfully ({self.database}). Rows affected: {rowcount}")
        return rowcount
