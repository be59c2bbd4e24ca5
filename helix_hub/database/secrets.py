"""
Azure Key Vault access for the SQL password.

Uses DefaultAzureCredential, so the function app's managed identity is
picked up in Azure and the developer's ``az login`` session locally.
"""

import asyncio
import logging
from typing import Optional

from azure.core.exceptions import AzureError
from azure.identity.aio import DefaultAzureCredential
from azure.keyvault.secrets.aio import SecretClient

from helix_hub.config import get_settings
from helix_hub.exceptions import SecretRetrievalError

logger = logging.getLogger(__name__)


class SqlPasswordProvider:
    """
    Retrieves and caches the SQL server password.

    The password is read once per process. Set ``SQL_PASSWORD`` to bypass
    Key Vault when running locally.
    """

    def __init__(self):
        """Initialize the provider with settings."""
        self.settings = get_settings()
        self._password: Optional[str] = None
        self._lock = asyncio.Lock()

    async def get_password(self) -> str:
        """
        Get the SQL password.

        Returns:
            str: The password (empty string if the secret has no value)

        Raises:
            SecretRetrievalError: If Key Vault cannot be reached or denies access
        """
        if self.settings.sql_password is not None:
            return self.settings.sql_password.get_secret_value()

        async with self._lock:
            if self._password is None:
                self._password = await self._fetch_from_key_vault()
        return self._password

    async def _fetch_from_key_vault(self) -> str:
        secret_name = self.settings.sql_password_secret_name
        try:
            async with DefaultAzureCredential() as credential:
                async with SecretClient(
                    vault_url=self.settings.key_vault_url, credential=credential
                ) as client:
                    secret = await client.get_secret(secret_name)
        except AzureError as e:
            logger.error(f"Failed to retrieve secret '{secret_name}' from Key Vault: {e}")
            raise SecretRetrievalError(
                f"Could not retrieve secret '{secret_name}' from Key Vault"
            ) from e

        logger.info("Retrieved SQL password from Key Vault.")
        return secret.value or ""

    def clear(self) -> None:
        """Forget the cached password, e.g. after a rotation."""
        self._password = None


_password_provider: Optional[SqlPasswordProvider] = None


def get_password_provider() -> SqlPasswordProvider:
    """Get the process-wide password provider."""
    global _password_provider
    if _password_provider is None:
        _password_provider = SqlPasswordProvider()
    return _password_provider
