"""
Application settings management using Pydantic Settings.

Loads configuration from environment variables with type validation.
Defaults match the production Helix deployment.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Azure Key Vault
    # =========================================================================
    key_vault_url: str = Field(
        default="https://helix-keys.vault.azure.net/",
        description="Key Vault holding the SQL server password",
    )
    sql_password_secret_name: str = Field(
        default="sql-databaseserver-password",
        description="Name of the Key Vault secret with the SQL password",
    )

    # =========================================================================
    # SQL Server
    # =========================================================================
    sql_server: str = Field(
        default="helix-database-server.database.windows.net",
        description="Azure SQL server host name",
    )
    sql_user: str = Field(default="helix-database-server", description="SQL login")
    sql_password: Optional[SecretStr] = Field(
        default=None,
        description="Local override for the SQL password (skips Key Vault)",
    )
    sql_project_database: str = Field(
        default="helix-project-data",
        description="Database with attendance and annual leave tables",
    )
    sql_core_database: str = Field(
        default="helix-core-data",
        description="Database with team and enquiry tables",
    )
    sql_encrypt: bool = Field(default=True, description="Encrypt SQL connections")
    sql_trust_server_certificate: bool = Field(
        default=False, description="Skip server certificate validation"
    )
    sql_connect_timeout: int = Field(
        default=30, description="SQL login timeout in seconds"
    )

    # =========================================================================
    # Business rules
    # =========================================================================
    timezone: str = Field(
        default="Europe/London", description="Time zone that defines 'today'"
    )
    attendance_check_next_working_day: bool = Field(
        default=False,
        description="Check attendance for the next working day instead of today",
    )

    # =========================================================================
    # Caching
    # =========================================================================
    leave_cache_ttl_seconds: int = Field(
        default=300, description="TTL for cached annual leave data"
    )
    bank_holiday_cache_ttl_seconds: int = Field(
        default=86400, description="TTL for cached bank holiday lists"
    )

    # =========================================================================
    # UK bank holidays
    # =========================================================================
    bank_holidays_url: str = Field(
        default="https://www.gov.uk/bank-holidays.json",
        description="gov.uk bank holidays feed",
    )
    bank_holidays_division: str = Field(
        default="england-and-wales",
        description="Division of the bank holidays feed to use",
    )

    # =========================================================================
    # Application Settings
    # =========================================================================
    environment: Literal["development", "staging", "production"] = Field(
        default="production", description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
