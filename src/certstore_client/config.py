"""
Client configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (keyfactor_hostname)
- In .env or ENV vars: UPPER_CASE (KEYFACTOR_HOSTNAME)
- Pydantic automatically converts between both
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified client configuration.

    All variables can be defined in:
    - .env file: VARIABLE_NAME=value
    - Environment variables: export VARIABLE_NAME=value

    Example:
        # In .env or as environment variable:
        KEYFACTOR_HOSTNAME=keyfactor.example.com
        KEYFACTOR_USERNAME=svc-certstores
        KEYFACTOR_DOMAIN=EXAMPLE
        LOG_LEVEL=INFO
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allows using uppercase or lowercase
        extra="ignore",  # Ignores extra variables in .env
    )

    # ============================================================================
    # SERVICE SETTINGS
    # ============================================================================
    keyfactor_hostname: str = Field(
        default="", description="Hostname of the certificate-management service"
    )
    keyfactor_api_path: str = Field(
        default="KeyfactorAPI", description="Path prefix of the REST API"
    )
    keyfactor_api_version: str = Field(
        default="1", description="Value of the x-keyfactor-api-version header"
    )
    keyfactor_requested_with: str = Field(
        default="APIClient",
        description="Value of the x-keyfactor-requested-with header",
    )

    # ============================================================================
    # CREDENTIALS
    # ============================================================================
    keyfactor_username: str = Field(default="", description="API username")
    keyfactor_password: SecretStr = Field(
        default=SecretStr(""), description="API password"
    )
    keyfactor_domain: str = Field(
        default="", description="Windows domain prepended to the username"
    )

    # ============================================================================
    # HTTP SETTINGS
    # ============================================================================
    request_timeout: float = Field(
        default=30.0, description="Request timeout in seconds"
    )
    verify_tls: bool = Field(
        default=True, description="Verify the service TLS certificate"
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | trace_id={extra[trace_id]} | {name}:{function}:{line} - {message}",  # noqa: E501
        description="Log format",
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )
    intercept_httpx_logs: bool = Field(
        default=False,
        description="Redirect httpx/httpcore standard logging records to loguru",
    )

    # ============================================================================
    # HELPER METHODS
    # ============================================================================

    def get_base_url(self) -> str:
        """
        Get the base URL every endpoint is resolved against.

        Returns:
            str: URL of the form https://<hostname>/<api_path>/
        """
        hostname = self.keyfactor_hostname.strip().rstrip("/")
        if not hostname.startswith(("http://", "https://")):
            hostname = f"https://{hostname}"
        api_path = self.keyfactor_api_path.strip("/")
        return f"{hostname}/{api_path}/"

    def get_username(self) -> str:
        """
        Get the username sent with basic authentication.

        Returns:
            str: "<domain>\\<username>" when a domain is configured, else the username.
        """
        if self.keyfactor_domain and "\\" not in self.keyfactor_username:
            return f"{self.keyfactor_domain}\\{self.keyfactor_username}"
        return self.keyfactor_username


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get client settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Usage:
        from certstore_client.config import get_settings
        settings = get_settings()
        print(settings.get_base_url())

    Returns:
        Settings: Client configuration instance.
    """
    return Settings()
