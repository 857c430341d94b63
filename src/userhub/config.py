"""
Application configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (postgres_host)
- In .env or ENV vars: UPPER_CASE (POSTGRES_HOST)
- Pydantic automatically converts between both
"""

from functools import lru_cache
from urllib.parse import quote

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("human", "json")


class Settings(BaseSettings):
    """
    Unified application configuration.

    All variables can be defined in:
    - .env file: VARIABLE_NAME=value
    - Environment variables: export VARIABLE_NAME=value

    Example:
        # In .env or as environment variable:
        POSTGRES_HOST=db
        LOG_LEVEL=DEBUG
        LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allows using uppercase or lowercase
        extra="ignore",  # Ignores extra variables in .env
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(default="userhub", description="Project name")
    project_description: str = Field(
        default="User account backend",
        description="Project description",
    )
    project_version: str = Field(default="0.1.0", description="Project version")

    # ============================================================================
    # SERVER SETTINGS
    # ============================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    enable_docs: bool = Field(
        default=False, description="Enable API documentation (Swagger/ReDoc)"
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="human",
        description="Log output format (human, json)",
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )

    # ============================================================================
    # CORS SETTINGS
    # ============================================================================
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Allowed origins for CORS (comma-separated)",
    )
    cors_allowed_methods: str = Field(
        default="GET,POST,OPTIONS", description="Allowed HTTP methods for CORS"
    )
    cors_allowed_headers: str = Field(
        default="Content-Type,Authorization",
        description="Allowed headers for CORS",
    )

    # ============================================================================
    # DATABASE SETTINGS
    # ============================================================================
    initialize_database: bool = Field(
        default=True, description="Initialize database on startup"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_name: str = Field(default="userhub", description="Database name")
    postgres_user: str = Field(default="userhub", description="Database user")
    postgres_password: SecretStr = Field(
        default=SecretStr("userhub"), description="Database password"
    )
    postgres_max_connections: int = Field(
        default=10, ge=1, description="Connection pool size"
    )
    postgres_pool_timeout: float = Field(
        default=5.0, gt=0, description="Seconds to wait for a pooled connection"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase and reject unknown levels."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Normalize log format to lowercase and reject unknown formats."""
        fmt = v.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt

    # ============================================================================
    # HELPER METHODS
    # ============================================================================

    def get_allowed_origins(self) -> list[str]:
        """
        Get list of allowed origins for CORS.

        Returns:
            list[str]: List of allowed origin URLs.
        """
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    def get_cors_allowed_methods(self) -> list[str]:
        """
        Get list of allowed HTTP methods for CORS.

        Returns:
            list[str]: List of allowed HTTP methods. Returns ["*"] if all methods are allowed.
        """
        if self.cors_allowed_methods == "*":
            return ["*"]
        return [method.strip() for method in self.cors_allowed_methods.split(",")]

    def get_cors_allowed_headers(self) -> list[str]:
        """
        Get list of allowed headers for CORS.

        Returns:
            list[str]: List of allowed headers. Returns ["*"] if all headers are allowed.
        """
        if self.cors_allowed_headers == "*":
            return ["*"]
        return [header.strip() for header in self.cors_allowed_headers.split(",")]

    def _build_postgres_url(self, password: str) -> str:
        return (
            f"postgresql+asyncpg://{quote(self.postgres_user, safe='')}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_name}"
        )

    def get_postgres_url(self) -> str:
        """
        Build the PostgreSQL connection URL.

        User and password are percent-encoded so that characters such as
        ``@``, ``:`` or ``/`` survive URL parsing.

        Returns:
            str: SQLAlchemy async connection URL.
        """
        password = quote(self.postgres_password.get_secret_value(), safe="")
        return self._build_postgres_url(password)

    def get_masked_postgres_url(self) -> str:
        """
        Connection URL with the password masked, safe for log output.

        Returns:
            str: Connection URL with password replaced by ``***``.
        """
        return self._build_postgres_url("***")


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Usage:
        # In FastAPI endpoints (dependency injection):
        def my_endpoint(settings: Settings = Depends(get_settings)):
            print(settings.project_name)

        # In normal code (outside FastAPI):
        from userhub.config import get_settings
        settings = get_settings()
        print(settings.project_name)

    Returns:
        Settings: Application configuration instance.
    """
    return Settings()


# Create global instance for use outside FastAPI
settings = get_settings()
