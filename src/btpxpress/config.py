"""
Application configuration and environment variables.

Configuration is loaded with pydantic-settings from:
1. .env file
2. System environment variables (have priority)
3. Default values

Field names are snake_case in Python (cors_max_age) and UPPER_CASE in
.env files or the environment (CORS_MAX_AGE).
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified application configuration.

    Example:
        # In .env or as environment variable:
        ENVIRONMENT=production
        LOG_LEVEL=DEBUG
        API_TOKENS=token-a,token-b
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(default="BTP Xpress API", description="Project name")
    project_description: str = Field(
        default="Status and version endpoints for the BTP Xpress platform",
        description="Project description",
    )
    project_version: str = Field(default="1.0.0", description="Project version")
    environment: str = Field(
        default="development",
        description="Deployment environment reported by /api/version",
    )

    # ============================================================================
    # SERVER SETTINGS
    # ============================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    enable_docs: bool = Field(
        default=False, description="Enable API documentation (Swagger/ReDoc)"
    )

    # ============================================================================
    # AUTH SETTINGS
    # ============================================================================
    secret_key: str = Field(
        default="dev-secret-key-change-in-production-min-32-chars",
        description="Fallback bearer token when API_TOKENS is empty",
    )
    api_tokens: str = Field(
        default="",
        description="Accepted bearer tokens for secured endpoints (comma-separated)",
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

    # ============================================================================
    # CORS SETTINGS (static preflight answer)
    # ============================================================================
    cors_allow_origin: str = Field(
        default="*", description="Access-Control-Allow-Origin value"
    )
    cors_allowed_methods: str = Field(
        default="POST, GET, PUT, DELETE, OPTIONS",
        description="Access-Control-Allow-Methods value",
    )
    cors_allowed_headers: str = Field(
        default="Content-Type, Authorization",
        description="Access-Control-Allow-Headers value",
    )
    cors_max_age: int = Field(
        default=86400, description="Access-Control-Max-Age value in seconds"
    )

    # ============================================================================
    # HELPER METHODS
    # ============================================================================

    def get_api_tokens(self) -> list[str]:
        """
        Get the bearer tokens accepted by secured endpoints.

        Returns:
            list[str]: Configured tokens, or ``[secret_key]`` when none are set.
        """
        tokens = [token.strip() for token in self.api_tokens.split(",")]
        tokens = [token for token in tokens if token]
        return tokens or [self.secret_key]

    def get_cors_headers(self) -> dict[str, str]:
        """
        Get the headers returned for CORS preflight requests.

        Returns:
            dict[str, str]: Header name to value mapping.
        """
        return {
            "Access-Control-Allow-Origin": self.cors_allow_origin,
            "Access-Control-Allow-Methods": self.cors_allowed_methods,
            "Access-Control-Allow-Headers": self.cors_allowed_headers,
            "Access-Control-Max-Age": str(self.cors_max_age),
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings (LRU cached).

    The .env file is only read once. To refresh the configuration:
        get_settings.cache_clear()

    Returns:
        Settings: Application configuration instance.
    """
    return Settings()


# Global instance for use outside FastAPI dependencies
settings = get_settings()
