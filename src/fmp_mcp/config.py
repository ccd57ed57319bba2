"""Configuration management for the FMP MCP server."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fmp_mcp import SERVER_NAME, __version__
from fmp_mcp.errors import ConfigError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstream credential
    fmp_api_key: str | None = Field(default=None, alias="FMP_API_KEY")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    # Service info
    service_name: str = Field(default=SERVER_NAME, alias="SERVICE_NAME")
    service_version: str = Field(default=__version__, alias="SERVICE_VERSION")


def get_api_key() -> str:
    """Resolve the FMP credential from a fresh read of the environment.

    Read on every call rather than cached at start-up, so a key supplied
    after the process started is picked up on the next tool call.

    Raises:
        ConfigError: If FMP_API_KEY is unset or empty
    """
    api_key = Settings().fmp_api_key
    if not api_key:
        raise ConfigError("FMP_API_KEY environment variable is required")
    return api_key
