"""
Rexster Client Configuration

Optional settings layer using Pydantic Settings.
Supports environment variables and .env files.

The client itself never reads these implicitly; embedding applications opt in
through ``RexsterServer.from_settings()`` or ``Graph.from_settings()``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class RexsterSettings(BaseSettings):
    """Rexster REST server settings."""

    model_config = SettingsConfigDict(
        env_prefix="REXSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "localhost"
    rest_port: int = 8182
    graph: str = "tinkergraph"
    debug: bool = False

    # Seconds; None leaves the httpx default in place
    timeout: float | None = None


@lru_cache()
def get_settings() -> RexsterSettings:
    """
    Get cached settings instance.

    Returns:
        RexsterSettings: The client settings
    """
    return RexsterSettings()
