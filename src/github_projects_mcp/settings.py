"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """GitHub Projects MCP server settings.

    All settings are loaded from environment variables prefixed with GITHUB_.
    ``.env`` and ``.env.local`` in the working directory are read too; values
    in ``.env.local`` override ``.env``, and real environment variables
    override both.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required
    token: SecretStr

    # Optional
    api_url: str = "https://api.github.com"
    timeout: int = 30
    read_only_mode: bool = False
    log_level: str = "INFO"
