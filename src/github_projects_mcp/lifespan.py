"""Server lifespan: creates GitHubClient on startup, closes on shutdown."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.logging.logger import setup_logger
from github_projects_mcp.settings import GitHubSettings

_client: GitHubClient | None = None
_settings: GitHubSettings | None = None


def get_github_client() -> GitHubClient:
    """Return the active GitHubClient. Only valid during server lifespan."""
    if _client is None:
        raise RuntimeError("GitHubClient not initialized. Is the server running?")
    return _client


def get_settings() -> GitHubSettings:
    """Return the loaded settings. Only valid after load_settings()."""
    if _settings is None:
        raise RuntimeError("Settings not loaded. Is the server running?")
    return _settings


def load_settings() -> GitHubSettings:
    """Read settings from the environment once and keep them for the process.

    Raises:
        pydantic.ValidationError: If GITHUB_TOKEN is missing.
    """
    global _settings
    if _settings is None:
        _settings = GitHubSettings()
    return _settings


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the GitHubClient lifecycle."""
    global _client, _settings

    settings = load_settings()
    logger = setup_logger(level=settings.log_level)
    logger.info(
        "Starting github-projects-mcp server (api_url=%s, read_only=%s)",
        settings.api_url,
        settings.read_only_mode,
    )

    _client = GitHubClient(
        token=settings.token.get_secret_value(),
        base_url=settings.api_url,
        timeout=settings.timeout,
    )

    try:
        yield
    finally:
        logger.info("Shutting down github-projects-mcp server")
        await _client.close()
        _client = None
        _settings = None
