"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from github_projects_mcp.settings import GitHubSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test in an empty directory with no GITHUB_* variables set."""
    for name in ("GITHUB_TOKEN", "GITHUB_API_URL", "GITHUB_TIMEOUT", "GITHUB_READ_ONLY_MODE", "GITHUB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_token_is_required():
    with pytest.raises(ValidationError) as exc_info:
        GitHubSettings()
    assert exc_info.value.errors()[0]["loc"] == ("token",)


def test_defaults(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_secret")
    settings = GitHubSettings()

    assert settings.token.get_secret_value() == "ghp_secret"
    assert settings.api_url == "https://api.github.com"
    assert settings.timeout == 30
    assert settings.read_only_mode is False
    assert settings.log_level == "INFO"


def test_token_hidden_from_repr(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_secret")
    settings = GitHubSettings()
    assert "ghp_secret" not in repr(settings)
    assert "ghp_secret" not in str(settings.token)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_secret")
    monkeypatch.setenv("GITHUB_READ_ONLY_MODE", "true")
    monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api")
    settings = GitHubSettings()
    assert settings.read_only_mode is True
    assert settings.api_url == "https://github.example.com/api"


def test_env_local_overrides_env_file(clean_env):
    (clean_env / ".env").write_text("GITHUB_TOKEN=from-env\nGITHUB_TIMEOUT=10\n")
    (clean_env / ".env.local").write_text("GITHUB_TOKEN=from-env-local\n")

    settings = GitHubSettings()

    assert settings.token.get_secret_value() == "from-env-local"
    assert settings.timeout == 10


def test_process_env_beats_files(clean_env, monkeypatch):
    (clean_env / ".env.local").write_text("GITHUB_TOKEN=from-file\n")
    monkeypatch.setenv("GITHUB_TOKEN", "from-process")
    assert GitHubSettings().token.get_secret_value() == "from-process"
