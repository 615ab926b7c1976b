"""GitHub Projects V2 MCP server for AI agents."""

from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.server import mcp
from github_projects_mcp.settings import GitHubSettings

__all__ = ["mcp", "GitHubSettings", "GitHubClient"]
