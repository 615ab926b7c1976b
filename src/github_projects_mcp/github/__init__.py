from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.github.errors import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubGraphQLError,
    GitHubNotFoundError,
    GitHubPermissionError,
    GitHubValidationError,
    NotFoundError,
)

__all__ = [
    "GitHubClient",
    "GitHubAPIError",
    "GitHubAuthenticationError",
    "GitHubGraphQLError",
    "GitHubNotFoundError",
    "GitHubPermissionError",
    "GitHubValidationError",
    "NotFoundError",
]
