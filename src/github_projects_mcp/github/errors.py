"""GitHub API exception hierarchy."""


class GitHubAPIError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class GitHubAuthenticationError(GitHubAPIError):
    """Raised when authentication fails (401)."""

    def __init__(self, message: str = "Authentication failed. Check GITHUB_TOKEN."):
        super().__init__(message, status_code=401)


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a REST resource is not found (404)."""

    def __init__(self, message: str = "Resource not found."):
        super().__init__(message, status_code=404)


class GitHubPermissionError(GitHubAPIError):
    """Raised when the token lacks permissions (403) or read-only mode blocks writes."""

    def __init__(self, message: str = "Permission denied."):
        super().__init__(message, status_code=403)


class GitHubValidationError(GitHubAPIError):
    """Raised when the request payload is rejected (400/422)."""

    def __init__(self, message: str = "Validation error."):
        super().__init__(message, status_code=422)


class GitHubGraphQLError(GitHubAPIError):
    """Raised when a GraphQL response carries an ``errors`` array.

    GitHub answers GraphQL requests with HTTP 200 even when the query fails,
    so the status code alone says nothing.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message, status_code=200)


class NotFoundError(Exception):
    """A lookup resolved to nothing: project, owner, field, option or status."""
