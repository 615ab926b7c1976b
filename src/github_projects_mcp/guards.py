"""Read/write classification of tools and the read-only mode guard."""

from github_projects_mcp.github.errors import GitHubPermissionError
from github_projects_mcp.lifespan import get_settings

READ_TOOLS = frozenset({
    "list-projects",
    "get-project",
    "get-project-fields",
    "get-project-items",
})

WRITE_TOOLS = frozenset({
    "create-project",
    "update-project",
    "create-issue",
    "add-item-to-project",
    "update-project-item",
    "create-project-field",
    "update-item-status",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS


def check_read_only(tool: str) -> None:
    """Raise GitHubPermissionError if ``tool`` writes and GITHUB_READ_ONLY_MODE is true.

    Read tools always pass, so callers can guard unconditionally.
    """
    if tool not in WRITE_TOOLS:
        return
    if get_settings().read_only_mode:
        raise GitHubPermissionError(
            f"Write operation blocked: {tool} is unavailable while GITHUB_READ_ONLY_MODE is enabled."
        )
