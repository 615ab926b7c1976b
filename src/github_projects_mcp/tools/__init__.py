"""Tool handlers. Importing this package registers every tool with the dispatcher."""

from github_projects_mcp.tools import projects  # noqa: F401
from github_projects_mcp.tools import issues  # noqa: F401
from github_projects_mcp.tools import items  # noqa: F401
from github_projects_mcp.tools import fields  # noqa: F401
