"""Issue tools: create an issue and optionally attach it to a project."""

from __future__ import annotations

import logging

from github_projects_mcp.dispatcher import tool
from github_projects_mcp.github import queries
from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.guards import check_read_only
from github_projects_mcp.schemas import CreateIssueInput
from github_projects_mcp.tools.common import tool_failure

logger = logging.getLogger("github_projects_mcp")


@tool("create-issue", CreateIssueInput, "Create a GitHub issue and optionally add to project")
async def create_issue(client: GitHubClient, params: CreateIssueInput) -> str:
    """Create an issue over REST, then attach it to ``projectId`` if given.

    The two steps are not atomic. When attaching fails the issue still
    exists, so the call succeeds and the response carries a warning.
    """
    try:
        check_read_only("create-issue")
        issue = await client.create_issue(params.owner, params.repo, params.title, params.body)
    except Exception as e:
        return tool_failure("creating issue", e)

    node_id = issue.get("node_id")
    result = (
        "Issue created successfully!\n\n"
        f"Title: {issue.get('title')}\n"
        f"Number: #{issue.get('number')}\n"
        f"URL: {issue.get('html_url')}\n"
        f"Node ID: {node_id}"
    )

    if params.project_id and node_id:
        try:
            await client.graphql(
                queries.ADD_ITEM_TO_PROJECT,
                {"projectId": params.project_id, "contentId": node_id},
            )
            result += "\n\nIssue added to project successfully!"
        except Exception as e:
            logger.warning("Issue %s created but not added to project: %s", node_id, e)
            result += f"\n\nWarning: Could not add issue to project: {e}"

    return result
