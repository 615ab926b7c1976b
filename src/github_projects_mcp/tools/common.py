"""Lookups shared by several tools."""

from __future__ import annotations

import logging

from github_projects_mcp.github import queries
from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.github.errors import NotFoundError
from github_projects_mcp.github.models import Project

logger = logging.getLogger("github_projects_mcp")


def tool_failure(action: str, error: Exception) -> str:
    """Log a handler failure and render it as the tool's response text."""
    logger.warning("Error %s: %s", action, error)
    return f"Error {action}: {error}"


async def _fetch_node(client: GitHubClient, query: str, variables: dict) -> Project:
    data = await client.graphql(query, variables)
    node = data.get("node")
    if not node:
        raise NotFoundError("Project not found")
    return Project.model_validate(node)


async def fetch_project_details(client: GitHubClient, project_id: str) -> Project:
    """Project with its first 20 fields and 50 items."""
    return await _fetch_node(client, queries.GET_PROJECT_DETAILS, {"projectId": project_id})


async def fetch_project_fields(client: GitHubClient, project_id: str) -> Project:
    """Project with its detailed field list, including options and iterations."""
    return await _fetch_node(
        client, queries.GET_PROJECT_FIELDS_DETAILED, {"projectId": project_id}
    )


async def fetch_project_items(client: GitHubClient, project_id: str, first: int) -> Project:
    return await _fetch_node(
        client, queries.GET_PROJECT_ITEMS, {"projectId": project_id, "first": first}
    )


async def resolve_owner_id(client: GitHubClient, owner: str) -> str:
    """Resolve a login to its node id, trying the user lookup before the organization one.

    The organization lookup only runs when the user lookup raises. A login
    that exists as both a user and an organization therefore resolves to the
    user.

    Raises:
        NotFoundError: If neither lookup yields an id.
    """
    owner_id = None
    try:
        data = await client.graphql(queries.GET_USER_ID, {"login": owner})
        owner_id = (data.get("user") or {}).get("id")
    except Exception as user_error:
        logger.debug("User lookup for %s failed (%s), trying organization", owner, user_error)
        try:
            data = await client.graphql(queries.GET_ORG_ID, {"login": owner})
            owner_id = (data.get("organization") or {}).get("id")
        except Exception as org_error:
            logger.debug("Organization lookup for %s failed: %s", owner, org_error)

    if not owner_id:
        raise NotFoundError(f"Owner '{owner}' not found")
    return owner_id
