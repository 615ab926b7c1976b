"""Project tools: list, get, create and update projects."""

from __future__ import annotations

from typing import Any

from github_projects_mcp.dispatcher import tool
from github_projects_mcp.formatting import (
    format_created_project,
    format_project_details,
    format_project_list,
    format_updated_project,
)
from github_projects_mcp.github import queries
from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.github.models import Project
from github_projects_mcp.guards import check_read_only
from github_projects_mcp.schemas import (
    CreateProjectInput,
    GetProjectInput,
    ListProjectsInput,
    UpdateProjectInput,
)
from github_projects_mcp.tools.common import (
    fetch_project_details,
    resolve_owner_id,
    tool_failure,
)


@tool("list-projects", ListProjectsInput, "List GitHub Projects for a user or organization")
async def list_projects(client: GitHubClient, params: ListProjectsInput) -> str:
    """List up to ten projects owned by a user or an organization.

    Returns:
        One entry per project with title, number, id, description,
        visibility, open/closed state and URL.
    """
    try:
        if params.type == "organization":
            data = await client.graphql(queries.GET_ORG_PROJECTS, {"login": params.owner})
            owner = data.get("organization") or {}
        else:
            data = await client.graphql(queries.GET_USER_PROJECTS, {"login": params.owner})
            owner = data.get("user") or {}

        nodes = (owner.get("projectsV2") or {}).get("nodes") or []
        projects = [Project.model_validate(node) for node in nodes]
        return format_project_list(params.owner, projects)
    except Exception as e:
        return tool_failure("listing projects", e)


@tool("get-project", GetProjectInput, "Get detailed information about a GitHub Project")
async def get_project(client: GitHubClient, params: GetProjectInput) -> str:
    """Get a project by id, with its fields and items rendered inline."""
    try:
        project = await fetch_project_details(client, params.project_id)
        return format_project_details(project)
    except Exception as e:
        return tool_failure("getting project", e)


@tool("create-project", CreateProjectInput, "Create a new GitHub Project")
async def create_project(client: GitHubClient, params: CreateProjectInput) -> str:
    """Create a project for a user or organization.

    The owner login is resolved to a node id first. GitHub's create mutation
    only takes an owner and a title, so a description or PUBLIC visibility is
    applied by a follow-up update. New projects start out private.
    """
    try:
        check_read_only("create-project")
        owner_id = await resolve_owner_id(client, params.owner)

        data = await client.graphql(
            queries.CREATE_PROJECT, {"ownerId": owner_id, "title": params.title}
        )
        project = Project.model_validate(data["createProjectV2"]["projectV2"])

        followup: dict[str, Any] = {}
        if params.description is not None:
            followup["description"] = params.description
        if params.visibility == "PUBLIC":
            followup["public"] = True
        if followup:
            data = await client.graphql(
                queries.UPDATE_PROJECT, {"projectId": project.id, **followup}
            )
            project = Project.model_validate(data["updateProjectV2"]["projectV2"])

        return format_created_project(project)
    except Exception as e:
        return tool_failure("creating project", e)


@tool("update-project", UpdateProjectInput, "Update an existing GitHub Project")
async def update_project(client: GitHubClient, params: UpdateProjectInput) -> str:
    """Update title, description and/or visibility.

    Only supplied fields are sent; omitted ones are left out of the mutation
    variables so GitHub keeps their current values.
    """
    try:
        check_read_only("update-project")
        variables: dict[str, Any] = {"projectId": params.project_id}
        if params.title is not None:
            variables["title"] = params.title
        if params.description is not None:
            variables["description"] = params.description
        if params.visibility is not None:
            variables["public"] = params.visibility == "PUBLIC"

        data = await client.graphql(queries.UPDATE_PROJECT, variables)
        project = Project.model_validate(data["updateProjectV2"]["projectV2"])
        return format_updated_project(project)
    except Exception as e:
        return tool_failure("updating project", e)
