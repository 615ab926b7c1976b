"""Field tools: create custom fields and describe a project's fields."""

from __future__ import annotations

from typing import Any

from github_projects_mcp.dispatcher import tool
from github_projects_mcp.formatting import format_project_fields
from github_projects_mcp.github import queries
from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.github.models import ProjectField
from github_projects_mcp.guards import check_read_only
from github_projects_mcp.schemas import CreateProjectFieldInput, GetProjectFieldsInput
from github_projects_mcp.tools.common import fetch_project_fields, tool_failure

DEFAULT_OPTION_COLOR = "GRAY"


def single_select_options(names: list[str]) -> list[dict[str, str]]:
    """Build ProjectV2SingleSelectFieldOptionInput values; color and description are required."""
    return [{"name": name, "color": DEFAULT_OPTION_COLOR, "description": ""} for name in names]


@tool("create-project-field", CreateProjectFieldInput, "Create a new field in a project")
async def create_project_field(client: GitHubClient, params: CreateProjectFieldInput) -> str:
    """Create a custom field.

    ``options`` only applies to SINGLE_SELECT fields and is ignored for the
    other data types.
    """
    try:
        check_read_only("create-project-field")
        variables: dict[str, Any] = {
            "projectId": params.project_id,
            "name": params.name,
            "dataType": params.data_type,
        }
        if params.data_type == "SINGLE_SELECT" and params.options:
            variables["singleSelectOptions"] = single_select_options(params.options)

        data = await client.graphql(queries.CREATE_PROJECT_FIELD, variables)
        field = ProjectField.model_validate(data["createProjectV2Field"]["projectV2Field"])
        return (
            "Project field created successfully!\n\n"
            f"Name: {field.name}\n"
            f"ID: {field.id}\n"
            f"Type: {field.data_type}"
        )
    except Exception as e:
        return tool_failure("creating project field", e)


@tool(
    "get-project-fields",
    GetProjectFieldsInput,
    "Get detailed information about all fields in a project including options "
    "for single select fields",
)
async def get_project_fields(client: GitHubClient, params: GetProjectFieldsInput) -> str:
    try:
        project = await fetch_project_fields(client, params.project_id)
        return format_project_fields(project)
    except Exception as e:
        return tool_failure("getting project fields", e)
