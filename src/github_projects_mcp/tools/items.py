"""Item tools: add items, update field values and status, list items."""

from __future__ import annotations

import logging
import math
from typing import Any

from github_projects_mcp.dispatcher import tool
from github_projects_mcp.formatting import format_project_items
from github_projects_mcp.github import queries
from github_projects_mcp.github.client import GitHubClient
from github_projects_mcp.github.errors import NotFoundError
from github_projects_mcp.github.models import Project, ProjectField
from github_projects_mcp.guards import check_read_only
from github_projects_mcp.schemas import (
    AddItemToProjectInput,
    GetProjectItemsInput,
    UpdateItemStatusInput,
    UpdateProjectItemInput,
)
from github_projects_mcp.tools.common import (
    fetch_project_details,
    fetch_project_fields,
    fetch_project_items,
    tool_failure,
)

logger = logging.getLogger("github_projects_mcp")

STATUS_FIELD_KEYWORDS = ("status", "state", "column")


def parse_number(value: str) -> float:
    """Parse a NUMBER field value; unparsable input becomes NaN and is left for GitHub to reject."""
    try:
        return float(value)
    except ValueError:
        return math.nan


def find_status_field(project: Project) -> ProjectField:
    """First field, in project order, whose name looks like a status column."""
    for field in project.field_nodes:
        name = field.name.lower()
        if any(keyword in name for keyword in STATUS_FIELD_KEYWORDS):
            return field
    available = ", ".join(f.name for f in project.field_nodes) or "none"
    raise NotFoundError(f"No status field found. Available fields: {available}")


async def detect_field_type(client: GitHubClient, project_id: str, field_id: str) -> str:
    """Look up a field's data type; any failure falls back to TEXT."""
    try:
        project = await fetch_project_fields(client, project_id)
    except Exception as e:
        logger.debug("Field type detection for %s failed: %s", field_id, e)
        return "TEXT"
    field = project.find_field(field_id)
    if field is None or not field.data_type:
        return "TEXT"
    return field.data_type


async def resolve_option_id(
    client: GitHubClient, project_id: str, field_id: str, value: str
) -> str:
    project = await fetch_project_fields(client, project_id)
    field = project.find_field(field_id)
    option = field.find_option(value) if field else None
    if option is None:
        available = ", ".join(field.option_names) if field else ""
        raise NotFoundError(
            f"Failed to find single select option: Option '{value}' not found for field. "
            f"Available options: {available}"
        )
    return option.id


async def build_field_value(
    client: GitHubClient, params: UpdateProjectItemInput, field_type: str
) -> dict[str, Any]:
    """Shape ``params.value`` as a ProjectV2FieldValue for ``field_type``."""
    if field_type == "NUMBER":
        return {"number": parse_number(params.value)}
    if field_type == "DATE":
        return {"date": params.value}
    if field_type == "SINGLE_SELECT":
        option_id = await resolve_option_id(
            client, params.project_id, params.field_id, params.value
        )
        return {"singleSelectOptionId": option_id}
    if field_type == "ITERATION":
        return {"iterationId": params.value}
    return {"text": params.value}


async def _update_field_value(
    client: GitHubClient, project_id: str, item_id: str, field_id: str, value: dict[str, Any]
) -> str:
    data = await client.graphql(
        queries.UPDATE_PROJECT_ITEM_FIELD,
        {"projectId": project_id, "itemId": item_id, "fieldId": field_id, "value": value},
    )
    return data["updateProjectV2ItemFieldValue"]["projectV2Item"]["id"]


@tool("add-item-to-project", AddItemToProjectInput, "Add an existing issue or PR to a project")
async def add_item_to_project(client: GitHubClient, params: AddItemToProjectInput) -> str:
    try:
        check_read_only("add-item-to-project")
        data = await client.graphql(
            queries.ADD_ITEM_TO_PROJECT,
            {"projectId": params.project_id, "contentId": params.content_id},
        )
        item_id = data["addProjectV2ItemById"]["item"]["id"]
        return f"Item added to project successfully!\n\nItem ID: {item_id}"
    except Exception as e:
        return tool_failure("adding item to project", e)


@tool(
    "update-project-item",
    UpdateProjectItemInput,
    "Update a field value for a project item (supports text, number, date, "
    "single select, and iteration fields)",
)
async def update_project_item(client: GitHubClient, params: UpdateProjectItemInput) -> str:
    """Set one field on one item, shaping the value by the field's data type.

    Without ``fieldType`` the type is looked up from the project's fields.
    Single select values are option names, matched case-insensitively.
    Iteration values are iteration ids and are sent as given.
    """
    try:
        check_read_only("update-project-item")
        field_type = params.field_type
        if field_type is None:
            field_type = await detect_field_type(client, params.project_id, params.field_id)

        value = await build_field_value(client, params, field_type)
        item_id = await _update_field_value(
            client, params.project_id, params.item_id, params.field_id, value
        )
        return (
            "Project item field updated successfully!\n\n"
            f"Item ID: {item_id}\n"
            f"Field Type: {field_type}\n"
            f"New Value: {params.value}"
        )
    except Exception as e:
        return tool_failure("updating project item", e)


@tool(
    "update-item-status",
    UpdateItemStatusInput,
    "Update the status of a project item (shortcut for status field updates)",
)
async def update_item_status(client: GitHubClient, params: UpdateItemStatusInput) -> str:
    """Set an item's status by option name, without knowing field or option ids."""
    try:
        check_read_only("update-item-status")
        project = await fetch_project_details(client, params.project_id)
        status_field = find_status_field(project)

        option = status_field.find_option(params.status)
        if option is None:
            available = ", ".join(status_field.option_names) or "none"
            raise NotFoundError(
                f"Status '{params.status}' not found. Available statuses: {available}"
            )

        item_id = await _update_field_value(
            client,
            params.project_id,
            params.item_id,
            status_field.id,
            {"singleSelectOptionId": option.id},
        )
        return (
            "Status updated successfully!\n\n"
            f"Item ID: {item_id}\n"
            f"Field: {status_field.name}\n"
            f"New Status: {params.status}"
        )
    except Exception as e:
        return tool_failure("updating status", e)


@tool(
    "get-project-items",
    GetProjectItemsInput,
    "Get all items in a project with their current field values and status",
)
async def get_project_items(client: GitHubClient, params: GetProjectItemsInput) -> str:
    try:
        project = await fetch_project_items(client, params.project_id, params.limit)
        return format_project_items(project)
    except Exception as e:
        return tool_failure("getting project items", e)
