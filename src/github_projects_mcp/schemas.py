"""Tool input models.

Each MCP tool validates its arguments against one of these models before any
request leaves the process. Argument names on the wire are camelCase aliases.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

OwnerType = Literal["user", "organization"]
Visibility = Literal["PUBLIC", "PRIVATE"]
FieldDataType = Literal["TEXT", "NUMBER", "DATE", "SINGLE_SELECT", "ITERATION"]


class ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ListProjectsInput(ToolInput):
    owner: str = Field(description="Username or organization name")
    type: OwnerType = Field(default="user", description="Type of owner (user or organization)")


class GetProjectInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")


class CreateProjectInput(ToolInput):
    title: str = Field(description="Project title")
    description: str | None = Field(default=None, description="Project description")
    owner: str = Field(description="Owner (username or organization name)")
    visibility: Visibility = Field(default="PRIVATE", description="Project visibility")


class UpdateProjectInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")
    title: str | None = Field(default=None, description="New project title")
    description: str | None = Field(default=None, description="New project description")
    visibility: Visibility | None = Field(default=None, description="New project visibility")


class CreateIssueInput(ToolInput):
    owner: str = Field(description="Repository owner")
    repo: str = Field(description="Repository name")
    title: str = Field(description="Issue title")
    body: str | None = Field(default=None, description="Issue body")
    project_id: str | None = Field(
        alias="projectId", default=None, description="Project ID to add the issue to"
    )


class AddItemToProjectInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")
    content_id: str = Field(alias="contentId", description="Issue or PR node ID")


class UpdateProjectItemInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")
    item_id: str = Field(alias="itemId", description="Project item ID")
    field_id: str = Field(alias="fieldId", description="Field ID to update")
    value: str = Field(
        description=(
            "New field value (for single select: option name like "
            "'Todo', 'In Progress', 'Done')"
        )
    )
    field_type: FieldDataType | None = Field(
        alias="fieldType", default=None, description="Field type (auto-detected if not provided)"
    )


class CreateProjectFieldInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")
    name: str = Field(description="Field name")
    data_type: FieldDataType = Field(alias="dataType", description="Field data type")
    options: list[str] | None = Field(default=None, description="Options for single select field")


class UpdateItemStatusInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")
    item_id: str = Field(alias="itemId", description="Project item ID")
    status: str = Field(description="New status (e.g., 'Todo', 'In Progress', 'Done')")


class GetProjectFieldsInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")


class GetProjectItemsInput(ToolInput):
    project_id: str = Field(alias="projectId", description="Project ID")
    limit: int = Field(
        default=20, ge=0, le=100, description="Number of items to fetch (default: 20, max: 100)"
    )
