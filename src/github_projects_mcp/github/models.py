"""Pydantic models for GitHub Projects V2 GraphQL responses."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field

T = TypeVar("T")


class Connection(BaseModel, Generic[T]):
    nodes: list[T] = Field(default_factory=list)


class Actor(BaseModel):
    login: str = ""


# ----------------------------------------------------------------------
# Fields
# ----------------------------------------------------------------------


class SingleSelectOption(BaseModel):
    id: str = ""
    name: str = ""
    color: str | None = None
    description: str | None = None


class Iteration(BaseModel):
    id: str = ""
    title: str = ""
    duration: int | None = None
    start_date: str | None = Field(alias="startDate", default=None)

    model_config = {"populate_by_name": True}


class IterationConfiguration(BaseModel):
    iterations: list[Iteration] = Field(default_factory=list)


class ProjectField(BaseModel):
    id: str = ""
    name: str = ""
    data_type: str = Field(alias="dataType", default="")
    created_at: datetime | None = Field(alias="createdAt", default=None)
    updated_at: datetime | None = Field(alias="updatedAt", default=None)
    options: list[SingleSelectOption] | None = None
    configuration: IterationConfiguration | None = None

    model_config = {"populate_by_name": True}

    def find_option(self, name: str) -> SingleSelectOption | None:
        """Return the option whose name matches ``name`` case-insensitively."""
        wanted = name.lower()
        for option in self.options or []:
            if option.name.lower() == wanted:
                return option
        return None

    @property
    def option_names(self) -> list[str]:
        return [option.name for option in self.options or []]


# ----------------------------------------------------------------------
# Items
# ----------------------------------------------------------------------


class IssueContent(BaseModel):
    typename: Literal["Issue"] = Field(alias="__typename")
    id: str = ""
    number: int | None = None
    title: str = ""
    state: str | None = None
    url: str | None = None
    assignees: Connection[Actor] | None = None

    model_config = {"populate_by_name": True}


class PullRequestContent(BaseModel):
    typename: Literal["PullRequest"] = Field(alias="__typename")
    id: str = ""
    number: int | None = None
    title: str = ""
    state: str | None = None
    url: str | None = None
    assignees: Connection[Actor] | None = None

    model_config = {"populate_by_name": True}


class DraftIssueContent(BaseModel):
    typename: Literal["DraftIssue"] = Field(alias="__typename")
    id: str = ""
    title: str = ""
    body: str | None = None

    model_config = {"populate_by_name": True}


ItemContent = Annotated[
    Union[IssueContent, PullRequestContent, DraftIssueContent],
    Field(discriminator="typename"),
]


class FieldRef(BaseModel):
    id: str = ""
    name: str = ""


class ItemFieldValue(BaseModel):
    """One entry of an item's ``fieldValues``.

    GitHub returns a different node type per field data type; only the
    attribute matching that type is populated.
    """

    text: str | None = None
    number: float | None = None
    date: str | None = None
    name: str | None = None
    title: str | None = None
    field: FieldRef | None = None

    def display_value(self) -> str:
        if self.text is not None:
            return self.text
        if self.number is not None:
            if self.number.is_integer():
                return str(int(self.number))
            return repr(self.number)
        if self.date is not None:
            return self.date
        if self.name is not None:
            return self.name
        if self.title is not None:
            return self.title
        return "N/A"


class ProjectItem(BaseModel):
    id: str = ""
    type: str | None = None
    content: ItemContent | None = None
    field_values: Connection[ItemFieldValue] | None = Field(alias="fieldValues", default=None)

    model_config = {"populate_by_name": True}

    @property
    def values(self) -> list[ItemFieldValue]:
        return self.field_values.nodes if self.field_values else []


# ----------------------------------------------------------------------
# Projects
# ----------------------------------------------------------------------


class Project(BaseModel):
    id: str = ""
    number: int | None = None
    title: str = ""
    short_description: str | None = Field(alias="shortDescription", default=None)
    public: bool = False
    closed: bool = False
    created_at: str | None = Field(alias="createdAt", default=None)
    updated_at: str | None = Field(alias="updatedAt", default=None)
    url: str = ""
    fields: Connection[ProjectField] | None = None
    items: Connection[ProjectItem] | None = None

    model_config = {"populate_by_name": True}

    @property
    def visibility(self) -> str:
        return "Public" if self.public else "Private"

    @property
    def field_nodes(self) -> list[ProjectField]:
        return self.fields.nodes if self.fields else []

    @property
    def item_nodes(self) -> list[ProjectItem]:
        return self.items.nodes if self.items else []

    def find_field(self, field_id: str) -> ProjectField | None:
        for field in self.field_nodes:
            if field.id == field_id:
                return field
        return None
