"""Tests for the GraphQL response models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from github_projects_mcp.github.models import (
    DraftIssueContent,
    IssueContent,
    ItemFieldValue,
    Project,
    ProjectItem,
    PullRequestContent,
)


class TestItemContent:
    @pytest.mark.parametrize(
        ("typename", "expected"),
        [
            ("Issue", IssueContent),
            ("PullRequest", PullRequestContent),
            ("DraftIssue", DraftIssueContent),
        ],
    )
    def test_content_type_follows_typename(self, typename, expected):
        item = ProjectItem.model_validate(
            {"id": "PVTI_1", "content": {"__typename": typename, "title": "Thing"}}
        )
        assert isinstance(item.content, expected)
        assert item.content.title == "Thing"

    def test_redacted_content_is_none(self):
        item = ProjectItem.model_validate({"id": "PVTI_1", "type": "REDACTED", "content": None})
        assert item.content is None
        assert item.values == []

    def test_unknown_typename_rejected(self):
        with pytest.raises(ValidationError):
            ProjectItem.model_validate({"id": "PVTI_1", "content": {"__typename": "Discussion"}})


class TestItemFieldValue:
    def test_text_takes_precedence(self):
        assert ItemFieldValue(text="hello", name="Todo").display_value() == "hello"

    def test_number_formatting(self):
        assert ItemFieldValue(number=3.0).display_value() == "3"
        assert ItemFieldValue(number=2.5).display_value() == "2.5"

    def test_number_keeps_every_digit(self):
        assert ItemFieldValue(number=1234567.0).display_value() == "1234567"
        assert ItemFieldValue(number=0.1234567).display_value() == "0.1234567"
        assert ItemFieldValue(number=100000000.0).display_value() == "100000000"
        assert ItemFieldValue(number=-3.75).display_value() == "-3.75"

    def test_date_then_name_then_title(self):
        assert ItemFieldValue(date="2024-06-30", name="Todo").display_value() == "2024-06-30"
        assert ItemFieldValue(name="Todo", title="Sprint 1").display_value() == "Todo"
        assert ItemFieldValue(title="Sprint 1").display_value() == "Sprint 1"

    def test_empty_value(self):
        assert ItemFieldValue().display_value() == "N/A"


class TestProject:
    def test_visibility_label(self):
        assert Project(public=True).visibility == "Public"
        assert Project().visibility == "Private"

    def test_find_field_and_option(self):
        project = Project.model_validate(
            {
                "fields": {
                    "nodes": [
                        {
                            "id": "PVTSSF_1",
                            "name": "Status",
                            "dataType": "SINGLE_SELECT",
                            "options": [{"id": "o1", "name": "In Progress"}],
                        }
                    ]
                }
            }
        )
        field = project.find_field("PVTSSF_1")
        assert field.data_type == "SINGLE_SELECT"
        assert field.find_option("IN PROGRESS").id == "o1"
        assert field.find_option("Done") is None
        assert project.find_field("missing") is None

    def test_missing_connections_are_empty(self):
        project = Project.model_validate({"id": "PVT_1", "title": "Roadmap"})
        assert project.field_nodes == []
        assert project.item_nodes == []
