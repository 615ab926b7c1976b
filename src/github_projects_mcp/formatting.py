"""Plain-text renderers for tool responses."""

from __future__ import annotations

from github_projects_mcp.github.models import (
    DraftIssueContent,
    IssueContent,
    Project,
    ProjectField,
    ProjectItem,
    PullRequestContent,
)

NO_DESCRIPTION = "No description"
BODY_PREVIEW_LENGTH = 100


def _description(project: Project) -> str:
    return project.short_description or NO_DESCRIPTION


def _state(project: Project) -> str:
    return "Closed" if project.closed else "Open"


def format_project_list(owner: str, projects: list[Project]) -> str:
    entries = [
        f"• {p.title} (#{p.number})\n"
        f"  ID: {p.id}\n"
        f"  Description: {_description(p)}\n"
        f"  Visibility: {p.visibility}\n"
        f"  Status: {_state(p)}\n"
        f"  URL: {p.url}\n"
        for p in projects
    ]
    return f"Projects for {owner}:\n\n" + "\n".join(entries)


def _summary_item_line(item: ProjectItem) -> str:
    content = item.content
    if isinstance(content, (IssueContent, PullRequestContent)):
        return f"• {content.title} (#{content.number}) - {content.state}\n  URL: {content.url}\n"
    if isinstance(content, DraftIssueContent):
        return f"• {content.title} (Draft)\n"
    return f"• Item ID: {item.id}\n"


def format_project_details(project: Project) -> str:
    fields = project.field_nodes
    items = project.item_nodes
    field_lines = "".join(f"• {f.name} ({f.data_type}) - ID: {f.id}\n" for f in fields)
    item_lines = "".join(_summary_item_line(item) for item in items)
    return (
        "Project Details:\n\n"
        f"Title: {project.title}\n"
        f"ID: {project.id}\n"
        f"Number: #{project.number}\n"
        f"Description: {_description(project)}\n"
        f"Visibility: {project.visibility}\n"
        f"Status: {_state(project)}\n"
        f"URL: {project.url}\n\n"
        f"Fields ({len(fields)}):\n{field_lines}\n"
        f"Items ({len(items)}):\n{item_lines}"
    )


def format_created_project(project: Project) -> str:
    return (
        "Project created successfully!\n\n"
        f"Title: {project.title}\n"
        f"ID: {project.id}\n"
        f"Number: #{project.number}\n"
        f"Description: {_description(project)}\n"
        f"URL: {project.url}"
    )


def format_updated_project(project: Project) -> str:
    return (
        "Project updated successfully!\n\n"
        f"Title: {project.title}\n"
        f"ID: {project.id}\n"
        f"Description: {_description(project)}\n"
        f"Visibility: {project.visibility}"
    )


# ----------------------------------------------------------------------
# Fields
# ----------------------------------------------------------------------


def _format_field(field: ProjectField) -> str:
    created = field.created_at.date().isoformat() if field.created_at else "unknown"
    info = (
        f"• **{field.name}**\n"
        f"  - ID: `{field.id}`\n"
        f"  - Type: {field.data_type}\n"
        f"  - Created: {created}\n"
    )

    if field.data_type == "SINGLE_SELECT" and field.options is not None:
        info += f"  - Options ({len(field.options)}):\n"
        for index, option in enumerate(field.options, start=1):
            info += f'    {index}. "{option.name}" (ID: `{option.id}`)'
            if option.color:
                info += f" [{option.color}]"
            if option.description:
                info += f" - {option.description}"
            info += "\n"

    if field.data_type == "ITERATION" and field.configuration is not None:
        iterations = field.configuration.iterations
        info += f"  - Iterations ({len(iterations)}):\n"
        for index, iteration in enumerate(iterations, start=1):
            info += f'    {index}. "{iteration.title}" ({iteration.duration} days)'
            if iteration.start_date:
                info += f" - Starts: {iteration.start_date}"
            info += f" (ID: `{iteration.id}`)\n"

    return info


def format_project_fields(project: Project) -> str:
    fields = project.field_nodes
    if not fields:
        return "No custom fields found in this project."

    details = "\n".join(_format_field(field) for field in fields)
    return (
        f"Project Fields for {project.title}:\n\n"
        f"Total Fields: {len(fields)}\n\n"
        f"{details}"
        "\n\n**Usage Examples:**\n"
        '- Text field: `{"fieldId": "field_id", "value": "text", "fieldType": "TEXT"}`\n'
        '- Status field: `{"fieldId": "field_id", "value": "option_name", '
        '"fieldType": "SINGLE_SELECT"}`\n'
        f'- Quick status update: `{{"projectId": "{project.id}", "itemId": "item_id", '
        '"status": "option_name"}`\n\n'
        "**Built-in Fields:**\n"
        "- Title: Always available for all items\n"
        "- Assignees: Built-in user assignment field\n"
        "- Status: Default status tracking field\n"
        "- Labels: Built-in labeling system"
    )


# ----------------------------------------------------------------------
# Items
# ----------------------------------------------------------------------


def body_preview(body: str) -> str:
    if len(body) > BODY_PREVIEW_LENGTH:
        return body[:BODY_PREVIEW_LENGTH] + "..."
    return body


def _format_item(index: int, item: ProjectItem) -> str:
    content = item.content
    info = f"**{index}. "

    if isinstance(content, (IssueContent, PullRequestContent)):
        info += f"{content.title} (#{content.number})**\n"
        info += f"   - Type: {content.typename}\n"
        info += f"   - State: {content.state}\n"
        info += f"   - URL: {content.url}\n"
        info += f"   - Item ID: `{item.id}`\n"
        logins = [a.login for a in content.assignees.nodes] if content.assignees else []
        if logins:
            info += "   - Assignees: " + ", ".join(f"@{login}" for login in logins) + "\n"
    elif isinstance(content, DraftIssueContent):
        info += f"{content.title} (Draft)**\n"
        info += "   - Type: Draft Issue\n"
        info += f"   - Item ID: `{item.id}`\n"
        if content.body:
            info += f"   - Body: {body_preview(content.body)}\n"
    else:
        info += "Unknown Item**\n"
        info += f"   - Item ID: `{item.id}`\n"

    named = [value for value in item.values if value.field and value.field.name]
    if item.values:
        info += "   - Fields:\n"
        for value in named:
            info += f"     - {value.field.name}: {value.display_value()}\n"

    return info


def format_project_items(project: Project) -> str:
    items = project.item_nodes
    if not items:
        return f'No items found in project "{project.title}".'

    details = "\n".join(_format_item(index, item) for index, item in enumerate(items, start=1))
    return (
        f'Project Items for "{project.title}":\n\n'
        f"Total Items: {len(items)}\n\n"
        f"{details}"
        "\n\n**Quick Actions:**\n"
        "- Update status: `update-item-status` with itemId and status\n"
        "- Update any field: `update-project-item` with itemId, fieldId, and value"
    )
