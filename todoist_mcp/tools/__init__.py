"""MCP tool definitions for Todoist."""

# Import all tools to register them with the MCP server
from todoist_mcp.tools.labels import (
    todoist_create_personal_label,
    todoist_delete_personal_label,
    todoist_get_personal_label,
    todoist_get_personal_labels,
    todoist_update_personal_label,
)
from todoist_mcp.tools.projects import (
    todoist_create_project,
    todoist_create_project_section,
    todoist_get_project_sections,
    todoist_get_projects,
    todoist_update_project,
)
from todoist_mcp.tools.tasks import (
    todoist_complete_task,
    todoist_create_task,
    todoist_delete_task,
    todoist_get_tasks,
    todoist_move_task,
    todoist_update_task,
)

__all__ = [
    # Task tools
    "todoist_create_task",
    "todoist_get_tasks",
    "todoist_update_task",
    "todoist_delete_task",
    "todoist_complete_task",
    "todoist_move_task",
    # Project and section tools
    "todoist_get_projects",
    "todoist_create_project",
    "todoist_update_project",
    "todoist_get_project_sections",
    "todoist_create_project_section",
    # Label tools
    "todoist_get_personal_labels",
    "todoist_get_personal_label",
    "todoist_create_personal_label",
    "todoist_update_personal_label",
    "todoist_delete_personal_label",
]
