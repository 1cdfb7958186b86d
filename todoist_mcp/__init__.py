"""
MCP Server for Todoist.

This server exposes the Todoist REST API as MCP tools, resources and prompts:
creating, listing, updating, completing, moving and deleting tasks, managing
projects and their sections, and managing personal labels. Mutating tools
accept a single item or a batch, and tasks, projects and labels can be
addressed by name as well as by ID.
"""

# Re-export enums
from todoist_mcp.enums import Color, DurationUnit, Priority, ViewStyle

# Re-export errors
from todoist_mcp.errors import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidRequestError,
    TodoistAPIError,
    TodoistMCPError,
)

# Re-export configuration, client and gateway
from todoist_mcp.config import TodoistConfig, resolve_api_token
from todoist_mcp.client import TodoistClient
from todoist_mcp.gateway import TodoistGateway

# Re-export models
from todoist_mcp.models import (
    CompleteTaskInput,
    CreateLabelInput,
    CreateProjectInput,
    CreateSectionInput,
    CreateTaskInput,
    DeleteLabelInput,
    DeleteTaskInput,
    Due,
    Duration,
    GetLabelInput,
    GetProjectSectionsInput,
    GetProjectsInput,
    GetTasksInput,
    Label,
    MoveTaskInput,
    Project,
    Section,
    Task,
    UpdateLabelInput,
    UpdateProjectInput,
    UpdateTaskInput,
)

# Re-export MCP server instance
from todoist_mcp.server import get_gateway, mcp, run

# Register tools, resources and prompts
from todoist_mcp import prompts, resources
from todoist_mcp.tools import (
    todoist_complete_task,
    todoist_create_personal_label,
    todoist_create_project,
    todoist_create_project_section,
    todoist_create_task,
    todoist_delete_personal_label,
    todoist_delete_task,
    todoist_get_personal_label,
    todoist_get_personal_labels,
    todoist_get_project_sections,
    todoist_get_projects,
    todoist_get_tasks,
    todoist_move_task,
    todoist_update_personal_label,
    todoist_update_project,
    todoist_update_task,
)

__all__ = [
    # Enums
    "Color",
    "DurationUnit",
    "Priority",
    "ViewStyle",
    # Errors
    "TodoistMCPError",
    "ConfigurationError",
    "InvalidRequestError",
    "EntityNotFoundError",
    "TodoistAPIError",
    # Plumbing
    "TodoistConfig",
    "resolve_api_token",
    "TodoistClient",
    "TodoistGateway",
    # Entity models
    "Due",
    "Duration",
    "Task",
    "Project",
    "Section",
    "Label",
    # Input models
    "CreateTaskInput",
    "GetTasksInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "CompleteTaskInput",
    "MoveTaskInput",
    "GetProjectsInput",
    "CreateProjectInput",
    "UpdateProjectInput",
    "GetProjectSectionsInput",
    "CreateSectionInput",
    "GetLabelInput",
    "CreateLabelInput",
    "UpdateLabelInput",
    "DeleteLabelInput",
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
    # Resources and prompts
    "resources",
    "prompts",
    # MCP server instance
    "mcp",
    "get_gateway",
    "run",
]
