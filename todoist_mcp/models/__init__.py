"""Pydantic models for Todoist MCP."""

from todoist_mcp.models.entities import Due, Duration, Label, Project, Section, Task
from todoist_mcp.models.inputs import (
    CompleteTaskInput,
    CreateLabelInput,
    CreateLabelItem,
    CreateProjectInput,
    CreateProjectItem,
    CreateSectionInput,
    CreateSectionItem,
    CreateTaskInput,
    CreateTaskItem,
    DeleteLabelInput,
    DeleteTaskInput,
    GetLabelInput,
    GetProjectSectionsInput,
    GetProjectsInput,
    GetTasksInput,
    LabelTarget,
    MoveTaskInput,
    MoveTaskItem,
    ProjectTarget,
    TaskTarget,
    UpdateLabelInput,
    UpdateLabelItem,
    UpdateProjectInput,
    UpdateProjectItem,
    UpdateTaskInput,
    UpdateTaskItem,
)

__all__ = [
    # Entity models
    "Due",
    "Duration",
    "Task",
    "Project",
    "Section",
    "Label",
    # Task input models
    "TaskTarget",
    "CreateTaskItem",
    "CreateTaskInput",
    "GetTasksInput",
    "UpdateTaskItem",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "CompleteTaskInput",
    "MoveTaskItem",
    "MoveTaskInput",
    # Project and section input models
    "ProjectTarget",
    "CreateProjectItem",
    "CreateProjectInput",
    "GetProjectsInput",
    "UpdateProjectItem",
    "UpdateProjectInput",
    "GetProjectSectionsInput",
    "CreateSectionItem",
    "CreateSectionInput",
    # Label input models
    "LabelTarget",
    "CreateLabelItem",
    "CreateLabelInput",
    "GetLabelInput",
    "UpdateLabelItem",
    "UpdateLabelInput",
    "DeleteLabelInput",
]
