"""Input models for Todoist MCP tools.

Every mutating tool accepts either the singular fields or a non-empty batch
array (``tasks``, ``projects``, ``sections`` or ``labels``). An empty array
counts as "no batch" and the singular fields are used instead.
"""

from pydantic import BaseModel, ConfigDict, Field

from todoist_mcp.enums import DurationUnit, ViewStyle

# ============================================================================
# Task Models
# ============================================================================


class TaskTarget(BaseModel):
    """Identifies one task by ID, or by a name searched against all tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str | None = Field(default=None, description="Task ID")
    task_name: str | None = Field(
        default=None,
        description="Task name to search for (case-insensitive substring, used if ID not provided)",
    )


class _TaskDetails(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    description: str | None = Field(default=None, description="Task description")
    labels: list[str] | None = Field(default=None, description="Label names")
    priority: int | None = Field(default=None, description="Priority (1-4, where 1=normal, 4=urgent)", ge=1, le=4)
    due_string: str | None = Field(
        default=None,
        description="Natural language due date (e.g., 'tomorrow', 'next Monday at 2pm')",
    )
    due_date: str | None = Field(
        default=None,
        description="Specific due date in YYYY-MM-DD format (mutually exclusive with due_datetime)",
    )
    due_datetime: str | None = Field(
        default=None,
        description="Specific due datetime in RFC3339 format (mutually exclusive with due_date)",
    )
    due_lang: str | None = Field(default=None, description="Language for parsing due_string (e.g., 'en', 'de', 'fr')")
    assignee_id: str | None = Field(default=None, description="User ID to assign task to")
    duration: int | None = Field(default=None, description="Task duration amount (use with duration_unit)", gt=0)
    duration_unit: DurationUnit | None = Field(default=None, description="Unit for duration: 'minute' or 'day'")


class _TaskPlacement(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str | None = Field(default=None, description="Project ID")
    section_id: str | None = Field(default=None, description="Section ID")
    parent_id: str | None = Field(default=None, description="Parent task ID (for subtasks)")
    order: int | None = Field(default=None, description="Task order in list")


class CreateTaskItem(_TaskPlacement, _TaskDetails):
    """One task to create."""

    content: str = Field(..., description="Task content/title", min_length=1, max_length=1000)


class CreateTaskInput(_TaskPlacement, _TaskDetails):
    """Input model for creating one task or a batch of tasks."""

    tasks: list[CreateTaskItem] | None = Field(
        default=None, description="Array of tasks to create (for batch operations)"
    )
    content: str | None = Field(default=None, description="Task content/title (for single task)", max_length=1000)


class GetTasksInput(BaseModel):
    """Input model for listing tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str | None = Field(default=None, description="Filter tasks by project ID")
    section_id: str | None = Field(default=None, description="Filter tasks by section ID")
    label: str | None = Field(default=None, description="Filter tasks by label name")
    filter: str | None = Field(
        default=None,
        description=(
            "Natural language filter like 'today', 'tomorrow', 'next week', 'overdue'. "
            "When given, project_id, section_id, label and ids are ignored"
        ),
    )
    lang: str | None = Field(default=None, description="Language for date parsing (e.g., 'en', 'de', 'fr')")
    ids: list[str] | None = Field(default=None, description="Filter by specific task IDs")
    priority: int | None = Field(
        default=None,
        description="Filter by priority level (1=normal, 2=medium, 3=high, 4=urgent)",
        ge=1,
        le=4,
    )
    limit: int | None = Field(default=None, description="Maximum number of tasks to return", ge=1)


class UpdateTaskItem(TaskTarget, _TaskDetails):
    """One task to update."""

    content: str | None = Field(default=None, description="New task content", max_length=1000)


class UpdateTaskInput(UpdateTaskItem):
    """Input model for updating one task or a batch of tasks."""

    tasks: list[UpdateTaskItem] | None = Field(
        default=None, description="Array of tasks to update (for batch operations)"
    )


class DeleteTaskInput(TaskTarget):
    """Input model for deleting one task or a batch of tasks."""

    tasks: list[TaskTarget] | None = Field(default=None, description="Array of tasks to delete (for batch operations)")


class CompleteTaskInput(TaskTarget):
    """Input model for completing one task or a batch of tasks."""

    tasks: list[TaskTarget] | None = Field(
        default=None, description="Array of tasks to complete (for batch operations)"
    )


class MoveTaskItem(TaskTarget):
    """One task to move; exactly one destination must be given."""

    project_id: str | None = Field(default=None, description="Destination project ID (move to project)")
    section_id: str | None = Field(default=None, description="Destination section ID (move to section)")
    parent_id: str | None = Field(default=None, description="Parent task ID (make this a subtask)")


class MoveTaskInput(MoveTaskItem):
    """Input model for moving one task or a batch of tasks."""

    tasks: list[MoveTaskItem] | None = Field(default=None, description="Array of tasks to move (for batch operations)")


# ============================================================================
# Project and Section Models
# ============================================================================


class ProjectTarget(BaseModel):
    """Identifies one project by ID, or by a name searched against all projects."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_id: str | None = Field(default=None, description="Project ID")
    project_name: str | None = Field(
        default=None,
        description="Project name to search for (case-insensitive substring, used if ID not provided)",
    )


class _ProjectDetails(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    color: str | None = Field(default=None, description="Project color name (e.g., 'berry_red', 'sky_blue')")
    favorite: bool | None = Field(default=None, description="Mark as favorite")
    view_style: ViewStyle | None = Field(default=None, description="Project view style: 'list' or 'board'")


class _ProjectCreateFields(_ProjectDetails):
    parent_id: str | None = Field(default=None, description="Parent project ID")
    parent_name: str | None = Field(default=None, description="Parent project name (if parent ID not provided)")
    sections: list[str] | None = Field(default=None, description="Section names to create inside the new project")


class CreateProjectItem(_ProjectCreateFields):
    """One project to create."""

    name: str = Field(..., description="Project name", min_length=1, max_length=120)


class CreateProjectInput(_ProjectCreateFields):
    """Input model for creating one project or a batch of projects."""

    projects: list[CreateProjectItem] | None = Field(
        default=None, description="Array of projects to create (for batch operations)"
    )
    name: str | None = Field(default=None, description="Project name (for single project)", max_length=120)


class GetProjectsInput(BaseModel):
    """Input model for listing projects."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_ids: list[str] | None = Field(
        default=None, description="Filter by specific project IDs (returns all if not specified)"
    )
    include_sections: bool = Field(default=False, description="Include sections for each project")
    include_hierarchy: bool = Field(
        default=False, description="Include child project IDs for each project (parent-child relationships)"
    )


class UpdateProjectItem(ProjectTarget, _ProjectDetails):
    """One project to update."""

    name: str | None = Field(default=None, description="New project name", max_length=120)


class UpdateProjectInput(UpdateProjectItem):
    """Input model for updating one project or a batch of projects."""

    projects: list[UpdateProjectItem] | None = Field(
        default=None, description="Array of projects to update (for batch operations)"
    )


class GetProjectSectionsInput(ProjectTarget):
    """Input model for listing the sections of one or more projects."""

    projects: list[ProjectTarget] | None = Field(
        default=None, description="Array of projects to get sections from (for batch operations)"
    )


class CreateSectionItem(ProjectTarget):
    """One section to create inside a project."""

    name: str = Field(..., description="Section name", min_length=1, max_length=120)
    order: int | None = Field(default=None, description="Section order")


class CreateSectionInput(ProjectTarget):
    """Input model for creating one section or a batch of sections."""

    sections: list[CreateSectionItem] | None = Field(
        default=None, description="Array of sections to create (for batch operations)"
    )
    name: str | None = Field(default=None, description="Section name (for single section)", max_length=120)
    order: int | None = Field(default=None, description="Section order")


# ============================================================================
# Label Models
# ============================================================================


class LabelTarget(BaseModel):
    """Identifies one label by ID, or by its exact (case-insensitive) name."""

    model_config = ConfigDict(str_strip_whitespace=True)

    label_id: str | None = Field(default=None, description="Label ID")
    label_name: str | None = Field(default=None, description="Label name to look up (if ID not provided)")


class _LabelDetails(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    color: str | None = Field(default=None, description="Label color name (e.g., 'berry_red', 'sky_blue')")
    order: int | None = Field(default=None, description="Label order")
    is_favorite: bool | None = Field(default=None, description="Mark as favorite")


class CreateLabelItem(_LabelDetails):
    """One label to create."""

    name: str = Field(..., description="Label name", min_length=1, max_length=60)


class CreateLabelInput(_LabelDetails):
    """Input model for creating one label or a batch of labels."""

    labels: list[CreateLabelItem] | None = Field(
        default=None, description="Array of labels to create (for batch operations)"
    )
    name: str | None = Field(default=None, description="Label name (for single label)", max_length=60)


class GetLabelInput(BaseModel):
    """Input model for fetching one label."""

    model_config = ConfigDict(str_strip_whitespace=True)

    label_id: str = Field(..., description="The unique ID of the label to retrieve", min_length=1)


class UpdateLabelItem(LabelTarget, _LabelDetails):
    """One label to update."""

    name: str | None = Field(default=None, description="New label name", max_length=60)


class UpdateLabelInput(UpdateLabelItem):
    """Input model for updating one label or a batch of labels."""

    labels: list[UpdateLabelItem] | None = Field(
        default=None, description="Array of labels to update (for batch operations)"
    )


class DeleteLabelInput(LabelTarget):
    """Input model for deleting a label (removes it from every task that uses it)."""
