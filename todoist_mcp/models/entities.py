"""Entity models mirroring Todoist API resources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Due(BaseModel):
    """Due date of a task."""

    model_config = ConfigDict(extra="allow")

    date: str | None = None
    string: str | None = None
    lang: str | None = None
    is_recurring: bool = False
    datetime: str | None = None
    timezone: str | None = None


class Duration(BaseModel):
    """Planned duration of a task."""

    amount: int
    unit: str


class Task(BaseModel):
    """A Todoist task."""

    model_config = ConfigDict(extra="allow")

    id: str
    content: str = ""
    description: str = ""
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    labels: list[str] = Field(default_factory=list)
    priority: int = 1
    due: Due | None = None
    duration: Duration | None = None
    assignee_id: str | None = None


class Project(BaseModel):
    """A Todoist project.

    Personal and workspace projects share this model; workspace-only fields
    (workspace_id, folder_id, ...) are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    parent_id: str | None = None
    color: str = "grey"
    is_favorite: bool = False
    view_style: str = "list"


class Section(BaseModel):
    """A section inside a project."""

    model_config = ConfigDict(extra="allow")

    id: str
    project_id: str
    name: str = ""
    order: int | None = None


class Label(BaseModel):
    """A personal label."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    color: str = "grey"
    order: int | None = None
    is_favorite: bool = False
