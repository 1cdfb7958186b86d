"""Request normalization: turn tool parameters into Todoist request bodies."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from todoist_mcp.enums import Color
from todoist_mcp.errors import InvalidRequestError

logger = logging.getLogger(__name__)

DEFAULT_COLOR = Color.GREY.value
VALID_COLORS = frozenset(c.value for c in Color)

# Caller-facing option name -> Todoist request field name
TASK_CREATE_FIELDS = {
    "content": "content",
    "description": "description",
    "project_id": "project_id",
    "section_id": "section_id",
    "parent_id": "parent_id",
    "order": "order",
    "labels": "labels",
    "priority": "priority",
    "due_string": "due_string",
    "due_lang": "due_lang",
    "assignee_id": "assignee_id",
}
TASK_UPDATE_FIELDS = {
    "content": "content",
    "description": "description",
    "labels": "labels",
    "priority": "priority",
    "due_string": "due_string",
    "due_lang": "due_lang",
    "assignee_id": "assignee_id",
}
PROJECT_CREATE_FIELDS = {
    "name": "name",
    "parent_id": "parent_id",
    "color": "color",
    "favorite": "is_favorite",
    "view_style": "view_style",
}
PROJECT_UPDATE_FIELDS = {
    "name": "name",
    "color": "color",
    "favorite": "is_favorite",
    "view_style": "view_style",
}
SECTION_FIELDS = {
    "name": "name",
    "order": "order",
}
LABEL_FIELDS = {
    "name": "name",
    "color": "color",
    "order": "order",
    "is_favorite": "is_favorite",
}
MOVE_DESTINATIONS = ("project_id", "section_id", "parent_id")


def strip_unset(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop absent values; Todoist answers explicit nulls with a 400."""
    return {key: value for key, value in fields.items() if value is not None}


def rename_fields(source: BaseModel, names: dict[str, str]) -> dict[str, Any]:
    """Copy the named attributes of ``source`` under their request names."""
    fields = {}
    for option, request_name in names.items():
        value = getattr(source, option, None)
        if isinstance(value, Enum):
            value = value.value
        fields[request_name] = value
    return fields


def validate_color(color: str) -> str:
    """Return ``color`` if it is a palette name, otherwise the default colour."""
    if color in VALID_COLORS:
        return color
    logger.warning('Invalid color "%s", defaulting to "%s"', color, DEFAULT_COLOR)
    return DEFAULT_COLOR


def resolve_due(source: BaseModel) -> dict[str, Any]:
    """
    Pick the due date field to send.

    due_date and due_datetime are mutually exclusive; when both are given the
    datetime wins and the date is dropped.
    """
    due_datetime = getattr(source, "due_datetime", None)
    if due_datetime:
        return {"due_datetime": due_datetime}
    due_date = getattr(source, "due_date", None)
    if due_date:
        return {"due_date": due_date}
    return {}


def resolve_duration(source: BaseModel) -> dict[str, Any]:
    """Include duration only when both the amount and the unit are present."""
    amount = getattr(source, "duration", None)
    unit = getattr(source, "duration_unit", None)
    if amount is None or unit is None:
        return {}
    return {"duration": amount, "duration_unit": unit.value if isinstance(unit, Enum) else unit}


def _with_color(fields: dict[str, Any]) -> dict[str, Any]:
    if fields.get("color") is not None:
        fields["color"] = validate_color(fields["color"])
    return fields


def build_task_create(item: BaseModel) -> dict[str, Any]:
    """Request body for creating a task."""
    fields = rename_fields(item, TASK_CREATE_FIELDS)
    fields.update(resolve_due(item))
    fields.update(resolve_duration(item))
    return strip_unset(fields)


def build_task_update(item: BaseModel) -> dict[str, Any]:
    """Request body for updating a task."""
    fields = rename_fields(item, TASK_UPDATE_FIELDS)
    fields.update(resolve_due(item))
    fields.update(resolve_duration(item))
    return strip_unset(fields)


def build_project_create(item: BaseModel, parent_id: str | None = None) -> dict[str, Any]:
    """Request body for creating a project; ``parent_id`` overrides the item's own."""
    fields = _with_color(rename_fields(item, PROJECT_CREATE_FIELDS))
    if parent_id is not None:
        fields["parent_id"] = parent_id
    return strip_unset(fields)


def build_project_update(item: BaseModel) -> dict[str, Any]:
    """Request body for updating a project."""
    return strip_unset(_with_color(rename_fields(item, PROJECT_UPDATE_FIELDS)))


def build_section_create(project_id: str, item: BaseModel) -> dict[str, Any]:
    """Request body for creating a section in ``project_id``."""
    fields = rename_fields(item, SECTION_FIELDS)
    fields["project_id"] = project_id
    return strip_unset(fields)


def build_label_fields(item: BaseModel) -> dict[str, Any]:
    """Request body for creating or updating a label."""
    return strip_unset(_with_color(rename_fields(item, LABEL_FIELDS)))


def build_move_destination(item: BaseModel) -> dict[str, str]:
    """
    Return the single move destination of ``item``.

    Raises:
        InvalidRequestError: If zero or several destinations are given
    """
    destinations = {name: getattr(item, name, None) for name in MOVE_DESTINATIONS}
    present = {name: value for name, value in destinations.items() if value}
    if len(present) != 1:
        raise InvalidRequestError("Exactly one of project_id, section_id, or parent_id must be specified")
    return present
