"""Utility functions for Todoist MCP."""

from todoist_mcp.utils.batch import run_batch
from todoist_mcp.utils.formatters import dump_entities, dump_entity, format_error, format_response, handle_error
from todoist_mcp.utils.payloads import (
    build_label_fields,
    build_move_destination,
    build_project_create,
    build_project_update,
    build_section_create,
    build_task_create,
    build_task_update,
    validate_color,
)
from todoist_mcp.utils.resolvers import EntityResolver

__all__ = [
    "run_batch",
    "EntityResolver",
    "dump_entity",
    "dump_entities",
    "format_response",
    "format_error",
    "handle_error",
    "validate_color",
    "build_task_create",
    "build_task_update",
    "build_project_create",
    "build_project_update",
    "build_section_create",
    "build_label_fields",
    "build_move_destination",
]
