"""Personal label MCP tool definitions for Todoist."""

from mcp.types import ToolAnnotations

from todoist_mcp.models.inputs import (
    CreateLabelInput,
    DeleteLabelInput,
    GetLabelInput,
    UpdateLabelInput,
)
from todoist_mcp.server import get_gateway, mcp
from todoist_mcp.utils.formatters import dump_entities, dump_entity, format_response, handle_error


@mcp.tool(
    name="todoist_get_personal_labels",
    annotations=ToolAnnotations(
        title="Get Personal Labels",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_personal_labels() -> str:
    """
    List all personal labels.

    Returns:
        JSON with the labels and their count
    """
    try:
        labels = await get_gateway().get_labels()
    except Exception as e:
        return handle_error(e, "todoist_get_personal_labels")
    return format_response({"success": True, "labels": dump_entities(labels), "count": len(labels)})


@mcp.tool(
    name="todoist_get_personal_label",
    annotations=ToolAnnotations(
        title="Get Personal Label",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_personal_label(params: GetLabelInput) -> str:
    """Get a single personal label by ID."""
    try:
        label = await get_gateway().get_label(params.label_id)
    except Exception as e:
        return handle_error(e, "todoist_get_personal_label")
    return format_response({"success": True, "label": dump_entity(label)})


@mcp.tool(
    name="todoist_create_personal_label",
    annotations=ToolAnnotations(
        title="Create Personal Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_personal_label(params: CreateLabelInput) -> str:
    """
    Create one or more personal labels.

    Args:
        params: CreateLabelInput with name (single) or labels (batch)

    Returns:
        JSON with the created label, or a batch summary
    """
    try:
        result = await get_gateway().create_labels(params)
    except Exception as e:
        return handle_error(e, "todoist_create_personal_label")
    return format_response(result)


@mcp.tool(
    name="todoist_update_personal_label",
    annotations=ToolAnnotations(
        title="Update Personal Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_personal_label(params: UpdateLabelInput) -> str:
    """
    Update one or more personal labels.

    Labels are identified by label_id, or by label_name (exact name,
    case-insensitive).

    Args:
        params: UpdateLabelInput with a target and new values, or labels (batch)

    Returns:
        JSON with the updated label, or a batch summary
    """
    try:
        result = await get_gateway().update_labels(params)
    except Exception as e:
        return handle_error(e, "todoist_update_personal_label")
    return format_response(result)


@mcp.tool(
    name="todoist_delete_personal_label",
    annotations=ToolAnnotations(
        title="Delete Personal Label",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_personal_label(params: DeleteLabelInput) -> str:
    """
    Delete a personal label by ID or exact name.

    The label is removed from every task that carries it.
    """
    try:
        result = await get_gateway().delete_label(params)
    except Exception as e:
        return handle_error(e, "todoist_delete_personal_label")
    return format_response(result)
