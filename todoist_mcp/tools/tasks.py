"""Task MCP tool definitions for Todoist."""

from mcp.types import ToolAnnotations

from todoist_mcp.models.inputs import (
    CompleteTaskInput,
    CreateTaskInput,
    DeleteTaskInput,
    GetTasksInput,
    MoveTaskInput,
    UpdateTaskInput,
)
from todoist_mcp.server import get_gateway, mcp
from todoist_mcp.utils.formatters import dump_entities, format_response, handle_error


@mcp.tool(
    name="todoist_create_task",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_task(params: CreateTaskInput) -> str:
    """
    Create one or more tasks in Todoist.

    Supports both single task creation and batch operations. Include details
    like due dates, priorities, labels, and project assignments.

    USE THIS WHEN:
    - Adding a new task (set content and optional fields)
    - Adding several tasks at once (pass them in `tasks`)

    DO NOT USE WHEN:
    - Changing an existing task → use todoist_update_task instead
    - Changing a task's project/section/parent → use todoist_move_task instead

    DUE DATES: Give at most one of due_string, due_date or due_datetime.
    If both due_date and due_datetime are given, due_datetime is used.
    DURATION: duration and duration_unit must be given together.

    Args:
        params: CreateTaskInput with content (single) or tasks (batch)

    Returns:
        JSON with the created task, or a batch summary with per-item results

    Examples:
        - Simple task: params with content="Buy groceries"
        - Urgent task due tomorrow: params with content="Fix bug", priority=4, due_string="tomorrow"
        - Batch: params with tasks=[{"content": "A"}, {"content": "B", "project_id": "123"}]
    """
    try:
        result = await get_gateway().create_tasks(params)
    except Exception as e:
        return handle_error(e, "todoist_create_task")
    return format_response(result)


@mcp.tool(
    name="todoist_get_tasks",
    annotations=ToolAnnotations(
        title="Get Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_tasks(params: GetTasksInput) -> str:
    """
    Retrieve tasks from Todoist with flexible filtering options.

    Filter by project, section, label, priority, or use natural language
    filters like 'today', 'tomorrow', 'overdue'.

    FILTER PRECEDENCE:
    - `filter` is evaluated by Todoist; project_id, section_id, label and ids
      are ignored when it is set
    - `priority` and `limit` are applied afterwards, in that order

    Args:
        params: GetTasksInput with optional filters

    Returns:
        JSON with the matching tasks and their count

    Examples:
        - Today's tasks: params with filter="today"
        - Urgent tasks in a project: params with project_id="123", priority=4
        - First 5 tasks with a label: params with label="errand", limit=5
    """
    try:
        tasks = await get_gateway().get_tasks(params)
    except Exception as e:
        return handle_error(e, "todoist_get_tasks")
    return format_response({"success": True, "tasks": dump_entities(tasks), "count": len(tasks)})


@mcp.tool(
    name="todoist_update_task",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_task(params: UpdateTaskInput) -> str:
    """
    Update one or more existing tasks in Todoist.

    Supports both single task updates and batch operations. Each task is
    identified by task_id, or by task_name (first task whose content contains
    the name, case-insensitive).

    Args:
        params: UpdateTaskInput with a target and new values, or tasks (batch)

    Returns:
        JSON with the updated task, or a batch summary with per-item results

    Examples:
        - Rename: params with task_id="123", content="New title"
        - Reschedule by name: params with task_name="dentist", due_string="next friday"
    """
    try:
        result = await get_gateway().update_tasks(params)
    except Exception as e:
        return handle_error(e, "todoist_update_task")
    return format_response(result)


@mcp.tool(
    name="todoist_delete_task",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_delete_task(params: DeleteTaskInput) -> str:
    """
    Delete one or more tasks from Todoist.

    Supports both single task deletion and batch operations. Can delete by
    task ID or search by task name.

    Args:
        params: DeleteTaskInput with task_id/task_name, or tasks (batch)

    Returns:
        JSON with the deleted task ID, or a batch summary with per-item results
    """
    try:
        result = await get_gateway().delete_tasks(params)
    except Exception as e:
        return handle_error(e, "todoist_delete_task")
    return format_response(result)


@mcp.tool(
    name="todoist_complete_task",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_complete_task(params: CompleteTaskInput) -> str:
    """
    Mark one or more tasks as complete in Todoist.

    Supports both single task completion and batch operations. Can complete
    by task ID or search by task name.

    Args:
        params: CompleteTaskInput with task_id/task_name, or tasks (batch)

    Returns:
        JSON with the completed task ID, or a batch summary with per-item results
    """
    try:
        result = await get_gateway().complete_tasks(params)
    except Exception as e:
        return handle_error(e, "todoist_complete_task")
    return format_response(result)


@mcp.tool(
    name="todoist_move_task",
    annotations=ToolAnnotations(
        title="Move Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_move_task(params: MoveTaskInput) -> str:
    """
    Move one or more tasks to a different project, section, or parent task.

    Use this instead of update when changing task location. Exactly one
    destination (project_id, section_id, or parent_id) must be specified
    for each task.

    Args:
        params: MoveTaskInput with a target and one destination, or tasks (batch)

    Returns:
        JSON with the moved task, or a batch summary with per-item results

    Examples:
        - Move to project: params with task_id="123", project_id="456"
        - Make subtask: params with task_name="Pack", parent_id="789"
    """
    try:
        result = await get_gateway().move_tasks(params)
    except Exception as e:
        return handle_error(e, "todoist_move_task")
    return format_response(result)
