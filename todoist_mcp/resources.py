"""Read-only MCP resources exposing Todoist data as JSON."""

import json

from todoist_mcp.models.inputs import GetTasksInput
from todoist_mcp.server import get_gateway, mcp
from todoist_mcp.utils.formatters import dump_entities

JSON_MIME = "application/json"


async def _filtered_tasks(query: str) -> str:
    tasks = await get_gateway().get_tasks(GetTasksInput(filter=query))
    return json.dumps(dump_entities(tasks), indent=2)


@mcp.resource(
    "todoist://tasks/today",
    name="Today's tasks",
    description="All tasks due today",
    mime_type=JSON_MIME,
)
async def tasks_today() -> str:
    return await _filtered_tasks("today")


@mcp.resource(
    "todoist://tasks/overdue",
    name="Overdue tasks",
    description="All overdue tasks",
    mime_type=JSON_MIME,
)
async def tasks_overdue() -> str:
    return await _filtered_tasks("overdue")


@mcp.resource(
    "todoist://tasks/week",
    name="This week's tasks",
    description="All tasks due this week",
    mime_type=JSON_MIME,
)
async def tasks_week() -> str:
    return await _filtered_tasks("this week")


@mcp.resource(
    "todoist://tasks/priority/high",
    name="High priority tasks",
    description="All tasks with priority 3 (high) or 4 (urgent)",
    mime_type=JSON_MIME,
)
async def tasks_high_priority() -> str:
    tasks = await get_gateway().get_high_priority_tasks()
    return json.dumps(dump_entities(tasks), indent=2)


@mcp.resource(
    "todoist://projects",
    name="All projects",
    description="Complete list of all Todoist projects",
    mime_type=JSON_MIME,
)
async def all_projects() -> str:
    projects = await get_gateway().list_projects()
    return json.dumps(dump_entities(projects), indent=2)


@mcp.resource(
    "todoist://labels",
    name="All labels",
    description="Complete list of all personal labels",
    mime_type=JSON_MIME,
)
async def all_labels() -> str:
    labels = await get_gateway().get_labels()
    return json.dumps(dump_entities(labels), indent=2)
