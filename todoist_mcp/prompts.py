"""Canned MCP prompts for common Todoist workflows."""

from todoist_mcp.server import mcp


@mcp.prompt(name="daily-review", description="Review today's tasks and plan your day")
def daily_review() -> str:
    return (
        "Show me all my tasks due today and help me prioritize them. "
        "Include any overdue tasks I should address first."
    )


@mcp.prompt(name="quick-add", description="Quickly add a new task with natural language")
def quick_add() -> str:
    return (
        "I want to add a new task. Help me create it with the right details "
        "like due date, priority, and project."
    )


@mcp.prompt(name="project-overview", description="Get an overview of all projects and their tasks")
def project_overview() -> str:
    return (
        "Show me all my projects with their sections and task counts. "
        "Help me understand what needs attention."
    )


@mcp.prompt(name="weekly-plan", description="Plan your week ahead")
def weekly_plan() -> str:
    return (
        "Show me all tasks due this week organized by project "
        "and help me create a realistic weekly plan."
    )


@mcp.prompt(name="cleanup-tasks", description="Review and clean up old or stuck tasks")
def cleanup_tasks() -> str:
    return (
        "Show me overdue tasks and tasks without due dates. "
        "Help me decide what to complete, reschedule, or delete."
    )
