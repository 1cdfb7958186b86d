"""Project and section MCP tool definitions for Todoist."""

from mcp.types import ToolAnnotations

from todoist_mcp.models.inputs import (
    CreateProjectInput,
    CreateSectionInput,
    GetProjectSectionsInput,
    GetProjectsInput,
    UpdateProjectInput,
)
from todoist_mcp.server import get_gateway, mcp
from todoist_mcp.utils.formatters import format_response, handle_error


@mcp.tool(
    name="todoist_get_projects",
    annotations=ToolAnnotations(
        title="Get Projects",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_projects(params: GetProjectsInput) -> str:
    """
    List Todoist projects, optionally with their sections and hierarchy.

    Args:
        params: GetProjectsInput with optional project_ids, include_sections
            and include_hierarchy (adds child_ids to each project)

    Returns:
        JSON with the projects and their count
    """
    try:
        result = await get_gateway().get_projects(params)
    except Exception as e:
        return handle_error(e, "todoist_get_projects")
    return format_response(result)


@mcp.tool(
    name="todoist_create_project",
    annotations=ToolAnnotations(
        title="Create Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_project(params: CreateProjectInput) -> str:
    """
    Create one or more projects in Todoist.

    A project can be nested under a parent (parent_id, or parent_name matched
    against existing project names) and can be created with initial sections.

    COLORS: Unknown color names fall back to "grey".

    Args:
        params: CreateProjectInput with name (single) or projects (batch)

    Returns:
        JSON with the created project (and sections), or a batch summary.
        Sections that could not be created are listed under section_errors.

    Examples:
        - Simple: params with name="Home"
        - Nested with sections: params with name="Kitchen", parent_name="Home", sections=["Todo", "Done"]
    """
    try:
        result = await get_gateway().create_projects(params)
    except Exception as e:
        return handle_error(e, "todoist_create_project")
    return format_response(result)


@mcp.tool(
    name="todoist_update_project",
    annotations=ToolAnnotations(
        title="Update Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_update_project(params: UpdateProjectInput) -> str:
    """
    Update one or more existing projects.

    Each project is identified by project_id, or by project_name (first project
    whose name contains it, case-insensitive).

    Args:
        params: UpdateProjectInput with a target and new values, or projects (batch)

    Returns:
        JSON with the updated project, or a batch summary
    """
    try:
        result = await get_gateway().update_projects(params)
    except Exception as e:
        return handle_error(e, "todoist_update_project")
    return format_response(result)


@mcp.tool(
    name="todoist_get_project_sections",
    annotations=ToolAnnotations(
        title="Get Project Sections",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def todoist_get_project_sections(params: GetProjectSectionsInput) -> str:
    """
    List the sections of one or more projects.

    Args:
        params: GetProjectSectionsInput with project_id/project_name, or projects (batch)

    Returns:
        JSON with the project ID, its sections and their count
    """
    try:
        result = await get_gateway().get_project_sections(params)
    except Exception as e:
        return handle_error(e, "todoist_get_project_sections")
    return format_response(result)


@mcp.tool(
    name="todoist_create_project_section",
    annotations=ToolAnnotations(
        title="Create Project Section",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def todoist_create_project_section(params: CreateSectionInput) -> str:
    """
    Create one or more sections in Todoist projects.

    Args:
        params: CreateSectionInput with project_id/project_name and name, or sections (batch)

    Returns:
        JSON with the created section, or a batch summary

    Examples:
        - params with project_name="Work", name="Backlog"
        - params with sections=[{"project_id": "123", "name": "Doing"}, {"project_id": "123", "name": "Done"}]
    """
    try:
        result = await get_gateway().create_project_sections(params)
    except Exception as e:
        return handle_error(e, "todoist_create_project_section")
    return format_response(result)
