"""
Entity gateway between the MCP surface and the Todoist API.

Every mutating operation has a single-item form and a batch form. Batch items
run concurrently through :func:`run_batch`; each item is addressed by an ID or
by a name resolved against one collection snapshot per call.

Architecture:
    MCP tools / resources
            │
            ▼
    TodoistGateway  (normalization, resolution, fan-out)
            │
            ▼
    TodoistClient   (httpx, REST API v1)
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from pydantic import BaseModel

from todoist_mcp.client import TodoistClient
from todoist_mcp.config import TodoistConfig, resolve_api_token
from todoist_mcp.enums import Priority
from todoist_mcp.errors import InvalidRequestError
from todoist_mcp.models.entities import Label, Project, Task
from todoist_mcp.models.inputs import (
    CompleteTaskInput,
    CreateLabelInput,
    CreateProjectInput,
    CreateSectionInput,
    CreateSectionItem,
    CreateTaskInput,
    DeleteLabelInput,
    DeleteTaskInput,
    GetProjectSectionsInput,
    GetProjectsInput,
    GetTasksInput,
    MoveTaskInput,
    UpdateLabelInput,
    UpdateProjectInput,
    UpdateTaskInput,
)
from todoist_mcp.utils.batch import run_batch
from todoist_mcp.utils.formatters import dump_entities, dump_entity
from todoist_mcp.utils.payloads import (
    build_label_fields,
    build_move_destination,
    build_project_create,
    build_project_update,
    build_section_create,
    build_task_create,
    build_task_update,
)
from todoist_mcp.utils.resolvers import EntityResolver

logger = logging.getLogger(__name__)

Operation = Callable[[Any], Awaitable[dict[str, Any]]]


class TodoistGateway:
    """Typed Todoist operations with ID-or-name resolution and batch fan-out."""

    def __init__(self, client: TodoistClient):
        self.client = client

    @classmethod
    def from_config(cls, config: TodoistConfig | None = None) -> "TodoistGateway":
        """
        Build a gateway, resolving the API token once.

        Raises:
            ConfigurationError: If no API token is configured
        """
        config = config or TodoistConfig()
        token = resolve_api_token(config)
        logger.info("Connecting to Todoist API at %s", config.base_url)
        return cls(TodoistClient(token, base_url=config.base_url, timeout=config.timeout))

    async def aclose(self) -> None:
        await self.client.close()

    # =========================================================================
    # Resolution and dispatch
    # =========================================================================

    def task_resolver(self) -> EntityResolver[Task]:
        return EntityResolver("task", self.client.get_tasks, lambda task: task.content)

    def project_resolver(self) -> EntityResolver[Project]:
        return EntityResolver("project", self.client.get_projects, lambda project: project.name)

    def label_resolver(self) -> EntityResolver[Label]:
        return EntityResolver("label", self.client.get_labels, lambda label: label.name, exact=True)

    async def _dispatch(
        self,
        items: Sequence[BaseModel] | None,
        single: BaseModel | None,
        operation: Operation,
        missing: str = "",
    ) -> dict[str, Any]:
        """
        Run ``operation`` over a non-empty batch, or once over ``single``.

        An empty batch falls through to the single-item path. Errors in the
        single-item path propagate to the caller.
        """
        if items:
            return await run_batch(items, operation)
        if single is None:
            raise InvalidRequestError(missing)
        return {"success": True, **await operation(single)}

    # =========================================================================
    # Tasks
    # =========================================================================

    async def get_tasks(self, params: GetTasksInput) -> list[Task]:
        """
        Fetch tasks, then filter by priority and cap the count client-side.

        A filter expression takes precedence over every ID-based filter.
        """
        if params.filter:
            tasks = await self.client.get_tasks_by_filter(params.filter, lang=params.lang)
        else:
            tasks = await self.client.get_tasks(
                project_id=params.project_id,
                section_id=params.section_id,
                label=params.label,
                ids=params.ids,
            )

        # Priority before limit, otherwise the cap could under-return
        if params.priority:
            tasks = [task for task in tasks if task.priority == params.priority]

        if params.limit and len(tasks) > params.limit:
            tasks = tasks[: params.limit]

        return tasks

    async def get_high_priority_tasks(self) -> list[Task]:
        tasks = await self.client.get_tasks()
        return [task for task in tasks if task.priority >= Priority.HIGH]

    async def create_tasks(self, params: CreateTaskInput) -> dict[str, Any]:
        async def create(item: BaseModel) -> dict[str, Any]:
            task = await self.client.add_task(build_task_create(item))
            return {"task": dump_entity(task)}

        single = params if params.content else None
        return await self._dispatch(params.tasks, single, create, "Either 'content' or 'tasks' must be provided")

    async def update_tasks(self, params: UpdateTaskInput) -> dict[str, Any]:
        resolver = self.task_resolver()

        async def update(item: Any) -> dict[str, Any]:
            task_id = await resolver.resolve(item.task_id, item.task_name)
            task = await self.client.update_task(task_id, build_task_update(item))
            return {"task": dump_entity(task)}

        return await self._dispatch(params.tasks, params, update)

    async def delete_tasks(self, params: DeleteTaskInput) -> dict[str, Any]:
        resolver = self.task_resolver()

        async def delete(item: Any) -> dict[str, Any]:
            task_id = await resolver.resolve(item.task_id, item.task_name)
            await self.client.delete_task(task_id)
            return {"task_id": task_id}

        return await self._dispatch(params.tasks, params, delete)

    async def complete_tasks(self, params: CompleteTaskInput) -> dict[str, Any]:
        resolver = self.task_resolver()

        async def complete(item: Any) -> dict[str, Any]:
            task_id = await resolver.resolve(item.task_id, item.task_name)
            await self.client.close_task(task_id)
            return {"task_id": task_id}

        return await self._dispatch(params.tasks, params, complete)

    async def move_tasks(self, params: MoveTaskInput) -> dict[str, Any]:
        resolver = self.task_resolver()

        async def move(item: Any) -> dict[str, Any]:
            destination = build_move_destination(item)
            task_id = await resolver.resolve(item.task_id, item.task_name)
            moved = await self.client.move_tasks([task_id], destination)
            return {"task": dump_entity(moved[0])}

        return await self._dispatch(params.tasks, params, move)

    # =========================================================================
    # Projects and sections
    # =========================================================================

    async def list_projects(self) -> list[Project]:
        return await self.client.get_projects()

    async def get_projects(self, params: GetProjectsInput) -> dict[str, Any]:
        all_projects = await self.client.get_projects()

        projects = all_projects
        if params.project_ids:
            wanted = set(params.project_ids)
            projects = [project for project in all_projects if project.id in wanted]

        entries = dump_entities(projects)

        if params.include_hierarchy:
            children: dict[str, list[str]] = {}
            for project in all_projects:
                if project.parent_id:
                    children.setdefault(project.parent_id, []).append(project.id)
            for entry in entries:
                entry["child_ids"] = children.get(entry["id"], [])

        if params.include_sections:
            sections = await asyncio.gather(*(self.client.get_sections(project.id) for project in projects))
            for entry, project_sections in zip(entries, sections):
                entry["sections"] = dump_entities(project_sections)

        return {"success": True, "projects": entries, "count": len(entries)}

    async def create_projects(self, params: CreateProjectInput) -> dict[str, Any]:
        resolver = self.project_resolver()

        async def create(item: Any) -> dict[str, Any]:
            parent_id = item.parent_id
            if not parent_id and item.parent_name:
                parent_id = (await resolver.find(item.parent_name)).id

            project = await self.client.add_project(build_project_create(item, parent_id))
            result: dict[str, Any] = {"project": dump_entity(project)}

            # The project already exists; a failed section must not hide its ID
            if item.sections:
                outcomes = await asyncio.gather(
                    *(
                        self.client.add_section(build_section_create(project.id, CreateSectionItem(name=name)))
                        for name in item.sections
                    ),
                    return_exceptions=True,
                )
                result["sections"] = [dump_entity(o) for o in outcomes if not isinstance(o, BaseException)]
                failed = [
                    {"name": name, "error": str(o)}
                    for name, o in zip(item.sections, outcomes)
                    if isinstance(o, BaseException)
                ]
                if failed:
                    logger.warning("Project %s created but %d section(s) failed", project.id, len(failed))
                    result["section_errors"] = failed
            return result

        single = params if params.name else None
        return await self._dispatch(params.projects, single, create, "Either 'name' or 'projects' must be provided")

    async def update_projects(self, params: UpdateProjectInput) -> dict[str, Any]:
        resolver = self.project_resolver()

        async def update(item: Any) -> dict[str, Any]:
            project_id = await resolver.resolve(item.project_id, item.project_name)
            project = await self.client.update_project(project_id, build_project_update(item))
            return {"project": dump_entity(project)}

        return await self._dispatch(params.projects, params, update)

    async def get_project_sections(self, params: GetProjectSectionsInput) -> dict[str, Any]:
        resolver = self.project_resolver()

        async def list_sections(item: Any) -> dict[str, Any]:
            project_id = await resolver.resolve(item.project_id, item.project_name)
            sections = await self.client.get_sections(project_id)
            return {"project_id": project_id, "sections": dump_entities(sections), "count": len(sections)}

        return await self._dispatch(params.projects, params, list_sections)

    async def create_project_sections(self, params: CreateSectionInput) -> dict[str, Any]:
        resolver = self.project_resolver()

        missing = "project_id (or project_name) and name must be provided"

        async def create(item: Any) -> dict[str, Any]:
            if not (item.project_id or item.project_name):
                raise InvalidRequestError(missing)
            project_id = await resolver.resolve(item.project_id, item.project_name)
            section = await self.client.add_section(build_section_create(project_id, item))
            return {"section": dump_entity(section)}

        single = params if params.name else None
        return await self._dispatch(params.sections, single, create, missing)

    # =========================================================================
    # Labels
    # =========================================================================

    async def get_labels(self) -> list[Label]:
        return await self.client.get_labels()

    async def get_label(self, label_id: str) -> Label:
        return await self.client.get_label(label_id)

    async def create_labels(self, params: CreateLabelInput) -> dict[str, Any]:
        async def create(item: BaseModel) -> dict[str, Any]:
            label = await self.client.add_label(build_label_fields(item))
            return {"label": dump_entity(label)}

        single = params if params.name else None
        return await self._dispatch(params.labels, single, create, "Either 'name' or 'labels' must be provided")

    async def update_labels(self, params: UpdateLabelInput) -> dict[str, Any]:
        resolver = self.label_resolver()

        async def update(item: Any) -> dict[str, Any]:
            label_id = await resolver.resolve(item.label_id, item.label_name)
            label = await self.client.update_label(label_id, build_label_fields(item))
            return {"label": dump_entity(label)}

        return await self._dispatch(params.labels, params, update)

    async def delete_label(self, params: DeleteLabelInput) -> dict[str, Any]:
        label_id = await self.label_resolver().resolve(params.label_id, params.label_name)
        await self.client.delete_label(label_id)
        return {"success": True, "label_id": label_id}
