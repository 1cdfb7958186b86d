"""
Todoist API client using the REST API v1 endpoints.

Base URL: https://api.todoist.com/api/v1
Documentation: https://developer.todoist.com/api/v1/
"""

import asyncio
import logging
from typing import Any

import httpx

from todoist_mcp.config import DEFAULT_BASE_URL
from todoist_mcp.errors import TodoistAPIError
from todoist_mcp.models.entities import Label, Project, Section, Task

logger = logging.getLogger(__name__)


class TodoistClient:
    """
    Async client for the Todoist REST API.

    List endpoints are paginated with ``next_cursor``; the client follows the
    cursor until exhausted so callers always receive the whole collection.

    Endpoints implemented:
    - Tasks: list, filter, add, update, delete, close, move
    - Projects: list, add, update
    - Sections: list, add
    - Labels: list, get, add, update, delete
    """

    PAGE_SIZE = 200

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Todoist client.

        Args:
            api_token: Personal API token, sent as a bearer credential
            base_url: API root URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.api_token = api_token
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API endpoint (relative to the base URL)
            json: JSON body for POST requests
            params: Query parameters

        Returns:
            Response JSON, or None for empty responses

        Raises:
            TodoistAPIError: If the API returns an error or cannot be reached
        """
        client = await self._get_client()

        try:
            response = await client.request(method=method, url=endpoint, json=json, params=params)
        except httpx.RequestError as e:
            logger.error("Request error on %s %s: %s", method, endpoint, e)
            raise TodoistAPIError(status_code=0, message=f"Request failed: {e}") from e

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            reason = response.reason_phrase or "Request failed"
            raise TodoistAPIError(
                status_code=response.status_code,
                message=f"{reason} ({method} {endpoint})",
                response_body=body,
            )

        if response.status_code == 204 or not response.content:
            return None

        return response.json()

    async def _paginate(self, endpoint: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Collect every page of a cursor-paginated list endpoint."""
        query = dict(params or {})
        query["limit"] = self.PAGE_SIZE
        results: list[dict[str, Any]] = []

        while True:
            page = await self._request("GET", endpoint, params=query) or {}
            results.extend(page.get("results", []))
            cursor = page.get("next_cursor")
            if not cursor:
                return results
            query["cursor"] = cursor

    # ==================== Task Operations ====================

    async def get_tasks(
        self,
        project_id: str | None = None,
        section_id: str | None = None,
        label: str | None = None,
        ids: list[str] | None = None,
    ) -> list[Task]:
        """
        Get active tasks, optionally narrowed by identifiers.

        Args:
            project_id: Only tasks in this project
            section_id: Only tasks in this section
            label: Only tasks carrying this label name
            ids: Only tasks with these IDs

        Returns:
            List of tasks in API order
        """
        params: dict[str, Any] = {}
        if project_id:
            params["project_id"] = project_id
        if section_id:
            params["section_id"] = section_id
        if label:
            params["label"] = label
        if ids:
            params["ids"] = ",".join(ids)

        return [Task.model_validate(t) for t in await self._paginate("/tasks", params)]

    async def get_tasks_by_filter(self, query: str, lang: str | None = None) -> list[Task]:
        """
        Get tasks matching a Todoist filter query (e.g. "today", "overdue").

        Args:
            query: Filter expression, parsed by Todoist
            lang: Language used to parse the query

        Returns:
            List of matching tasks
        """
        params: dict[str, Any] = {"query": query}
        if lang:
            params["lang"] = lang
        return [Task.model_validate(t) for t in await self._paginate("/tasks/filter", params)]

    async def add_task(self, fields: dict[str, Any]) -> Task:
        """Create a task from already-normalized request fields."""
        return Task.model_validate(await self._request("POST", "/tasks", json=fields))

    async def update_task(self, task_id: str, fields: dict[str, Any]) -> Task:
        """Update a task with already-normalized request fields."""
        return Task.model_validate(await self._request("POST", f"/tasks/{task_id}", json=fields))

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task. Returns True if successful."""
        await self._request("DELETE", f"/tasks/{task_id}")
        return True

    async def close_task(self, task_id: str) -> bool:
        """Complete a task. Returns True if successful."""
        await self._request("POST", f"/tasks/{task_id}/close")
        return True

    async def move_tasks(self, task_ids: list[str], destination: dict[str, str]) -> list[Task]:
        """
        Move tasks to a project, section or parent task.

        Args:
            task_ids: Tasks to move
            destination: Exactly one of project_id, section_id or parent_id

        Returns:
            The moved tasks, in the order of task_ids
        """
        moved = await asyncio.gather(
            *(self._request("POST", f"/tasks/{task_id}/move", json=destination) for task_id in task_ids)
        )
        return [Task.model_validate(t) for t in moved]

    # ==================== Project Operations ====================

    async def get_projects(self) -> list[Project]:
        """Get all projects (personal and workspace)."""
        return [Project.model_validate(p) for p in await self._paginate("/projects")]

    async def add_project(self, fields: dict[str, Any]) -> Project:
        """Create a project from already-normalized request fields."""
        return Project.model_validate(await self._request("POST", "/projects", json=fields))

    async def update_project(self, project_id: str, fields: dict[str, Any]) -> Project:
        """Update a project with already-normalized request fields."""
        return Project.model_validate(await self._request("POST", f"/projects/{project_id}", json=fields))

    # ==================== Section Operations ====================

    async def get_sections(self, project_id: str) -> list[Section]:
        """Get the sections of a project."""
        return [Section.model_validate(s) for s in await self._paginate("/sections", {"project_id": project_id})]

    async def add_section(self, fields: dict[str, Any]) -> Section:
        """Create a section from already-normalized request fields."""
        return Section.model_validate(await self._request("POST", "/sections", json=fields))

    # ==================== Label Operations ====================

    async def get_labels(self) -> list[Label]:
        """Get all personal labels."""
        return [Label.model_validate(lbl) for lbl in await self._paginate("/labels")]

    async def get_label(self, label_id: str) -> Label:
        """Get a personal label by ID."""
        return Label.model_validate(await self._request("GET", f"/labels/{label_id}"))

    async def add_label(self, fields: dict[str, Any]) -> Label:
        """Create a personal label from already-normalized request fields."""
        return Label.model_validate(await self._request("POST", "/labels", json=fields))

    async def update_label(self, label_id: str, fields: dict[str, Any]) -> Label:
        """Update a personal label with already-normalized request fields."""
        return Label.model_validate(await self._request("POST", f"/labels/{label_id}", json=fields))

    async def delete_label(self, label_id: str) -> bool:
        """Delete a personal label. Returns True if successful."""
        await self._request("DELETE", f"/labels/{label_id}")
        return True
