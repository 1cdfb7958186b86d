"""Pytest configuration and fixtures for todoist-mcp tests."""

from unittest.mock import MagicMock

import pytest

from todoist_mcp import server
from todoist_mcp.client import TodoistClient
from todoist_mcp.gateway import TodoistGateway
from todoist_mcp.models.entities import Label, Project, Section, Task


@pytest.fixture
def sample_tasks():
    """Tasks in API order."""
    return [
        Task(id="t1", content="Buy groceries", project_id="p1", priority=1),
        Task(id="t2", content="Fix login bug", project_id="p2", priority=4, labels=["work"]),
        Task(id="t3", content="Call the dentist", project_id="p1", priority=3),
        Task(id="t4", content="Write report", project_id="p2", priority=4),
    ]


@pytest.fixture
def sample_projects():
    return [
        Project(id="p1", name="Home"),
        Project(id="p2", name="Work", color="blue"),
        Project(id="p3", name="Kitchen", parent_id="p1"),
    ]


@pytest.fixture
def sample_labels():
    return [
        Label(id="l1", name="work"),
        Label(id="l2", name="workout"),
        Label(id="l3", name="Errand"),
    ]


@pytest.fixture
def sample_section():
    return Section(id="s1", project_id="p1", name="Backlog", order=1)


@pytest.fixture
def mock_client(sample_tasks, sample_projects, sample_labels):
    """
    A TodoistClient double; its coroutine methods become AsyncMocks.

    Collection reads return the sample data by default.
    """
    client = MagicMock(spec=TodoistClient)
    client.get_tasks.return_value = sample_tasks
    client.get_projects.return_value = sample_projects
    client.get_labels.return_value = sample_labels
    return client


@pytest.fixture
def gateway(mock_client):
    return TodoistGateway(mock_client)


@pytest.fixture
def installed_gateway(gateway, monkeypatch):
    """Make the tool handlers use the mocked gateway."""
    monkeypatch.setattr(server, "_gateway", gateway)
    return gateway
