"""Tests for request-body normalization."""

import logging

import pytest

from todoist_mcp.errors import InvalidRequestError
from todoist_mcp.models.inputs import (
    CreateLabelItem,
    CreateProjectItem,
    CreateSectionItem,
    CreateTaskItem,
    MoveTaskItem,
    UpdateProjectItem,
    UpdateTaskItem,
)
from todoist_mcp.utils.payloads import (
    DEFAULT_COLOR,
    build_label_fields,
    build_move_destination,
    build_project_create,
    build_project_update,
    build_section_create,
    build_task_create,
    build_task_update,
    validate_color,
)


class TestTaskPayloads:
    """Tests for task create/update bodies."""

    def test_create_minimal(self):
        assert build_task_create(CreateTaskItem(content="Buy milk")) == {"content": "Buy milk"}

    def test_create_drops_unset_fields(self):
        body = build_task_create(CreateTaskItem(content="Buy milk", project_id="p1", labels=["errand"]))
        assert body == {"content": "Buy milk", "project_id": "p1", "labels": ["errand"]}
        assert None not in body.values()

    def test_due_datetime_wins_over_due_date(self):
        item = CreateTaskItem(content="Call", due_date="2025-01-01", due_datetime="2025-01-01T10:00:00Z")
        body = build_task_create(item)
        assert body["due_datetime"] == "2025-01-01T10:00:00Z"
        assert "due_date" not in body

    def test_due_date_alone(self):
        body = build_task_create(CreateTaskItem(content="Call", due_date="2025-01-01"))
        assert body["due_date"] == "2025-01-01"

    def test_duration_requires_unit(self):
        body = build_task_create(CreateTaskItem(content="Focus", duration=30))
        assert "duration" not in body
        assert "duration_unit" not in body

    def test_duration_with_unit(self):
        body = build_task_create(CreateTaskItem(content="Focus", duration=30, duration_unit="minute"))
        assert body["duration"] == 30
        assert body["duration_unit"] == "minute"

    def test_update_ignores_target_fields(self):
        body = build_task_update(UpdateTaskItem(task_id="t1", content="Renamed", priority=4))
        assert body == {"content": "Renamed", "priority": 4}

    def test_priority_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            CreateTaskItem(content="x", priority=5)


class TestColorValidation:
    """Tests for colour coercion."""

    def test_valid_color_kept(self):
        assert validate_color("berry_red") == "berry_red"

    def test_invalid_color_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert validate_color("neon_pink") == DEFAULT_COLOR
        assert "neon_pink" in caplog.text

    def test_project_create_coerces_color(self):
        body = build_project_create(CreateProjectItem(name="Home", color="neon_pink"))
        assert body["color"] == "grey"

    def test_label_fields_coerce_color(self):
        assert build_label_fields(CreateLabelItem(name="work", color="nope"))["color"] == "grey"

    def test_no_color_sent_when_absent(self):
        assert "color" not in build_label_fields(CreateLabelItem(name="work"))


class TestProjectPayloads:
    """Tests for project and section bodies."""

    def test_favorite_renamed(self):
        body = build_project_create(CreateProjectItem(name="Home", favorite=True, view_style="board"))
        assert body == {"name": "Home", "is_favorite": True, "view_style": "board"}

    def test_resolved_parent_overrides(self):
        body = build_project_create(CreateProjectItem(name="Kitchen", parent_name="Home"), parent_id="p1")
        assert body["parent_id"] == "p1"
        assert "parent_name" not in body
        assert "sections" not in body

    def test_update_body(self):
        body = build_project_update(UpdateProjectItem(project_name="Home", name="House"))
        assert body == {"name": "House"}

    def test_section_body(self):
        body = build_section_create("p1", CreateSectionItem(project_name="Home", name="Backlog", order=2))
        assert body == {"project_id": "p1", "name": "Backlog", "order": 2}


class TestMoveDestination:
    """Tests for move destination validation."""

    def test_single_destination(self):
        assert build_move_destination(MoveTaskItem(task_id="t1", section_id="s1")) == {"section_id": "s1"}

    def test_no_destination_rejected(self):
        with pytest.raises(InvalidRequestError, match="Exactly one of project_id, section_id, or parent_id"):
            build_move_destination(MoveTaskItem(task_id="t1"))

    def test_two_destinations_rejected(self):
        with pytest.raises(InvalidRequestError):
            build_move_destination(MoveTaskItem(task_id="t1", project_id="p1", parent_id="t2"))
