"""Tests for batch fan-out and name resolution."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from todoist_mcp.errors import EntityNotFoundError, InvalidRequestError
from todoist_mcp.models.entities import Label, Task
from todoist_mcp.models.inputs import TaskTarget
from todoist_mcp.utils.batch import run_batch
from todoist_mcp.utils.resolvers import EntityResolver


class TestRunBatch:
    """Tests for run_batch."""

    @pytest.mark.asyncio
    async def test_results_keep_input_order(self):
        delays = {"a": 0.03, "b": 0.0, "c": 0.01}

        async def operation(item):
            await asyncio.sleep(delays[item.task_id])
            return {"task_id": item.task_id}

        items = [TaskTarget(task_id=key) for key in ("a", "b", "c")]
        result = await run_batch(items, operation)

        assert [r["task_id"] for r in result["results"]] == ["a", "b", "c"]
        assert result["success"] is True
        assert result["summary"] == {"total": 3, "succeeded": 3, "failed": 0}

    @pytest.mark.asyncio
    async def test_failure_is_isolated(self):
        async def operation(item):
            if item.task_name == "bad":
                raise EntityNotFoundError("task", "bad")
            return {"task_id": item.task_name}

        items = [TaskTarget(task_name="ok"), TaskTarget(task_name="bad"), TaskTarget(task_name="fine")]
        result = await run_batch(items, operation)

        assert result["success"] is False
        assert result["summary"] == {"total": 3, "succeeded": 2, "failed": 1}
        failed = result["results"][1]
        assert failed == {"success": False, "error": "Task not found: bad", "input": {"task_name": "bad"}}
        assert result["results"][0]["success"] is True
        assert result["results"][2]["success"] is True


class TestEntityResolver:
    """Tests for EntityResolver."""

    @pytest.fixture
    def tasks(self):
        return [Task(id="1", content="Buy Milk today"), Task(id="2", content="buy milk tomorrow")]

    @pytest.mark.asyncio
    async def test_explicit_id_skips_fetch(self, tasks):
        fetch = AsyncMock(return_value=tasks)
        resolver = EntityResolver("task", fetch, lambda t: t.content)
        assert await resolver.resolve("99", "Buy") == "99"
        fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_substring_match_is_case_insensitive_and_first_wins(self, tasks):
        resolver = EntityResolver("task", AsyncMock(return_value=tasks), lambda t: t.content)
        assert await resolver.resolve(None, "BUY MILK") == "1"

    @pytest.mark.asyncio
    async def test_no_match(self, tasks):
        resolver = EntityResolver("task", AsyncMock(return_value=tasks), lambda t: t.content)
        with pytest.raises(EntityNotFoundError, match="Task not found: Walk dog"):
            await resolver.resolve(None, "Walk dog")

    @pytest.mark.asyncio
    async def test_neither_id_nor_name(self, tasks):
        resolver = EntityResolver("task", AsyncMock(return_value=tasks), lambda t: t.content)
        with pytest.raises(InvalidRequestError, match="Either task_id or task_name must be provided"):
            await resolver.resolve(None, None)

    @pytest.mark.asyncio
    async def test_exact_match(self):
        labels = [Label(id="l1", name="workout"), Label(id="l2", name="Work")]
        resolver = EntityResolver("label", AsyncMock(return_value=labels), lambda lbl: lbl.name, exact=True)
        assert await resolver.resolve(None, "work") == "l2"
        with pytest.raises(EntityNotFoundError):
            await resolver.resolve(None, "wor")

    @pytest.mark.asyncio
    async def test_concurrent_lookups_share_one_fetch(self, tasks):
        fetch = AsyncMock(return_value=tasks)
        resolver = EntityResolver("task", fetch, lambda t: t.content)
        ids = await asyncio.gather(resolver.resolve(None, "today"), resolver.resolve(None, "tomorrow"))
        assert ids == ["1", "2"]
        fetch.assert_awaited_once()
