"""Concurrent batch execution with per-item failure isolation."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)


def _echo(item: BaseModel) -> dict[str, Any]:
    return item.model_dump(mode="json", exclude_none=True)


async def run_batch(
    items: Sequence[ItemT],
    operation: Callable[[ItemT], Awaitable[dict[str, Any]]],
) -> dict[str, Any]:
    """
    Run ``operation`` on every item concurrently and aggregate the outcomes.

    A failing item becomes ``{"success": False, "error": ..., "input": ...}``
    and never affects its siblings. Results keep the order of ``items``
    regardless of completion order.

    Args:
        items: Batch items, each describing one target and its fields
        operation: Coroutine returning the success payload for one item

    Returns:
        Dict with ``success``, ``summary`` (total/succeeded/failed) and ``results``
    """

    async def run_one(item: ItemT) -> dict[str, Any]:
        try:
            payload = await operation(item)
        except Exception as e:
            logger.debug("Batch item failed: %s", e)
            return {"success": False, "error": str(e), "input": _echo(item)}
        return {"success": True, **payload}

    results = await asyncio.gather(*(run_one(item) for item in items))

    total = len(items)
    succeeded = sum(1 for result in results if result["success"])
    return {
        "success": succeeded == total,
        "summary": {"total": total, "succeeded": succeeded, "failed": total - succeeded},
        "results": list(results),
    }
