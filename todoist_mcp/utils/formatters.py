"""Formatting utilities for tool responses."""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def dump_entity(entity: BaseModel) -> dict[str, Any]:
    """Serialize an entity model, keeping fields the API sent that we do not model."""
    return entity.model_dump(mode="json")


def dump_entities(entities: Iterable[BaseModel]) -> list[dict[str, Any]]:
    return [dump_entity(e) for e in entities]


def format_response(payload: dict[str, Any]) -> str:
    """Serialize a response envelope."""
    return json.dumps(payload, indent=2)


def format_error(error: Exception | str) -> str:
    """
    Serialize a failure envelope.

    Output: {"success": false, "error": "Task not found: Buy milk"}
    """
    return format_response({"success": False, "error": str(error)})


def handle_error(error: Exception, operation: str) -> str:
    """Log a failed tool call and turn it into a failure envelope."""
    logger.warning("%s failed: %s: %s", operation, type(error).__name__, error)
    return format_error(error)
