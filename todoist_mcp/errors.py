"""Exception hierarchy for Todoist MCP."""

from typing import Any


class TodoistMCPError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TodoistMCPError):
    """Raised when the server cannot be configured (e.g. no API token)."""


class InvalidRequestError(TodoistMCPError):
    """Raised when caller input is rejected before any remote call is made."""


class EntityNotFoundError(InvalidRequestError):
    """Raised when a name lookup finds no matching entity."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} not found: {name}")


class TodoistAPIError(TodoistMCPError):
    """Raised for any fault reported by (or while reaching) the Todoist API."""

    def __init__(self, status_code: int, message: str, response_body: Any = None):
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        detail = f"{status_code} {message}" if status_code else message
        super().__init__(f"Todoist API error: {detail}")
