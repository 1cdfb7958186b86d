"""Configuration for Todoist MCP."""

import os

from pydantic import BaseModel, ConfigDict, Field

from todoist_mcp.errors import ConfigurationError

TOKEN_ENV_VAR = "TODOIST_API_TOKEN"
DEFAULT_BASE_URL = "https://api.todoist.com/api/v1"


class TodoistConfig(BaseModel):
    """Recognized server options."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    api_token: str | None = Field(
        default=None,
        alias="apiToken",
        description=f"Todoist API token (falls back to the {TOKEN_ENV_VAR} environment variable)",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Todoist REST API base URL")
    timeout: float = Field(default=30.0, description="Per-request timeout in seconds", gt=0)


def resolve_api_token(config: TodoistConfig | None = None) -> str:
    """
    Resolve the API token once, at construction time.

    An explicit config value wins; otherwise the environment variable is used.

    Raises:
        ConfigurationError: If neither source provides a token
    """
    token = config.api_token if config else None
    if not token:
        token = os.environ.get(TOKEN_ENV_VAR, "").strip() or None
    if not token:
        raise ConfigurationError(
            f"Todoist API token is required. Provide it via config or set the {TOKEN_ENV_VAR} "
            "environment variable. Get your API token from "
            "https://todoist.com/app/settings/integrations/developer"
        )
    return token
