"""Entry point for ``python -m todoist_mcp``."""

from todoist_mcp.server import run

run()
