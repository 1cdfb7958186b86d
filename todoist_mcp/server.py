"""FastMCP server initialization for Todoist MCP."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from todoist_mcp.config import TodoistConfig
from todoist_mcp.gateway import TodoistGateway

logger = logging.getLogger(__name__)

_gateway: TodoistGateway | None = None


def get_gateway() -> TodoistGateway:
    """Return the shared gateway, building it from the environment on first use."""
    global _gateway
    if _gateway is None:
        _gateway = TodoistGateway.from_config(TodoistConfig())
    return _gateway


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Close the Todoist HTTP client on shutdown."""
    try:
        yield
    finally:
        if _gateway is not None:
            await _gateway.aclose()
            logger.info("Todoist client closed")


# Initialize the MCP server
mcp = FastMCP("todoist_mcp", lifespan=lifespan)


def run() -> None:
    """Run the MCP server over stdio."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    load_dotenv()

    # Fail at startup, not on the first tool call, when no token is configured
    get_gateway()
    logger.info("Starting Todoist MCP server")
    mcp.run()
