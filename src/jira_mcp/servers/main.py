"""Main FastMCP server setup for the Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import EmbeddedResource, ImageContent, TextContent
from starlette.requests import Request
from starlette.responses import JSONResponse

from jira_mcp.exceptions import UnknownOperationError
from jira_mcp.jira.config import JiraConfig
from jira_mcp.utils.io import is_read_only_mode
from jira_mcp.utils.logging import log_config_param

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("jira-mcp.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira MCP server lifespan starting...")
    read_only = is_read_only_mode()

    jira_config = JiraConfig.from_env()
    log_config_param(logger, "URL", jira_config.url)
    log_config_param(logger, "email", jira_config.email)
    log_config_param(logger, "API token", jira_config.api_token, sensitive=True)
    if jira_config.is_auth_configured():
        logger.info("Jira configuration loaded and authentication is configured.")

    app_context = MainAppContext(full_jira_config=jira_config, read_only=read_only)
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    yield {"app_lifespan_context": app_context}
    logger.info("Main Jira MCP server lifespan shutting down.")


class JiraMCP(FastMCP[MainAppContext]):
    """Custom FastMCP server class that answers every failed call with text."""

    async def _mcp_call_tool(
        self, key: str, arguments: dict[str, Any]
    ) -> list[TextContent | ImageContent | EmbeddedResource]:
        registered_tools = await self.get_tools()
        if key not in registered_tools:
            error = UnknownOperationError(key)
            logger.warning(f"Rejected call: {error}")
            return [TextContent(type="text", text=f"Error: {error}")]
        try:
            return await super()._mcp_call_tool(key, arguments)
        except ToolError as e:
            # Argument validation fails before the tool body runs
            logger.warning(f"Tool '{key}' rejected its arguments: {e}")
            return [TextContent(type="text", text=f"Error: {e}")]


main_mcp = JiraMCP(name="Jira MCP", lifespan=main_lifespan)
main_mcp.mount("jira", jira_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.info("Added /healthz endpoint for HTTP transports")
