"""Dependency provider for JiraFetcher.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from jira_mcp.jira import JiraFetcher
from jira_mcp.servers.context import MainAppContext

logger = logging.getLogger("jira-mcp.servers.dependencies")


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher built from the configuration loaded at startup.

    A new fetcher is created for every call; nothing is shared between calls
    except the immutable configuration.

    Args:
        ctx: The FastMCP context.

    Returns:
        JiraFetcher instance for the current call.

    Raises:
        ValueError: If the server lifespan did not provide a Jira configuration.
    """
    lifespan_ctx_dict = ctx.request_context.lifespan_context
    app_lifespan_ctx: MainAppContext | None = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    if not app_lifespan_ctx or not app_lifespan_ctx.full_jira_config:
        logger.error("Jira configuration could not be resolved from lifespan context.")
        raise ValueError(
            "Jira client (fetcher) not available. Ensure server is configured correctly."
        )
    logger.debug("get_jira_fetcher: creating JiraFetcher from global config.")
    return JiraFetcher(config=app_lifespan_ctx.full_jira_config)
