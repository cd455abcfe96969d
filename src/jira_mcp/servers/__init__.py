"""Server implementations for the Jira MCP server."""

from .jira import TOOL_NAMES, jira_mcp
from .main import main_mcp

__all__ = ["TOOL_NAMES", "jira_mcp", "main_mcp"]
