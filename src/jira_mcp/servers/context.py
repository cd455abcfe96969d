from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_mcp.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Jira configuration loaded from environment variables
    at server startup, shared read-only by every tool call.
    """

    full_jira_config: JiraConfig | None = None
    read_only: bool = False
