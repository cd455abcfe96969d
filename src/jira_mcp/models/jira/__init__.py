"""
Jira data models for the Jira MCP server.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .comment import JiraComment
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .issue import JiraCreatedIssue, JiraIssue
from .search import JiraSearchResult
from .update import JiraUpdateOutcome, JiraUpdateResult
from .workflow import JiraTransition

__all__ = [
    "JiraComment",
    "JiraCreatedIssue",
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraSearchResult",
    "JiraStatus",
    "JiraTransition",
    "JiraUpdateOutcome",
    "JiraUpdateResult",
    "JiraUser",
]
