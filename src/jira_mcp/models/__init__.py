"""
Pydantic models for Jira API responses.

This package provides type-safe models for working with Jira data,
including conversion methods from API responses to structured models and
simplified dictionaries.
"""

from .base import ApiModel
from .jira import (
    JiraComment,
    JiraCreatedIssue,
    JiraIssue,
    JiraIssueType,
    JiraPriority,
    JiraSearchResult,
    JiraStatus,
    JiraTransition,
    JiraUpdateOutcome,
    JiraUpdateResult,
    JiraUser,
)

__all__ = [
    "ApiModel",
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
