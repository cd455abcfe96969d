"""Jira API module for jira_mcp.

This module provides the Jira client and the operations exposed as tools.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .formatting import FormattingMixin
from .issues import IssuesMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    FormattingMixin,
    TransitionsMixin,
    CommentsMixin,
    SearchMixin,
    IssuesMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - FormattingMixin: Text reports for tool responses
    - TransitionsMixin: Issue transition operations
    - CommentsMixin: Comment operations
    - SearchMixin: JQL search
    - IssuesMixin: Issue read, create and update
    """


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
