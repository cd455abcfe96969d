"""Module for Jira comment operations."""

import logging

from ..models.jira import JiraComment
from .client import JiraClient

logger = logging.getLogger("jira-mcp")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_issue_comments(self, issue_key: str) -> list[JiraComment]:
        """
        Get the comments of an issue.

        Only the first page Jira returns is read.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Comments in the order returned by Jira
        """
        data = self.request(
            f"/issue/{issue_key}/comment", params={"expand": "renderedBody"}
        )
        comments = data.get("comments") if isinstance(data, dict) else None
        return [
            JiraComment.from_api_response(comment)
            for comment in comments or []
            if isinstance(comment, dict)
        ]
