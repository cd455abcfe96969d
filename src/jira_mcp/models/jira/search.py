"""
Jira search result models.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing the result of a JQL search.
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Additional arguments passed to JiraIssue.from_api_response

        Returns:
            A JiraSearchResult instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        issues = [
            JiraIssue.from_api_response(issue_data, **kwargs)
            for issue_data in data.get("issues") or []
            if isinstance(issue_data, dict)
        ]

        total = data.get("total")
        return cls(
            total=int(total) if isinstance(total, int) else len(issues),
            start_at=int(data.get("startAt", 0) or 0),
            max_results=int(data.get("maxResults", 0) or 0),
            issues=issues,
        )
