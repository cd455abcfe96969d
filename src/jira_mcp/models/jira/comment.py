"""
Jira comment models.
"""

import logging
from typing import Any

from jira_mcp.preprocessing.jira import description_to_text

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.

    The body prefers ``renderedBody`` (requested with ``expand=renderedBody``)
    over the raw ADF body.
    """

    id: str = JIRA_DEFAULT_ID
    body: str = EMPTY_STRING
    created: str = EMPTY_STRING
    author: JiraUser | None = None

    @property
    def author_name(self) -> str:
        return self.author.display_name if self.author else EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        author = None
        if author_data := data.get("author"):
            author = JiraUser.from_api_response(author_data)

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            body=description_to_text(data.get("renderedBody") or data.get("body")),
            created=str(data.get("created") or EMPTY_STRING),
            author=author,
        )
