"""
Jira workflow models.

This module provides the Pydantic model for issue status transitions.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN
from .common import JiraStatus

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    Model representing a Jira issue transition.

    A transition moves an issue from its current status to ``to_status``.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None

    @property
    def to_status_name(self) -> str | None:
        # A destination sent without a name falls back to UNKNOWN in JiraStatus
        if self.to_status is None or self.to_status.name == UNKNOWN:
            return None
        return self.to_status.name

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: The transition data from the Jira API

        Returns:
            A JiraTransition instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        to_status = None
        if to := data.get("to"):
            if isinstance(to, dict):
                to_status = JiraStatus.from_api_response(to)

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", EMPTY_STRING)),
            to_status=to_status,
        )

    def matches(self, requested: str) -> bool:
        """Match by case-insensitive name or exact id."""
        return self.name.lower() == requested.lower() or self.id == requested
