"""
Jira issue models.

This module provides Pydantic models for Jira issues as read through
``GET /issue`` and ``GET /search``, and for the result of creating one.
"""

import logging
from typing import Any

from pydantic import Field

from jira_mcp.preprocessing.jira import (
    description_to_text,
    extract_acceptance_criteria,
)

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY, UNASSIGNED
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    The description prefers the rendered (HTML) value requested through
    ``expand=renderedFields`` and falls back to the raw field, with Atlassian
    Document Format flattened to text. Acceptance criteria are derived from
    that description.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str | None = None
    status: JiraStatus = Field(default_factory=JiraStatus)
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    priority: JiraPriority = Field(default_factory=JiraPriority)
    issue_type: JiraIssueType | None = None
    parent_key: str | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    url: str | None = None
    acceptance_criteria: list[str] = Field(default_factory=list)

    @property
    def assignee_name(self) -> str:
        """Display name of the assignee, or 'Unassigned'."""
        return self.assignee.display_name if self.assignee else UNASSIGNED

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: Additional arguments:
                base_url: Jira base URL used to build the browse URL

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        fields = data.get("fields") or {}
        rendered = data.get("renderedFields") or {}
        key = str(data.get("key", JIRA_DEFAULT_KEY))

        description = description_to_text(
            rendered.get("description") or fields.get("description")
        )

        assignee = None
        if assignee_data := fields.get("assignee"):
            assignee = JiraUser.from_api_response(assignee_data)

        reporter = None
        if reporter_data := fields.get("reporter"):
            reporter = JiraUser.from_api_response(reporter_data)

        issue_type = None
        if issue_type_data := fields.get("issuetype"):
            issue_type = JiraIssueType.from_api_response(issue_type_data)

        parent = fields.get("parent")
        parent_key = parent.get("key") if isinstance(parent, dict) else None

        url = None
        if base_url := kwargs.get("base_url"):
            url = f"{base_url}/browse/{key}"

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=key,
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=description or None,
            status=JiraStatus.from_api_response(fields.get("status") or {}),
            assignee=assignee,
            reporter=reporter,
            priority=JiraPriority.from_api_response(fields.get("priority") or {}),
            issue_type=issue_type,
            parent_key=parent_key,
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
            url=url,
            acceptance_criteria=extract_acceptance_criteria(description),
        )


class JiraCreatedIssue(ApiModel):
    """
    Model representing a newly created Jira issue.

    Jira only answers with the new id and key, so the request fields are
    kept alongside them for reporting.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    url: str | None = None
    project_key: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    issue_type: str = EMPTY_STRING
    description: str | None = None
    priority: str | None = None
    assignee: str | None = None
    labels: list[str] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCreatedIssue":
        """
        Create a JiraCreatedIssue from the ``POST /issue`` response.

        Args:
            data: The response body ({"id", "key", "self"})
            **kwargs: base_url plus the submitted request fields
                (project_key, summary, issue_type, description, priority,
                assignee, labels)

        Returns:
            A JiraCreatedIssue instance
        """
        data = data if isinstance(data, dict) else {}
        key = str(data.get("key", JIRA_DEFAULT_KEY))

        url = None
        if base_url := kwargs.get("base_url"):
            url = f"{base_url}/browse/{key}"

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=key,
            url=url,
            project_key=kwargs.get("project_key") or EMPTY_STRING,
            summary=kwargs.get("summary") or EMPTY_STRING,
            issue_type=kwargs.get("issue_type") or EMPTY_STRING,
            description=kwargs.get("description") or None,
            priority=kwargs.get("priority") or None,
            assignee=kwargs.get("assignee") or None,
            labels=list(kwargs.get("labels") or []),
        )
