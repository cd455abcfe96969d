"""Module for Jira issue operations."""

import logging
from typing import Any

from ..exceptions import IssueCreationError, RemoteRequestError
from ..models.jira import (
    JiraCreatedIssue,
    JiraIssue,
    JiraUpdateOutcome,
    JiraUpdateResult,
)
from .client import JiraClient
from .constants import DEFAULT_ISSUE_TYPE, ISSUE_DETAIL_FIELDS
from .protocols import TransitionOperationsProto

logger = logging.getLogger("jira-mcp")


class IssuesMixin(JiraClient, TransitionOperationsProto):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue with its rendered description.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123'); not validated locally

        Returns:
            JiraIssue with acceptance criteria extracted from the description

        Raises:
            RemoteRequestError: If the issue cannot be fetched
        """
        data = self.request(
            f"/issue/{issue_key}",
            params={
                "fields": ",".join(ISSUE_DETAIL_FIELDS),
                "expand": "renderedFields",
            },
        )
        if not isinstance(data, dict):
            msg = f"Unexpected response type for issue {issue_key}: {type(data)}"
            logger.error(msg)
            raise RemoteRequestError(msg)
        return JiraIssue.from_api_response(data, base_url=self.config.url)

    def update_issue(
        self,
        issue_key: str,
        transition: str | None = None,
        assignee: str | None = None,
        summary: str | None = None,
        description: str | None = None,
        priority: str | None = None,
    ) -> JiraUpdateResult:
        """
        Update an issue's status and/or fields.

        The transition and the field edit run independently: a failure in
        one is recorded and the other still runs. Empty values are treated
        as not supplied.

        Args:
            issue_key: The issue key
            transition: Transition name or id to apply
            assignee: Assignee email address
            summary: New summary
            description: New description
            priority: Priority name

        Returns:
            JiraUpdateResult with one outcome per phase that ran
        """
        result = JiraUpdateResult(issue_key=issue_key)

        if transition:
            try:
                target = self.resolve_transition(issue_key, transition)
                self.transition_issue(issue_key, target.id)
                result.outcomes.append(
                    JiraUpdateOutcome(
                        phase="transition",
                        success=True,
                        detail=target.to_status_name or transition,
                    )
                )
            except Exception as e:
                logger.error(f"Error transitioning issue {issue_key}: {e}")
                result.outcomes.append(
                    JiraUpdateOutcome(phase="transition", success=False, detail=str(e))
                )

        fields: dict[str, Any] = {}
        if assignee:
            fields["assignee"] = {"emailAddress": assignee}
        if summary:
            fields["summary"] = summary
        if description:
            fields["description"] = description
        if priority:
            fields["priority"] = {"name": priority}

        if fields:
            try:
                self.request(
                    f"/issue/{issue_key}", method="PUT", data={"fields": fields}
                )
                result.outcomes.append(
                    JiraUpdateOutcome(
                        phase="fields", success=True, detail=", ".join(fields)
                    )
                )
            except Exception as e:
                logger.error(f"Error updating fields of issue {issue_key}: {e}")
                result.outcomes.append(
                    JiraUpdateOutcome(phase="fields", success=False, detail=str(e))
                )

        return result

    def create_issue(
        self,
        project_key: str,
        summary: str,
        description: str | None = None,
        issue_type: str = DEFAULT_ISSUE_TYPE,
        priority: str | None = None,
        assignee: str | None = None,
        labels: list[str] | None = None,
    ) -> JiraCreatedIssue:
        """
        Create a new Jira issue.

        Args:
            project_key: The key of the project
            summary: The issue summary
            description: The issue description
            issue_type: The issue type name
            priority: Priority name
            assignee: Assignee email address
            labels: Label names

        Returns:
            JiraCreatedIssue with the new key and the submitted fields

        Raises:
            IssueCreationError: If Jira rejects the issue, with hints derived
                from the error text
        """
        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "issuetype": {"name": issue_type},
        }
        if description:
            fields["description"] = description
        if priority:
            fields["priority"] = {"name": priority}
        if assignee:
            fields["assignee"] = {"emailAddress": assignee}
        if labels:
            fields["labels"] = [{"name": label} for label in labels]

        try:
            data = self.request("/issue", method="POST", data={"fields": fields})
        except RemoteRequestError as e:
            message = str(e)
            logger.error(f"Error creating issue in project {project_key}: {message}")
            raise IssueCreationError(
                message,
                creation_hints(message, project_key, issue_type, priority),
            ) from e

        created = JiraCreatedIssue.from_api_response(
            data or {},
            base_url=self.config.url,
            project_key=project_key,
            summary=summary,
            issue_type=issue_type,
            description=description,
            priority=priority,
            assignee=assignee,
            labels=labels,
        )
        logger.info(f"Created issue {created.key} in project {project_key}")
        return created


def creation_hints(
    message: str, project_key: str, issue_type: str, priority: str | None
) -> list[str]:
    """Derive user-facing tips from a Jira create-issue error message."""
    hints = []
    if "project" in message or "Project" in message:
        hints.append(
            f'Make sure the project key "{project_key}" exists and you have '
            "permission to create issues in it."
        )
    if "issuetype" in message or "Issue Type" in message:
        hints.append(
            f'Make sure the issue type "{issue_type}" is valid for this project. '
            "Common types: Task, Bug, Story, Epic."
        )
    if "priority" in message:
        hints.append(
            f'Make sure the priority "{priority}" is valid. '
            "Common priorities: Highest, High, Medium, Low, Lowest."
        )
    return hints
