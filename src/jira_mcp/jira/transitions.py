"""Module for Jira transition operations."""

import logging

from ..exceptions import TransitionNotFoundError
from ..models.jira import JiraTransition
from .client import JiraClient

logger = logging.getLogger("jira-mcp")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the available status transitions for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            Available transitions in the order Jira returns them

        Raises:
            RemoteRequestError: If the request fails
        """
        data = self.request(f"/issue/{issue_key}/transitions")
        transitions = data.get("transitions") if isinstance(data, dict) else None
        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions or []
            if isinstance(transition, dict)
        ]

    def resolve_transition(self, issue_key: str, transition: str) -> JiraTransition:
        """
        Find the transition matching a name or id.

        Names match case-insensitively; ids match exactly.

        Args:
            issue_key: The issue key
            transition: Transition name (e.g. 'Done') or id (e.g. '31')

        Returns:
            The first matching transition

        Raises:
            TransitionNotFoundError: If no available transition matches
        """
        for candidate in self.get_transitions(issue_key):
            if candidate.matches(transition):
                return candidate
        logger.warning(f"No transition matching '{transition}' for {issue_key}")
        raise TransitionNotFoundError(transition)

    def transition_issue(self, issue_key: str, transition_id: str) -> None:
        """
        Move an issue through a transition.

        Args:
            issue_key: The issue key
            transition_id: The id of the transition to perform
        """
        self.request(
            f"/issue/{issue_key}/transitions",
            method="POST",
            data={"transition": {"id": transition_id}},
        )
        logger.info(f"Applied transition {transition_id} to {issue_key}")
