"""Module for Jira protocol definitions."""

from abc import abstractmethod
from typing import Protocol

from ..models.jira import JiraTransition


class TransitionOperationsProto(Protocol):
    """Protocol defining transition operations interface."""

    @abstractmethod
    def resolve_transition(self, issue_key: str, transition: str) -> JiraTransition:
        """Find the available transition matching a name or id."""

    @abstractmethod
    def transition_issue(self, issue_key: str, transition_id: str) -> None:
        """Apply a transition to an issue."""
