"""Tests for the Jira Transitions mixin."""

import pytest

from jira_mcp.exceptions import TransitionNotFoundError
from tests.fixtures.jira_mocks import MOCK_JIRA_TRANSITIONS_RESPONSE


class TestTransitionsMixin:
    """Tests for the TransitionsMixin class."""

    @pytest.fixture
    def transitions_fetcher(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = MOCK_JIRA_TRANSITIONS_RESPONSE
        return jira_fetcher

    def test_get_transitions(self, transitions_fetcher, mock_atlassian_jira):
        transitions = transitions_fetcher.get_transitions("PROJ-123")

        mock_atlassian_jira.get.assert_called_once_with(
            "rest/api/3/issue/PROJ-123/transitions",
            params=None,
            headers={"Accept": "application/json"},
        )
        assert [(t.id, t.name, t.to_status_name) for t in transitions] == [
            ("11", "In Review", "In Review"),
            ("21", "Done", "Done"),
            ("31", "Reopen", "To Do"),
        ]

    def test_get_transitions_empty(self, jira_fetcher, mock_atlassian_jira):
        mock_atlassian_jira.get.return_value = {}

        assert jira_fetcher.get_transitions("PROJ-123") == []

    @pytest.mark.parametrize(
        "requested,expected_id",
        [("Done", "21"), ("DONE", "21"), ("in review", "11"), ("31", "31")],
    )
    def test_resolve_transition(self, transitions_fetcher, requested, expected_id):
        assert transitions_fetcher.resolve_transition("PROJ-123", requested).id == expected_id

    def test_resolve_transition_not_found(self, transitions_fetcher):
        with pytest.raises(TransitionNotFoundError) as exc_info:
            transitions_fetcher.resolve_transition("PROJ-123", "Archive")

        assert exc_info.value.transition == "Archive"
        assert str(exc_info.value) == (
            'Transition "Archive" not found. '
            "Use jira_get_transitions to see available options."
        )

    def test_transition_issue(self, jira_fetcher, mock_atlassian_jira):
        jira_fetcher.transition_issue("PROJ-123", "21")

        mock_atlassian_jira.post.assert_called_once_with(
            "rest/api/3/issue/PROJ-123/transitions",
            data={"transition": {"id": "21"}},
            params=None,
        )
