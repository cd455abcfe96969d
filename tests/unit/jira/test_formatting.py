"""Tests for the Jira text reports."""

from datetime import date

import pytest

from jira_mcp.exceptions import IssueCreationError
from jira_mcp.models.jira import (
    JiraComment,
    JiraCreatedIssue,
    JiraIssue,
    JiraSearchResult,
    JiraTransition,
    JiraUpdateOutcome,
    JiraUpdateResult,
)
from tests.fixtures.jira_mocks import (
    MOCK_JIRA_COMMENTS_RESPONSE,
    MOCK_JIRA_ISSUE_NO_DESCRIPTION,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_SEARCH_RESPONSE,
    MOCK_JIRA_TRANSITIONS_RESPONSE,
)

BASE_URL = "https://test.atlassian.net"


def _locale_date(year: int, month: int, day: int) -> str:
    return date(year, month, day).strftime("%x")


class TestFormatIssue:
    def test_full_report(self, jira_fetcher):
        issue = JiraIssue.from_api_response(MOCK_JIRA_ISSUE_RESPONSE, base_url=BASE_URL)

        report = jira_fetcher.format_issue(issue)

        assert report == (
            "**PROJ-123: Login page**\n"
            "\n"
            "**Status:** In Progress\n"
            "**Assignee:** Dev User\n"
            "**Priority:** High\n"
            "**URL:** https://test.atlassian.net/browse/PROJ-123\n"
            "\n"
            "**Description:**\n"
            "Users need a login page.\n\n"
            "Acceptance Criteria: user can log in\n\n"
            "- [ ] form shows errors\n"
            "\n"
            "**Acceptance Criteria:**\n"
            "1. user can log in\n"
            "2. - [ ] form shows errors\n"
            "\n"
            f"**Created:** {_locale_date(2024, 1, 1)}\n"
            f"**Updated:** {_locale_date(2024, 1, 2)}"
        )

    def test_report_without_description(self, jira_fetcher):
        issue = JiraIssue.from_api_response(
            MOCK_JIRA_ISSUE_NO_DESCRIPTION, base_url=BASE_URL
        )

        report = jira_fetcher.format_issue(issue)

        assert "**Description:**\nNo description\n" in report
        assert "**Acceptance Criteria:**\nNone found\n" in report
        assert "**Assignee:** Unassigned\n" in report

    def test_report_with_missing_dates(self, jira_fetcher):
        report = jira_fetcher.format_issue(JiraIssue(key="PROJ-9", summary="No dates"))

        assert report.endswith("**Created:** Unknown\n**Updated:** Unknown")
        assert "**URL:** https://test.atlassian.net/browse/PROJ-9" in report


class TestFormatSearchResults:
    def test_blocks(self, jira_fetcher):
        result = JiraSearchResult.from_api_response(
            MOCK_JIRA_SEARCH_RESPONSE, base_url=BASE_URL
        )

        assert jira_fetcher.format_search_results(result) == (
            "Found 2 issues:\n\n"
            "**PROJ-123**: Login page\n"
            "- Status: In Progress\n"
            "- Assignee: Dev User\n"
            "- Priority: High\n"
            "- URL: https://test.atlassian.net/browse/PROJ-123\n\n"
            "**PROJ-125**: Logout button\n"
            "- Status: To Do\n"
            "- Assignee: Unassigned\n"
            "- Priority: Low\n"
            "- URL: https://test.atlassian.net/browse/PROJ-125"
        )

    def test_zero_results(self, jira_fetcher):
        assert jira_fetcher.format_search_results(JiraSearchResult()) == "Found 0 issues:"


class TestFormatComments:
    def test_comments(self, jira_fetcher):
        comments = [
            JiraComment.from_api_response(c)
            for c in MOCK_JIRA_COMMENTS_RESPONSE["comments"]
        ]

        assert jira_fetcher.format_comments("PROJ-123", comments) == (
            "Comments for PROJ-123:\n\n"
            f"**Dev User** ({_locale_date(2024, 1, 4)}):\n<p>First comment</p>"
            "\n\n---\n\n"
            f"**Reporter User** ({_locale_date(2024, 1, 5)}):\nSecond comment"
        )

    def test_no_comments(self, jira_fetcher):
        assert jira_fetcher.format_comments("PROJ-123", []) == "Comments for PROJ-123:"


def test_format_transitions(jira_fetcher):
    transitions = [
        JiraTransition.from_api_response(t)
        for t in MOCK_JIRA_TRANSITIONS_RESPONSE["transitions"]
    ]

    assert jira_fetcher.format_transitions("PROJ-123", transitions) == (
        "Available transitions for PROJ-123:\n\n"
        "**In Review** (ID: 11) -> In Review\n"
        "**Done** (ID: 21) -> Done\n"
        "**Reopen** (ID: 31) -> To Do"
    )


class TestFormatUpdateResult:
    def test_no_updates(self, jira_fetcher):
        result = JiraUpdateResult(issue_key="PROJ-123")

        assert jira_fetcher.format_update_result(result) == (
            "Update results for PROJ-123:\n\nNo updates requested"
        )

    @pytest.mark.parametrize(
        "outcome,line",
        [
            (
                JiraUpdateOutcome(phase="transition", success=True, detail="Done"),
                "✓ Status changed to Done\n",
            ),
            (
                JiraUpdateOutcome(phase="transition", success=False, detail="boom"),
                "✗ Failed to change status: boom\n",
            ),
            (
                JiraUpdateOutcome(phase="fields", success=True, detail="summary"),
                "✓ Updated fields: summary\n",
            ),
            (
                JiraUpdateOutcome(phase="fields", success=False, detail="boom"),
                "✗ Failed to update fields: boom\n",
            ),
        ],
    )
    def test_outcome_lines(self, jira_fetcher, outcome, line):
        result = JiraUpdateResult(issue_key="PROJ-123", outcomes=[outcome])

        assert jira_fetcher.format_update_result(result) == (
            f"Update results for PROJ-123:\n\n{line}"
        )


class TestFormatCreatedIssue:
    def test_minimal(self, jira_fetcher):
        created = JiraCreatedIssue(
            key="PROJ-200",
            url="https://test.atlassian.net/browse/PROJ-200",
            project_key="PROJ",
            summary="X",
            issue_type="Task",
        )

        assert jira_fetcher.format_created_issue(created) == (
            "✓ Successfully created issue: **PROJ-200**\n"
            "\n"
            "**Summary:** X\n"
            "**Project:** PROJ\n"
            "**Issue Type:** Task\n"
            "\n"
            "**URL:** https://test.atlassian.net/browse/PROJ-200"
        )

    def test_all_fields(self, jira_fetcher):
        created = JiraCreatedIssue(
            key="PROJ-201",
            project_key="PROJ",
            summary="Broken login",
            issue_type="Bug",
            description="Steps to reproduce",
            priority="High",
            assignee="dev@example.com",
            labels=["frontend", "urgent"],
        )

        assert jira_fetcher.format_created_issue(created) == (
            "✓ Successfully created issue: **PROJ-201**\n"
            "\n"
            "**Summary:** Broken login\n"
            "**Project:** PROJ\n"
            "**Issue Type:** Bug\n"
            "**Priority:** High\n"
            "**Assignee:** dev@example.com\n"
            "**Labels:** frontend, urgent\n"
            "\n"
            "**URL:** https://test.atlassian.net/browse/PROJ-201\n"
            "\n"
            "**Description:**\n"
            "Steps to reproduce"
        )


def test_format_creation_error(jira_fetcher):
    error = IssueCreationError("project: bad", hints=["First tip.", "Second tip."])

    assert jira_fetcher.format_creation_error(error) == (
        "✗ Failed to create issue: project: bad\n\nTip: First tip.\n\nTip: Second tip."
    )
