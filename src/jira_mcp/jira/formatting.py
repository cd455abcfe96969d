"""Module for rendering Jira results as text reports."""

import logging

from ..exceptions import IssueCreationError
from ..models.constants import UNKNOWN
from ..models.jira import (
    JiraComment,
    JiraCreatedIssue,
    JiraIssue,
    JiraSearchResult,
    JiraTransition,
    JiraUpdateResult,
)
from ..utils.date import format_locale_date
from .client import JiraClient

logger = logging.getLogger("jira-mcp")

NO_DESCRIPTION = "No description"
NO_CRITERIA = "None found"
NO_UPDATES = "No updates requested"


class FormattingMixin(JiraClient):
    """Mixin for turning Jira models into the Markdown-flavoured text reports."""

    def format_issue(self, issue: JiraIssue) -> str:
        """
        Render the full report for a single issue.

        Args:
            issue: The issue to render

        Returns:
            Multi-line report: title, status block, description, acceptance
            criteria and dates, always in that order
        """
        if issue.acceptance_criteria:
            criteria = "\n".join(
                f"{index}. {criterion}"
                for index, criterion in enumerate(issue.acceptance_criteria, 1)
            )
        else:
            criteria = NO_CRITERIA

        return (
            f"**{issue.key}: {issue.summary}**\n"
            "\n"
            f"**Status:** {issue.status.name}\n"
            f"**Assignee:** {issue.assignee_name}\n"
            f"**Priority:** {issue.priority.name}\n"
            f"**URL:** {issue.url or self.browse_url(issue.key)}\n"
            "\n"
            "**Description:**\n"
            f"{issue.description or NO_DESCRIPTION}\n"
            "\n"
            "**Acceptance Criteria:**\n"
            f"{criteria}\n"
            "\n"
            f"**Created:** {format_locale_date(issue.created)}\n"
            f"**Updated:** {format_locale_date(issue.updated)}"
        )

    def format_search_results(self, result: JiraSearchResult) -> str:
        blocks = [f"Found {len(result.issues)} issues:"]
        for issue in result.issues:
            blocks.append(
                f"**{issue.key}**: {issue.summary}\n"
                f"- Status: {issue.status.name}\n"
                f"- Assignee: {issue.assignee_name}\n"
                f"- Priority: {issue.priority.name}\n"
                f"- URL: {issue.url or self.browse_url(issue.key)}"
            )
        return "\n\n".join(blocks)

    def format_comments(self, issue_key: str, comments: list[JiraComment]) -> str:
        header = f"Comments for {issue_key}:"
        if not comments:
            return header
        body = "\n\n---\n\n".join(
            f"**{comment.author_name}** ({format_locale_date(comment.created)}):\n"
            f"{comment.body}"
            for comment in comments
        )
        return f"{header}\n\n{body}"

    def format_transitions(
        self, issue_key: str, transitions: list[JiraTransition]
    ) -> str:
        lines = "\n".join(
            f"**{transition.name}** (ID: {transition.id}) -> "
            f"{transition.to_status_name or UNKNOWN}"
            for transition in transitions
        )
        return f"Available transitions for {issue_key}:\n\n{lines}"

    def format_update_result(self, result: JiraUpdateResult) -> str:
        """
        Render one line per update phase that ran.

        Args:
            result: Outcomes of the update

        Returns:
            The report, or "No updates requested" in place of the lines
        """
        lines = []
        for outcome in result.outcomes:
            if outcome.phase == "transition":
                if outcome.success:
                    lines.append(f"✓ Status changed to {outcome.detail}\n")
                else:
                    lines.append(f"✗ Failed to change status: {outcome.detail}\n")
            elif outcome.success:
                lines.append(f"✓ Updated fields: {outcome.detail}\n")
            else:
                lines.append(f"✗ Failed to update fields: {outcome.detail}\n")

        body = "".join(lines) or NO_UPDATES
        return f"Update results for {result.issue_key}:\n\n{body}"

    def format_created_issue(self, created: JiraCreatedIssue) -> str:
        """
        Render the confirmation for a newly created issue.

        Optional fields only appear when they were supplied.

        Args:
            created: The created issue

        Returns:
            The confirmation report
        """
        lines = [
            f"✓ Successfully created issue: **{created.key}**",
            "",
            f"**Summary:** {created.summary}",
            f"**Project:** {created.project_key}",
            f"**Issue Type:** {created.issue_type}",
        ]
        if created.priority:
            lines.append(f"**Priority:** {created.priority}")
        if created.assignee:
            lines.append(f"**Assignee:** {created.assignee}")
        if created.labels:
            lines.append(f"**Labels:** {', '.join(created.labels)}")
        lines.extend(["", f"**URL:** {created.url or self.browse_url(created.key)}"])
        if created.description:
            lines.extend(["", "**Description:**", created.description])
        return "\n".join(lines)

    def format_creation_error(self, error: IssueCreationError) -> str:
        tips = "".join(f"\n\nTip: {hint}" for hint in error.hints)
        return f"✗ Failed to create issue: {error}{tips}"
