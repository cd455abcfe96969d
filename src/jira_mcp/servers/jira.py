"""Jira FastMCP server instance and tool definitions."""

import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from jira_mcp.exceptions import IssueCreationError
from jira_mcp.jira.constants import DEFAULT_ISSUE_TYPE, DEFAULT_MAX_RESULTS
from jira_mcp.servers.dependencies import get_jira_fetcher
from jira_mcp.utils.decorators import check_write_access, report_errors_as_text

logger = logging.getLogger(__name__)

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides tools for reading and updating Jira Cloud issues.",
)

# Advertised names once mounted under the "jira" prefix
TOOL_NAMES: tuple[str, ...] = (
    "jira_get_issue",
    "jira_search_issues",
    "jira_get_issue_comments",
    "jira_get_transitions",
    "jira_update_issue",
    "jira_create_issue",
)


@jira_mcp.tool(tags={"jira", "read"})
@report_errors_as_text
async def get_issue(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
) -> str:
    """Get detailed information about a Jira issue including its acceptance criteria.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        Text report with status, assignee, priority, description,
        acceptance criteria and dates.
    """
    jira = await get_jira_fetcher(ctx)
    issue = jira.get_issue(issue_key)
    return jira.format_issue(issue)


@jira_mcp.tool(tags={"jira", "read"})
@report_errors_as_text
async def search_issues(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "JQL query string (Jira Query Language). Examples:\n"
                '- Open bugs: "project = PROJ AND issuetype = Bug AND status != Done"\n'
                '- My work: "assignee = currentUser() ORDER BY updated DESC"\n'
                '- Recent changes: "updated >= -7d AND project = PROJ"'
            )
        ),
    ],
    max_results: Annotated[
        int,
        Field(
            description="Maximum number of results to return",
            default=DEFAULT_MAX_RESULTS,
        ),
    ] = DEFAULT_MAX_RESULTS,
) -> str:
    """Search for Jira issues using JQL (Jira Query Language).

    Args:
        ctx: The FastMCP context.
        jql: JQL query string.
        max_results: Maximum number of results.

    Returns:
        Text report with one block per matching issue.
    """
    jira = await get_jira_fetcher(ctx)
    result = jira.search_issues(jql, max_results=max_results or DEFAULT_MAX_RESULTS)
    return jira.format_search_results(result)


@jira_mcp.tool(tags={"jira", "read"})
@report_errors_as_text
async def get_issue_comments(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
) -> str:
    """Get the comments of a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        Text report with author, date and body of each comment.
    """
    jira = await get_jira_fetcher(ctx)
    comments = jira.get_issue_comments(issue_key)
    return jira.format_comments(issue_key, comments)


@jira_mcp.tool(tags={"jira", "read"})
@report_errors_as_text
async def get_transitions(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
) -> str:
    """Get the status transitions currently available for a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        Text report listing each transition's name, ID and target status.
    """
    jira = await get_jira_fetcher(ctx)
    transitions = jira.get_transitions(issue_key)
    return jira.format_transitions(issue_key, transitions)


@jira_mcp.tool(tags={"jira", "write"})
@report_errors_as_text
@check_write_access
async def update_issue(
    ctx: Context,
    issue_key: Annotated[str, Field(description="Jira issue key (e.g., 'PROJ-123')")],
    transition: Annotated[
        str | None,
        Field(
            description=(
                "Transition name or ID to change the status (e.g., 'In Progress', 'Done'). "
                "Use jira_get_transitions to see the options."
            ),
            default=None,
        ),
    ] = None,
    assignee: Annotated[
        str | None,
        Field(description="Email address of the new assignee", default=None),
    ] = None,
    summary: Annotated[
        str | None, Field(description="New summary (title)", default=None)
    ] = None,
    description: Annotated[
        str | None, Field(description="New description", default=None)
    ] = None,
    priority: Annotated[
        str | None,
        Field(
            description="Priority name (e.g., 'High', 'Medium', 'Low')", default=None
        ),
    ] = None,
) -> str:
    """Update a Jira issue: change its status and/or edit its fields.

    The status change and the field edit are attempted independently and
    each reports its own result.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        transition: Transition name or ID.
        assignee: Assignee email address.
        summary: New summary.
        description: New description.
        priority: Priority name.

    Returns:
        One result line per attempted change.

    Raises:
        ValueError: If in read-only mode.
    """
    jira = await get_jira_fetcher(ctx)
    result = jira.update_issue(
        issue_key,
        transition=transition,
        assignee=assignee,
        summary=summary,
        description=description,
        priority=priority,
    )
    return jira.format_update_result(result)


@jira_mcp.tool(tags={"jira", "write"})
@report_errors_as_text
@check_write_access
async def create_issue(
    ctx: Context,
    project_key: Annotated[
        str, Field(description="The Jira project key (e.g., 'PROJ')")
    ],
    summary: Annotated[str, Field(description="Summary/title of the issue")],
    description: Annotated[
        str | None, Field(description="Issue description", default=None)
    ] = None,
    issue_type: Annotated[
        str,
        Field(
            description="Issue type (e.g., 'Task', 'Bug', 'Story', 'Epic')",
            default=DEFAULT_ISSUE_TYPE,
        ),
    ] = DEFAULT_ISSUE_TYPE,
    priority: Annotated[
        str | None,
        Field(
            description="Priority name (e.g., 'High', 'Medium', 'Low')", default=None
        ),
    ] = None,
    assignee: Annotated[
        str | None,
        Field(description="Email address of the assignee", default=None),
    ] = None,
    labels: Annotated[
        list[str] | None,
        Field(description="Labels to add to the issue", default=None),
    ] = None,
) -> str:
    """Create a new Jira issue.

    Args:
        ctx: The FastMCP context.
        project_key: The project key.
        summary: Issue summary.
        description: Issue description.
        issue_type: Issue type name.
        priority: Priority name.
        assignee: Assignee email address.
        labels: Label names.

    Returns:
        Confirmation with the new issue key and URL, or the failure with tips.

    Raises:
        ValueError: If in read-only mode.
    """
    jira = await get_jira_fetcher(ctx)
    try:
        created = jira.create_issue(
            project_key=project_key,
            summary=summary,
            description=description,
            issue_type=issue_type or DEFAULT_ISSUE_TYPE,
            priority=priority,
            assignee=assignee,
            labels=labels,
        )
    except IssueCreationError as e:
        return jira.format_creation_error(e)
    return jira.format_created_issue(created)
