"""Constants specific to Jira operations."""

# Fields requested when reading a single issue
ISSUE_DETAIL_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "assignee",
    "priority",
    "created",
    "updated",
    "description",
    "issuetype",
    "reporter",
    "parent",
)

# Fields requested for each issue in a JQL search
SEARCH_RESULT_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "assignee",
    "priority",
    "created",
    "updated",
)

DEFAULT_MAX_RESULTS = 50
DEFAULT_ISSUE_TYPE = "Task"
