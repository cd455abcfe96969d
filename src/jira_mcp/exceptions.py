"""Exception types raised by the Jira handlers and the tool dispatcher."""


class JiraMCPError(Exception):
    """Base class for errors raised by jira-mcp."""


class UnknownOperationError(JiraMCPError):
    """Raised when a tool call names an operation that is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class RemoteRequestError(JiraMCPError):
    """Raised when a call to the Jira REST API fails.

    Covers both non-2xx responses and transport-level failures. The HTTP
    status code is kept when a response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class JiraAuthenticationError(RemoteRequestError):
    """Raised when Jira rejects the configured credentials (401/403)."""


class TransitionNotFoundError(JiraMCPError):
    """Raised when a requested transition matches no available transition."""

    def __init__(self, transition: str) -> None:
        self.transition = transition
        super().__init__(
            f'Transition "{transition}" not found. '
            "Use jira_get_transitions to see available options."
        )


class IssueCreationError(JiraMCPError):
    """Raised when Jira refuses to create an issue.

    Attributes:
        hints: Contextual tips derived from the error text.
    """

    def __init__(self, message: str, hints: list[str] | None = None) -> None:
        self.hints = hints or []
        super().__init__(message)
