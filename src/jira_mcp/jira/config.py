"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("jira-mcp.jira.config")

DEFAULT_JIRA_BASE_URL = "https://your-domain.atlassian.net"


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Authentication is HTTP Basic with the account email and an API token.
    The configuration is loaded once at startup and never mutated.
    """

    url: str  # Base URL for Jira, without trailing slash
    email: str = ""  # Account email
    api_token: str = ""  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates

    def browse_url(self, issue_key: str) -> str:
        """Build the web URL of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            The browse URL for the issue
        """
        return f"{self.url}/browse/{issue_key}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Missing credentials are not an error here: Jira rejects the first
        request instead.

        Returns:
            JiraConfig with values from environment variables
        """
        url = os.getenv("JIRA_BASE_URL") or DEFAULT_JIRA_BASE_URL
        email = os.getenv("JIRA_EMAIL", "")
        api_token = os.getenv("JIRA_API_TOKEN", "")

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        return cls(
            url=url.rstrip("/"),
            email=email,
            api_token=api_token,
            ssl_verify=ssl_verify,
        )

    def is_auth_configured(self) -> bool:
        """Check if both basic-auth credentials are present.

        Returns:
            bool: True if email and API token are set, False otherwise.
        """
        if not self.email or not self.api_token:
            logger.warning(
                "JIRA_EMAIL or JIRA_API_TOKEN is not set; requests will fail authentication"
            )
            return False
        return True
