"""Base client module for Jira API interactions."""

import logging
from typing import Any, Literal

from atlassian import Jira
from requests import Session
from requests.exceptions import HTTPError, RequestException

from jira_mcp.exceptions import JiraAuthenticationError, RemoteRequestError

from .config import JiraConfig

# Configure logging
logger = logging.getLogger("jira-mcp")

JIRA_API_VERSION = "3"

HttpMethod = Literal["GET", "POST", "PUT"]


class JiraClient:
    """Base client for Jira API interactions."""

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
        """
        # Load configuration from environment variables if not provided
        self.config = config or JiraConfig.from_env()

        # Basic auth header is sent even when the credentials are empty
        session = Session()
        session.auth = (self.config.email, self.config.api_token)

        self.jira = Jira(
            url=self.config.url,
            session=session,
            cloud=True,
            api_version=JIRA_API_VERSION,
            verify_ssl=self.config.ssl_verify,
        )

    def browse_url(self, issue_key: str) -> str:
        """Return the web URL of an issue."""
        return self.config.browse_url(issue_key)

    def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:  # noqa: ANN401 - JSON payloads have no fixed shape
        """
        Perform one request against the Jira REST API v3.

        Args:
            endpoint: Path below /rest/api/3 (e.g. '/issue/PROJ-123')
            method: HTTP method, GET unless POST or PUT is requested
            params: Query parameters, passed through unmodified
            data: JSON body, passed through unmodified

        Returns:
            The decoded JSON response, or None for empty responses

        Raises:
            JiraAuthenticationError: If Jira rejects the credentials (401/403)
            RemoteRequestError: On any other HTTP or transport failure
            ValueError: If the method is not supported
        """
        if method not in ("GET", "POST", "PUT"):
            raise ValueError(f"Unsupported HTTP method: {method}")

        path = self.jira.resource_url(endpoint.lstrip("/"))
        logger.debug(f"{method} {path} params={params}")

        try:
            if method == "GET":
                return self.jira.get(
                    path, params=params, headers={"Accept": "application/json"}
                )
            if method == "POST":
                return self.jira.post(path, data=data, params=params)
            return self.jira.put(path, data=data, params=params)
        except HTTPError as http_err:
            status_code = (
                http_err.response.status_code
                if http_err.response is not None
                else None
            )
            if status_code in [401, 403]:
                error_msg = (
                    f"Authentication failed for Jira API ({status_code}). "
                    "Check JIRA_EMAIL and JIRA_API_TOKEN."
                )
                logger.error(error_msg)
                raise JiraAuthenticationError(error_msg, status_code) from http_err
            error_msg = str(http_err) or f"Request failed with status {status_code}"
            logger.error(f"HTTP error during {method} {path}: {error_msg}")
            raise RemoteRequestError(error_msg, status_code) from http_err
        except RequestException as req_err:
            logger.error(f"Request error during {method} {path}: {req_err}")
            raise RemoteRequestError(str(req_err)) from req_err
