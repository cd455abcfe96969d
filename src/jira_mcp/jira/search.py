"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_MAX_RESULTS, SEARCH_RESULT_FIELDS

logger = logging.getLogger("jira-mcp")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self, jql: str, max_results: int = DEFAULT_MAX_RESULTS
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        The query is sent as given; Jira reports malformed JQL as a 400.

        Args:
            jql: JQL query string
            max_results: Maximum number of issues to return

        Returns:
            JiraSearchResult with the matching issues
        """
        data = self.request(
            "/search",
            params={
                "jql": jql,
                "maxResults": max_results,
                "fields": ",".join(SEARCH_RESULT_FIELDS),
            },
        )
        result = JiraSearchResult.from_api_response(
            data or {}, base_url=self.config.url
        )
        logger.debug(f"JQL '{jql}' returned {len(result.issues)} issues")
        return result
