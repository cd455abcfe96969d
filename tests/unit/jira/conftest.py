"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_mcp.jira import JiraFetcher
from jira_mcp.jira.client import JiraClient
from jira_mcp.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "https://test.atlassian.net",
            "JIRA_EMAIL": "test@example.com",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance for tests."""
    return JiraConfig(
        url="https://test.atlassian.net",
        email="test@example.com",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = lambda resource: f"rest/api/3/{resource}"
    mock_jira.get.return_value = {}
    mock_jira.post.return_value = {}
    mock_jira.put.return_value = None
    yield mock_jira


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """Create a JiraClient instance with mocked dependencies."""
    with patch("jira_mcp.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        client = JiraClient(config=mock_config)
        yield client


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher instance with mocked dependencies."""
    with patch("jira_mcp.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        fetcher = JiraFetcher(config=mock_config)
        yield fetcher
