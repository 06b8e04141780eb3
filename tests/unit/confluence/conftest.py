"""Shared fixtures for Confluence unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from rest_skills.confluence import ConfluenceFetcher
from rest_skills.confluence.config import ConfluenceConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "CONFLUENCE_URL": "https://example.atlassian.net",
            "CONFLUENCE_EMAIL": "test_user@example.com",
            "CONFLUENCE_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def mock_config():
    """Return a ConfluenceConfig instance."""
    return ConfluenceConfig(
        url="https://example.atlassian.net",
        email="test_user@example.com",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_confluence():
    """Mock the Atlassian Confluence client and the session it owns."""
    with patch("rest_skills.confluence.client.Confluence") as mock:
        confluence_instance = mock.return_value
        confluence_instance._session = MagicMock()
        confluence_instance._session.headers = {}
        yield mock


@pytest.fixture
def mock_session(mock_atlassian_confluence):
    """The session requests are sent through."""
    return mock_atlassian_confluence.return_value._session


@pytest.fixture
def confluence_fetcher(mock_config, mock_atlassian_confluence):
    """Create a ConfluenceFetcher with the Atlassian client mocked."""
    return ConfluenceFetcher(config=mock_config)
