"""Shared fixtures for Gist unit tests."""

from unittest.mock import MagicMock

import pytest
import requests

from rest_skills.gist import GistFetcher
from rest_skills.gist.config import GistConfig


@pytest.fixture
def mock_config():
    """Return a GistConfig with a fake token."""
    return GistConfig(token="ghp_test_token_123456")


@pytest.fixture
def mock_session():
    """Return a requests.Session double with a real headers dict."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def gist_fetcher(mock_config, mock_session):
    """Create a GistFetcher wired to the mocked session."""
    return GistFetcher(config=mock_config, session=mock_session)
