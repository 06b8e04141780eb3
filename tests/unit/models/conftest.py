"""
Test fixtures for model testing.
"""

from typing import Any

import pytest
from fixtures.confluence_mocks import (
    MOCK_CQL_SEARCH_RESPONSE,
    MOCK_PAGE_RESPONSE,
    MOCK_SPACES_RESPONSE,
)
from fixtures.gist_mocks import MOCK_GIST_RESPONSE, MOCK_GISTS_LIST_RESPONSE


@pytest.fixture
def gist_data() -> dict[str, Any]:
    """Return mock gist data."""
    return MOCK_GIST_RESPONSE


@pytest.fixture
def gists_list_data() -> list[dict[str, Any]]:
    """Return a mock page of gists."""
    return MOCK_GISTS_LIST_RESPONSE


@pytest.fixture
def confluence_page_data() -> dict[str, Any]:
    """Return mock Confluence v2 page data."""
    return MOCK_PAGE_RESPONSE


@pytest.fixture
def confluence_space_data() -> dict[str, Any]:
    """Return one mock Confluence space."""
    return MOCK_SPACES_RESPONSE["results"][0]


@pytest.fixture
def confluence_search_data() -> dict[str, Any]:
    """Return mock Confluence CQL search results."""
    return MOCK_CQL_SEARCH_RESPONSE
