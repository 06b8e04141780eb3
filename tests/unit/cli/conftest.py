"""Shared fixtures for CLI tests."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_gist_fetcher():
    """Replace the GistFetcher built by the gist CLI."""
    with (
        patch("rest_skills.cli.gist.GistConfig"),
        patch("rest_skills.cli.gist.GistFetcher") as mock_cls,
    ):
        fetcher = MagicMock()
        mock_cls.return_value = fetcher
        yield fetcher


@pytest.fixture
def mock_confluence_fetcher():
    """Replace the ConfluenceFetcher built by the confluence CLI."""
    with (
        patch("rest_skills.cli.confluence.ConfluenceConfig"),
        patch("rest_skills.cli.confluence.ConfluenceFetcher") as mock_cls,
    ):
        fetcher = MagicMock()
        mock_cls.return_value = fetcher
        yield fetcher
