"""Confluence Cloud API integration module."""

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .pages import PagesMixin
from .search import SearchMixin
from .spaces import SpacesMixin


class ConfluenceFetcher(SearchMixin, SpacesMixin, PagesMixin):
    """Main entry point for Confluence operations.

    Combines the space, page and search operations.
    """

    pass


__all__ = ["ConfluenceFetcher", "ConfluenceConfig", "ConfluenceClient"]
