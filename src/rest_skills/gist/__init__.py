"""GitHub Gist API integration module."""

from .client import GistClient
from .config import GistConfig
from .files import FilesMixin
from .gists import GistsMixin


class GistFetcher(GistsMixin, FilesMixin):
    """Main entry point for Gist operations.

    Combines the gist-level and file-level operations.
    """

    pass


__all__ = ["GistFetcher", "GistConfig", "GistClient"]
